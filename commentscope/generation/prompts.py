"""Prompt templates for video script generation."""

SCRIPT_PROMPT = """You are an expert YouTube content creator and video scriptwriter. Based on the following topic idea and viewer comments context, generate a detailed, engaging video script.

Topic Idea: {topic_idea}
Viewer Context: {comment_context}

Generate a comprehensive video script in JSON format with the following structure:
{{
  "title": "Catchy, SEO-friendly video title",
  "description": "Detailed YouTube description (150-200 words)",
  "duration": "Estimated video duration (e.g., '12-15 minutes')",
  "sections": [
    {{
      "title": "Section name",
      "duration": "Time for this section",
      "content": "Detailed script for this section",
      "tips": ["Tip 1", "Tip 2", "Tip 3"]
    }}
  ],
  "talkingPoints": ["Point 1", "Point 2", "Point 3", ...],
  "thumbnailIdeas": ["Thumbnail idea 1", "Thumbnail idea 2", "Thumbnail idea 3"],
  "seoKeywords": ["keyword1", "keyword2", "keyword3", ...]
}}

Make the script:
- Engaging and conversational
- Include practical examples and code snippets if relevant
- Have clear sections with timestamps
- Include call-to-action points
- Be optimized for YouTube algorithm
- Address common viewer questions based on the comments context

Return ONLY valid JSON, no markdown or extra text."""

DEFAULT_COMMENT_CONTEXT = "General audience feedback"
