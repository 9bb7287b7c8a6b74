"""
Video script generation for a selected topic suggestion.

- Prompt construction from topic idea and comment context
- LLM call through the chat client
- JSON extraction and validation into VideoScript
"""

from .generator import GenerationConfig, ScriptGenerationError, ScriptGenerator
from .prompts import DEFAULT_COMMENT_CONTEXT, SCRIPT_PROMPT
from .script import ScriptSection, VideoScript, extract_json_object, script_from_payload

__all__ = [
    "DEFAULT_COMMENT_CONTEXT",
    "GenerationConfig",
    "SCRIPT_PROMPT",
    "ScriptGenerationError",
    "ScriptGenerator",
    "ScriptSection",
    "VideoScript",
    "extract_json_object",
    "script_from_payload",
]
