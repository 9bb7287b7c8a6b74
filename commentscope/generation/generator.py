"""
Script generator: fills the prompt, calls the LLM, parses the JSON script.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from commentscope.llm.client import ChatClient

from .prompts import DEFAULT_COMMENT_CONTEXT, SCRIPT_PROMPT
from .script import VideoScript, extract_json_object, script_from_payload

logger = logging.getLogger(__name__)


class ScriptGenerationError(RuntimeError):
    """The model call failed or returned something that is not a script."""


@dataclass
class GenerationConfig:
    """Sampling settings for script generation."""

    max_tokens: int = 4096
    temperature: float = 0.7
    top_p: float = 0.95


class ScriptGenerator:
    """Generate a structured video script for one suggested topic."""

    def __init__(self, client: ChatClient, config: Optional[GenerationConfig] = None):
        self.client = client
        self.config = config or GenerationConfig()

    def build_prompt(self, topic_idea: str, comment_context: str = "") -> str:
        return SCRIPT_PROMPT.format(
            topic_idea=topic_idea.strip(),
            comment_context=(comment_context or "").strip() or DEFAULT_COMMENT_CONTEXT,
        )

    def generate(self, topic_idea: str, comment_context: str = "") -> VideoScript:
        if not topic_idea or not topic_idea.strip():
            raise ValueError("topic_idea is required")
        prompt = self.build_prompt(topic_idea, comment_context)
        raw = self.client.generate_single(
            prompt,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            top_p=self.config.top_p,
        )
        if not raw:
            raise ScriptGenerationError("No content in model response")
        payload = extract_json_object(raw)
        if payload is None:
            logger.error("Could not extract JSON from script response (%d chars)", len(raw))
            raise ScriptGenerationError("Could not extract JSON from response")
        try:
            return script_from_payload(payload)
        except ValueError as e:
            raise ScriptGenerationError(f"Invalid script payload: {e}") from e
