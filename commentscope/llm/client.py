"""
Chat client for OpenAI-compatible APIs (OpenAI, Z.AI/GLM, DeepSeek, etc.).
"""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional

from openai import OpenAI

from commentscope.settings import Settings

logger = logging.getLogger(__name__)


def _is_rate_limit(error: Exception) -> bool:
    text = str(error)
    return (
        getattr(error, "status_code", None) == 429
        or "429" in text
        or "concurrency" in text.lower()
    )


class ChatClient:
    """Single-prompt chat completion with rate-limit retries."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        sleep=time.sleep,
    ):
        settings = settings or Settings.from_env()
        api_key = api_key or settings.llm_api_key
        if not api_key:
            raise ValueError("API key required. Set LLM_API_KEY.")
        self.model_name = model_name or settings.llm_model
        self.base_url = base_url or settings.llm_base_url
        self.client = OpenAI(base_url=self.base_url, api_key=api_key)
        self._sleep = sleep

    def generate_single(
        self,
        prompt: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        top_p: float = 0.95,
        stop: Optional[List[str]] = None,
        max_retries: int = 3,
    ) -> str:
        """Return the completion text, or "" when the call fails."""
        create_kw: dict = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "temperature": temperature,
            "top_p": top_p,
        }
        if stop:
            create_kw["stop"] = stop[:1]
        if self.base_url and "z.ai" in self.base_url.lower():
            create_kw["extra_body"] = {"thinking": {"type": "disabled"}}

        retry_count = 0
        while True:
            try:
                response = self.client.chat.completions.create(**create_kw)
            except Exception as e:
                if not _is_rate_limit(e):
                    logger.error("Error calling API: %s", e)
                    return ""
                retry_count += 1
                if retry_count >= max_retries:
                    logger.warning("Rate limit exceeded after %s retries.", max_retries)
                    return ""
                backoff = (2 ** retry_count) * 3 + random.uniform(0, 3)
                logger.warning(
                    "Rate limit hit. Retrying in %s s (attempt %s/%s)",
                    round(backoff, 1),
                    retry_count,
                    max_retries,
                )
                self._sleep(backoff)
                continue

            if not response.choices:
                logger.warning("Empty response from API")
                return ""
            msg = response.choices[0].message
            text = (msg.content or "").strip()
            if not text:
                logger.warning(
                    "Empty content in response (finish_reason=%s)",
                    getattr(response.choices[0], "finish_reason", "?"),
                )
            return text


def create_client(settings: Optional[Settings] = None, **kwargs) -> ChatClient:
    return ChatClient(settings=settings, **kwargs)
