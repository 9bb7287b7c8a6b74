"""
Runtime settings from environment variables (and .env when present).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_YOUTUBE_API_BASE = "https://youtube.googleapis.com/youtube/v3"
DEFAULT_LLM_MODEL = "gpt-4o-mini"


def load_env() -> None:
    env_file = PROJECT_ROOT / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from None


@dataclass
class Settings:
    """External service credentials and request defaults."""

    youtube_api_key: Optional[str] = None
    youtube_api_base: str = DEFAULT_YOUTUBE_API_BASE
    llm_base_url: Optional[str] = None
    llm_api_key: Optional[str] = None
    llm_model: str = DEFAULT_LLM_MODEL
    suggestion_count: int = 6

    @property
    def youtube_configured(self) -> bool:
        return bool(self.youtube_api_key)

    @property
    def llm_configured(self) -> bool:
        return bool(self.llm_api_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_env()
            env = os.environ
        return cls(
            youtube_api_key=env.get("YOUTUBE_API_KEY") or None,
            youtube_api_base=env.get("YOUTUBE_API_BASE") or DEFAULT_YOUTUBE_API_BASE,
            llm_base_url=env.get("LLM_BASE_URL") or None,
            llm_api_key=env.get("LLM_API_KEY") or None,
            llm_model=env.get("LLM_MODEL") or DEFAULT_LLM_MODEL,
            suggestion_count=_int_env(env, "SUGGESTION_COUNT", 6),
        )
