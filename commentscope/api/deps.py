"""
Build the API's collaborators (used in lifespan, or lazily on first request).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from commentscope.comments import SentimentScorer, YouTubeClient
from commentscope.generation import ScriptGenerator
from commentscope.llm import create_client
from commentscope.settings import Settings
from commentscope.topics import TopicConfig, TopicSuggester

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Collaborators shared by the routes. Optional ones are None when unconfigured."""

    settings: Settings
    suggester: TopicSuggester
    sentiment: SentimentScorer
    youtube: Optional[YouTubeClient] = None
    generator: Optional[ScriptGenerator] = None


def build_services(settings: Optional[Settings] = None) -> Services:
    settings = settings or Settings.from_env()
    youtube = None
    if settings.youtube_configured:
        youtube = YouTubeClient(settings.youtube_api_key, base_url=settings.youtube_api_base)
    else:
        logger.warning("YOUTUBE_API_KEY not set; /api/analyze is unavailable")

    generator = None
    if settings.llm_configured:
        generator = ScriptGenerator(create_client(settings))
    else:
        logger.warning("LLM_API_KEY not set; /api/generate-script is unavailable")

    return Services(
        settings=settings,
        suggester=TopicSuggester(TopicConfig(suggestion_count=settings.suggestion_count)),
        sentiment=SentimentScorer(),
        youtube=youtube,
        generator=generator,
    )
