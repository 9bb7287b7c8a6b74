"""
Entry point: run the strategies in priority order and merge their titles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import TopicConfig
from .intent import DEFAULT_INTENT_DETECTOR, IntentDetector
from .matchers import TECH_MATCHER, VocabularyMatcher
from .merger import merge_suggestions
from .models import CommentInput, build_comments
from .strategies import (
    StrategyResult,
    suggest_classic_strategy,
    suggest_enhanced,
    suggest_intent_driven,
)

logger = logging.getLogger(__name__)


@dataclass
class SuggestionReport:
    """Merged titles and the per-strategy results they came from."""

    suggestions: List[str] = field(default_factory=list)
    strategies: List[StrategyResult] = field(default_factory=list)


class TopicSuggester:
    """
    Intent-driven first; enhanced fills what is left; classic runs only if
    the merged list is still short.
    """

    def __init__(
        self,
        config: Optional[TopicConfig] = None,
        *,
        detector: IntentDetector = DEFAULT_INTENT_DETECTOR,
        tech_matcher: VocabularyMatcher = TECH_MATCHER,
    ):
        self.config = config or TopicConfig()
        self.detector = detector
        self.tech_matcher = tech_matcher

    def report(self, comments: Iterable[CommentInput], count: Optional[int] = None) -> SuggestionReport:
        count = self.config.suggestion_count if count is None else count
        if count < 0:
            raise ValueError("count must be non-negative")
        corpus = build_comments(comments)
        report = SuggestionReport()
        if not corpus or count == 0:
            return report

        kwargs = {"config": self.config, "detector": self.detector, "tech_matcher": self.tech_matcher}
        report.strategies.append(suggest_intent_driven(corpus, count, **kwargs))
        merged = merge_suggestions([r.titles for r in report.strategies], count)

        if len(merged) < count:
            logger.info("intent-driven yielded %d/%d titles; running enhanced", len(merged), count)
            report.strategies.append(suggest_enhanced(corpus, count, **kwargs))
            merged = merge_suggestions([r.titles for r in report.strategies], count)

        if len(merged) < count:
            logger.info("coverage strategies yielded %d/%d titles; running classic", len(merged), count)
            report.strategies.append(
                suggest_classic_strategy(corpus, count, tech_matcher=self.tech_matcher)
            )
            merged = merge_suggestions([r.titles for r in report.strategies], count)

        report.suggestions = merged
        return report

    def suggest(self, comments: Iterable[CommentInput], count: Optional[int] = None) -> List[str]:
        return self.report(comments, count).suggestions


def suggest_topics(comments: Iterable[CommentInput], count: int = 6) -> List[str]:
    """Suggest up to ``count`` distinct video titles for a labelled comment corpus."""
    return TopicSuggester().suggest(comments, count)
