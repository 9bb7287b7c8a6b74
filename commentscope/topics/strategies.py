"""
The three suggestion strategies.

Intent-driven and enhanced share one coverage-maximization routine and differ
only in candidate universe, intent flags and pre-filter. Classic is a plain
frequency ranking kept as a fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from .candidates import CoverageIndex, ExtractionPolicy, extract_candidates
from .classic import extract_topics, suggest_classic
from .config import TopicConfig
from .intent import DEFAULT_INTENT_DETECTOR, IntentDetector, IntentProfile
from .matchers import TECH_MATCHER, VocabularyMatcher
from .models import CandidateKind, Comment, CommentInput, SelectionState, build_comments, texts_of
from .scorer import MarginalScorer
from .selector import Prefilter, greedy_select, intent_prefilter
from .titles import render_candidate
from .utils import title_case

logger = logging.getLogger(__name__)


class StrategyName(str, Enum):
    INTENT_DRIVEN = "intent_driven"
    ENHANCED = "enhanced"
    CLASSIC = "classic"


@dataclass
class StrategyResult:
    """Titles from one strategy plus the selection that produced them."""

    name: StrategyName
    titles: List[str] = field(default_factory=list)
    selection: SelectionState = field(default_factory=SelectionState)
    candidates: Optional[CoverageIndex] = None


def _unique(titles: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(t for t in titles if t))


def run_coverage_strategy(
    name: StrategyName,
    comments: List[Comment],
    count: int,
    *,
    policy: ExtractionPolicy,
    intent: IntentProfile,
    config: TopicConfig,
    prefilter: Optional[Prefilter] = None,
) -> StrategyResult:
    """Extract candidates, greedily select by marginal score, render titles."""
    index = extract_candidates(comments, policy, intent)
    scorer = MarginalScorer(comments=comments, intent=intent, config=config)
    selection = greedy_select(index, scorer, count, prefilter)
    titles = [render_candidate(index.get(key)) for key in selection.selected]
    logger.debug(
        "%s: %d candidates, selected %s", name.value, len(index), selection.selected
    )
    return StrategyResult(
        name=name,
        titles=_unique(titles)[:count],
        selection=selection,
        candidates=index,
    )


def suggest_intent_driven(
    comments: Iterable[CommentInput],
    count: int = 6,
    *,
    config: Optional[TopicConfig] = None,
    detector: IntentDetector = DEFAULT_INTENT_DETECTOR,
    tech_matcher: VocabularyMatcher = TECH_MATCHER,
) -> StrategyResult:
    """Coverage selection seeded by comments that explicitly ask for content."""
    config = config or TopicConfig()
    corpus = build_comments(comments)
    intent = detector.analyze(corpus)
    policy = ExtractionPolicy(
        tech_matcher=tech_matcher,
        detect_adjacent_pairs=True,
        min_phrase_coverage=config.min_phrase_coverage,
    )
    return run_coverage_strategy(
        StrategyName.INTENT_DRIVEN,
        corpus,
        count,
        policy=policy,
        intent=intent,
        config=config,
        prefilter=intent_prefilter(intent, config),
    )


def suggest_enhanced(
    comments: Iterable[CommentInput],
    count: int = 6,
    *,
    config: Optional[TopicConfig] = None,
    detector: IntentDetector = DEFAULT_INTENT_DETECTOR,
    tech_matcher: VocabularyMatcher = TECH_MATCHER,
) -> StrategyResult:
    """
    Coverage selection over the most frequent candidates, no intent pre-filter.

    Only the explicit "next video"/"new video" bump applies. Short selections
    are padded with "<Tech> Best Practices" titles.
    """
    config = config or TopicConfig()
    corpus = build_comments(comments)
    requests = detector.analyze(corpus).request_indices
    intent = IntentProfile(request_indices=requests)
    policy = ExtractionPolicy(
        tech_matcher=tech_matcher,
        min_phrase_coverage=config.min_phrase_coverage,
        max_tech=config.max_tech_candidates,
        max_bigrams=config.max_bigram_candidates,
        max_trigrams=config.max_trigram_candidates,
    )
    result = run_coverage_strategy(
        StrategyName.ENHANCED, corpus, count, policy=policy, intent=intent, config=config
    )

    titles = result.titles
    techs = [c.key for c in result.candidates.of_kind(CandidateKind.TECH)]
    while len(titles) < count and techs:
        tech = techs[len(titles) % len(techs)]
        if any(tech in t.lower() for t in titles):
            break
        titles.append(f"{title_case(tech)} Best Practices")
    result.titles = _unique(titles)[:count]
    return result


def suggest_classic_strategy(
    comments: Iterable[CommentInput],
    count: int = 6,
    *,
    tech_matcher: VocabularyMatcher = TECH_MATCHER,
) -> StrategyResult:
    corpus = build_comments(comments)
    stats = extract_topics(texts_of(corpus), tech_matcher=tech_matcher)
    return StrategyResult(name=StrategyName.CLASSIC, titles=_unique(suggest_classic(stats, count)))
