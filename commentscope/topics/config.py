"""
Configuration for topic suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .models import CandidateKind, Sentiment


def _default_sentiment_weights() -> Dict[Sentiment, float]:
    return {Sentiment.NEUTRAL: 1.0, Sentiment.POSITIVE: 0.9, Sentiment.NEGATIVE: 0.75}


def _default_kind_boosts() -> Dict[CandidateKind, float]:
    return {CandidateKind.INTEGRATION: 1.25, CandidateKind.TECH: 1.10, CandidateKind.PHRASE: 1.0}


@dataclass
class TopicConfig:
    """Weights, thresholds and caps for the suggestion strategies."""

    suggestion_count: int = 6

    sentiment_weights: Dict[Sentiment, float] = field(default_factory=_default_sentiment_weights)
    kind_boosts: Dict[CandidateKind, float] = field(default_factory=_default_kind_boosts)
    strong_intent_boost: float = 1.6
    weak_intent_boost: float = 1.25
    request_phrase_boost: float = 1.6
    short_phrase_penalty: float = 0.6
    short_phrase_length: int = 6

    min_phrase_coverage: int = 2
    prefilter_min_coverage: int = 2
    prefilter_min_phrase_coverage: int = 3

    # Candidate universe caps for the enhanced strategy
    max_tech_candidates: int = 12
    max_bigram_candidates: int = 20
    max_trigram_candidates: int = 20

    def __post_init__(self) -> None:
        if self.suggestion_count < 0:
            raise ValueError("suggestion_count must be non-negative")
