"""
Marginal-gain scoring over the coverage index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .config import TopicConfig
from .intent import IntentProfile
from .models import Candidate, CandidateKind, Comment, SelectionState


@dataclass
class MarginalScorer:
    """
    Weighted count of a candidate's comments not yet covered by the selection.

    Each uncovered comment contributes
    ``sentiment weight * intent boost * request bump * kind boost``;
    short phrases are then penalized. Comments already in ``state.covered``
    contribute nothing, so a fully covered candidate scores exactly 0.
    """

    comments: Sequence[Comment]
    intent: IntentProfile
    config: TopicConfig

    def intent_boost(self, idx: int) -> float:
        boost = 1.0
        if self.intent.is_intent(idx):
            boost *= (
                self.config.strong_intent_boost
                if self.intent.has_solid_intent
                else self.config.weak_intent_boost
            )
        if self.intent.is_request(idx):
            boost *= self.config.request_phrase_boost
        return boost

    def comment_weight(self, idx: int) -> float:
        return self.config.sentiment_weights[self.comments[idx].sentiment] * self.intent_boost(idx)

    def is_short_phrase(self, candidate: Candidate) -> bool:
        return candidate.kind is CandidateKind.PHRASE and (
            len(candidate.key) < self.config.short_phrase_length
            or len(candidate.key.split()) == 1
        )

    def score(self, candidate: Candidate, state: SelectionState | None = None) -> float:
        covered = state.covered if state is not None else set()
        kind_boost = self.config.kind_boosts[candidate.kind]
        total = 0.0
        for idx in candidate.coverage:
            if idx in covered:
                continue
            total += self.comment_weight(idx) * kind_boost
        if self.is_short_phrase(candidate):
            total *= self.config.short_phrase_penalty
        return total
