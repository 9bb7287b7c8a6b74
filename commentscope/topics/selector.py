"""
Greedy maximum-coverage selection.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set

from .config import TopicConfig
from .intent import IntentProfile
from .models import Candidate, CandidateKind, SelectionState
from .scorer import MarginalScorer

logger = logging.getLogger(__name__)

Prefilter = Callable[[Candidate], bool]


def accept_all(_candidate: Candidate) -> bool:
    return True


def intent_prefilter(intent: IntentProfile, config: TopicConfig) -> Prefilter:
    """
    Keep candidates backed by an intent comment, non-phrases seen in at least
    two comments, or phrases seen in at least three.
    """
    intent_indices: Set[int] = set(intent.indices)

    def keep(candidate: Candidate) -> bool:
        if candidate.coverage & intent_indices:
            return True
        size = len(candidate.coverage)
        if candidate.kind is CandidateKind.PHRASE:
            return size >= config.prefilter_min_phrase_coverage
        return size >= config.prefilter_min_coverage

    return keep


def greedy_select(
    candidates: Iterable[Candidate],
    scorer: MarginalScorer,
    count: int,
    prefilter: Optional[Prefilter] = None,
) -> SelectionState:
    """
    Pick up to ``count`` candidates, each time taking the best marginal score.

    Stops early when no remaining candidate has a positive score. Ties go to
    the candidate seen first.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    keep = prefilter or accept_all
    pool: List[Candidate] = [c for c in candidates if c.coverage and keep(c)]
    state = SelectionState()

    while len(state) < count:
        best: Candidate | None = None
        best_score = 0.0
        for cand in pool:
            if cand.key in state:
                continue
            sc = scorer.score(cand, state)
            if sc > best_score:
                best, best_score = cand, sc
        if best is None:
            break
        logger.debug("selected %s (%s) score=%.3f", best.key, best.kind.value, best_score)
        state.add(best)
    return state
