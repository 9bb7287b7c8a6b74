"""
Production-intent detection: which comments explicitly ask for content.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import FrozenSet, Sequence, Tuple

from .models import Comment

INTENT_PATTERN = re.compile(
    r"\b(can you|could you|please|plz|pls|make|create|build|add|implement|integrate|"
    r"connect|tutorial|guide|explain|video on|cover|next video|new video|project|clone|show)\b",
    re.I,
)

REQUEST_PHRASES: Tuple[str, ...] = ("next video", "new video")

MIN_SOLID_INTENT = 3
SOLID_INTENT_RATIO = 0.12


def solid_intent_threshold(corpus_size: int) -> int:
    """Intent comments needed before the corpus counts as having solid intent."""
    return max(MIN_SOLID_INTENT, math.ceil(SOLID_INTENT_RATIO * corpus_size))


@dataclass
class IntentProfile:
    """Intent flags for one corpus."""

    indices: FrozenSet[int] = field(default_factory=frozenset)
    request_indices: FrozenSet[int] = field(default_factory=frozenset)
    has_solid_intent: bool = False

    def is_intent(self, idx: int) -> bool:
        return idx in self.indices

    def is_request(self, idx: int) -> bool:
        return idx in self.request_indices


@dataclass(frozen=True)
class IntentDetector:
    """Regex classifier for explicit request/production language."""

    pattern: re.Pattern[str] = INTENT_PATTERN
    request_phrases: Tuple[str, ...] = REQUEST_PHRASES

    def is_intent(self, text: str) -> bool:
        return bool(self.pattern.search((text or "").lower()))

    def is_explicit_request(self, text: str) -> bool:
        """True for literal "next video"/"new video" asks."""
        lower = (text or "").lower()
        return any(phrase in lower for phrase in self.request_phrases)

    def analyze(self, comments: Sequence[Comment]) -> IntentProfile:
        indices = frozenset(c.index for c in comments if self.is_intent(c.text))
        requests = frozenset(c.index for c in comments if self.is_explicit_request(c.text))
        return IntentProfile(
            indices=indices,
            request_indices=requests,
            has_solid_intent=len(indices) >= solid_intent_threshold(len(comments)),
        )


DEFAULT_INTENT_DETECTOR = IntentDetector()
