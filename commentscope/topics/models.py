"""
Records shared by the topic-suggestion pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence, Set, Tuple, Union


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class CandidateKind(str, Enum):
    TECH = "tech"
    PHRASE = "phrase"
    INTEGRATION = "integration"


INTEGRATION_SEPARATOR = "|"


@dataclass(frozen=True)
class Comment:
    """A single comment with its position in the corpus and polarity label."""

    index: int
    text: str
    sentiment: Sentiment


@dataclass
class Candidate:
    """A topic key, how it was derived, and the comments that mention it."""

    key: str
    kind: CandidateKind
    display_name: str
    coverage: Set[int] = field(default_factory=set)
    mentions: int = 0

    @property
    def parts(self) -> Tuple[str, ...]:
        """Constituent terms: two for integration pairs, one otherwise."""
        if self.kind is CandidateKind.INTEGRATION:
            a, _, b = self.key.partition(INTEGRATION_SEPARATOR)
            return (a, b)
        return (self.key,)


@dataclass
class SelectionState:
    """Ordered picks of a greedy run plus the union of their coverage."""

    selected: List[str] = field(default_factory=list)
    covered: Set[int] = field(default_factory=set)

    def add(self, candidate: Candidate) -> None:
        self.selected.append(candidate.key)
        self.covered |= candidate.coverage

    def __contains__(self, key: object) -> bool:
        return key in self.selected

    def __len__(self) -> int:
        return len(self.selected)


CommentInput = Union[Comment, Mapping[str, Any], Tuple[str, str]]


def parse_sentiment(value: Union[str, Sentiment, None]) -> Sentiment:
    """Map a label string onto Sentiment; None means neutral."""
    if value is None:
        return Sentiment.NEUTRAL
    if isinstance(value, Sentiment):
        return value
    try:
        return Sentiment(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown sentiment label: {value!r}") from None


def build_comments(items: Iterable[CommentInput]) -> List[Comment]:
    """
    Index raw comment records for one run.

    Accepts Comment objects, mappings with ``text`` and ``sentiment`` keys,
    or ``(text, sentiment)`` pairs. Indices are reassigned from 0 in input order.
    Missing or non-string text becomes ``""``.
    """
    comments: List[Comment] = []
    for idx, item in enumerate(items):
        if isinstance(item, Comment):
            text, sentiment = item.text, item.sentiment
        elif isinstance(item, Mapping):
            text, sentiment = item.get("text"), item.get("sentiment")
        else:
            text, sentiment = item
        if not isinstance(text, str):
            # Non-text payloads contribute nothing.
            text = ""
        comments.append(
            Comment(index=idx, text=text, sentiment=parse_sentiment(sentiment))
        )
    return comments


def texts_of(comments: Sequence[Comment]) -> List[str]:
    return [c.text for c in comments]
