"""
Per-comment polarity labels from the VADER lexicon scorer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Sequence

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from commentscope.topics.models import Sentiment

from .youtube import RawComment


@dataclass
class SentimentResult:
    label: Sentiment
    score: float


@dataclass
class AnalyzedComment:
    """A fetched comment with its polarity label and VADER compound score."""

    text: str
    author: str
    published_at: str
    sentiment: Sentiment
    score: float

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["sentiment"] = self.sentiment.value
        return data


def label_for_score(score: float) -> Sentiment:
    if score > 0:
        return Sentiment.POSITIVE
    if score < 0:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


class SentimentScorer:
    """Thin wrapper over VADER's SentimentIntensityAnalyzer."""

    def __init__(self, analyzer: SentimentIntensityAnalyzer | None = None):
        self.analyzer = analyzer or SentimentIntensityAnalyzer()

    def score(self, text: str) -> SentimentResult:
        compound = float(self.analyzer.polarity_scores(text or "")["compound"])
        return SentimentResult(label=label_for_score(compound), score=compound)

    def analyze_comments(self, raw: Iterable[RawComment]) -> List[AnalyzedComment]:
        analyzed: List[AnalyzedComment] = []
        for comment in raw:
            result = self.score(comment.text)
            analyzed.append(
                AnalyzedComment(
                    text=comment.text,
                    author=comment.author,
                    published_at=comment.published_at,
                    sentiment=result.label,
                    score=result.score,
                )
            )
        return analyzed


def count_sentiments(comments: Iterable[AnalyzedComment]) -> Dict[str, int]:
    counts = {s.value: 0 for s in (Sentiment.POSITIVE, Sentiment.NEUTRAL, Sentiment.NEGATIVE)}
    for c in comments:
        counts[c.sentiment.value] += 1
    return counts


def summarize_comments(comments: Sequence[AnalyzedComment], top_n: int = 3) -> str:
    """One-line context for script generation: sentiment breakdown plus first comments."""
    if not comments:
        return ""
    counts = count_sentiments(comments)
    breakdown = (
        f"Positive: {counts['positive']}, Neutral: {counts['neutral']}, "
        f"Negative: {counts['negative']}"
    )
    top = " | ".join(c.text for c in comments[:top_n])
    return f"{breakdown}. Top comments: {top}"
