"""
Comment acquisition and labelling collaborators.
"""

from .loader import load_comments
from .sentiment import (
    AnalyzedComment,
    SentimentResult,
    SentimentScorer,
    count_sentiments,
    summarize_comments,
)
from .youtube import (
    RawComment,
    YouTubeAPIError,
    YouTubeClient,
    clamp_max_comments,
    extract_video_id,
)

__all__ = [
    "AnalyzedComment",
    "RawComment",
    "SentimentResult",
    "SentimentScorer",
    "YouTubeAPIError",
    "YouTubeClient",
    "clamp_max_comments",
    "count_sentiments",
    "extract_video_id",
    "load_comments",
    "summarize_comments",
]
