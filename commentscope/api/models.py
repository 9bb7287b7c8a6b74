"""
Request and response models for the comment analysis API.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SentimentLabel = Literal["positive", "neutral", "negative"]


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    url: str = Field(..., min_length=1, description="YouTube video URL")
    max_comments: int = Field(100, description="Clamped to 1..1000")
    include_replies: bool = False


class CommentOut(BaseModel):
    """A fetched comment with its sentiment label."""

    text: str
    author: str
    published_at: str = ""
    sentiment: SentimentLabel
    score: float = 0.0


class SentimentCounts(BaseModel):
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class AnalyzeResponse(BaseModel):
    """Response for POST /api/analyze."""

    comments: List[CommentOut] = Field(default_factory=list)
    counts: SentimentCounts = Field(default_factory=SentimentCounts)
    suggestions: List[str] = Field(default_factory=list)
    comment_summary: str = ""


class SuggestComment(BaseModel):
    text: str = ""
    sentiment: SentimentLabel = "neutral"


class SuggestRequest(BaseModel):
    """Request body for POST /api/suggest."""

    comments: List[SuggestComment] = Field(default_factory=list)
    count: int = Field(6, ge=0, le=50)
    explain: bool = False


class SelectedTopic(BaseModel):
    """One greedy pick, for explain mode."""

    key: str
    kind: str
    title: str
    coverage: int


class StrategyOut(BaseModel):
    name: str
    titles: List[str] = Field(default_factory=list)
    selected: List[SelectedTopic] = Field(default_factory=list)


class SuggestResponse(BaseModel):
    """Response for POST /api/suggest."""

    suggestions: List[str] = Field(default_factory=list)
    strategies: List[StrategyOut] = Field(default_factory=list)


class ScriptRequest(BaseModel):
    """Request body for POST /api/generate-script."""

    topic_idea: str = Field(..., min_length=1)
    comment_context: Optional[str] = None


class ScriptSectionOut(BaseModel):
    title: str
    duration: str = ""
    content: str = ""
    tips: List[str] = Field(default_factory=list)


class ScriptResponse(BaseModel):
    """Response for POST /api/generate-script."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str = ""
    duration: str = ""
    sections: List[ScriptSectionOut] = Field(default_factory=list)
    talking_points: List[str] = Field(default_factory=list, alias="talkingPoints")
    thumbnail_ideas: List[str] = Field(default_factory=list, alias="thumbnailIdeas")
    seo_keywords: List[str] = Field(default_factory=list, alias="seoKeywords")


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    youtube_configured: bool = False
    llm_configured: bool = False
