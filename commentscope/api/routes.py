"""
API routes: analyze, suggest, generate-script, health.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from commentscope.comments import (
    YouTubeAPIError,
    clamp_max_comments,
    count_sentiments,
    extract_video_id,
    summarize_comments,
)
from commentscope.generation import ScriptGenerationError
from commentscope.topics import StrategyResult, render_candidate

from .deps import Services, build_services
from .models import (
    AnalyzeRequest,
    AnalyzeResponse,
    CommentOut,
    HealthResponse,
    ScriptRequest,
    ScriptResponse,
    ScriptSectionOut,
    SelectedTopic,
    SentimentCounts,
    StrategyOut,
    SuggestRequest,
    SuggestResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        services = build_services()
        request.app.state.services = services
    return services


def _strategy_out(result: StrategyResult) -> StrategyOut:
    selected = []
    if result.candidates is not None:
        for key in result.selection.selected:
            cand = result.candidates.get(key)
            selected.append(
                SelectedTopic(
                    key=key,
                    kind=cand.kind.value,
                    title=render_candidate(cand),
                    coverage=len(cand.coverage),
                )
            )
    return StrategyOut(name=result.name.value, titles=result.titles, selected=selected)


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check."""
    services = _get_services(request)
    return HealthResponse(
        status="ok",
        youtube_configured=services.youtube is not None,
        llm_configured=services.generator is not None,
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: Request, body: AnalyzeRequest) -> AnalyzeResponse | JSONResponse:
    """Fetch a video's comments, label sentiment, and suggest topics."""
    video_id = extract_video_id(body.url)
    if not video_id:
        raise HTTPException(status_code=400, detail="Could not parse video ID from URL")
    services = _get_services(request)
    if services.youtube is None:
        return JSONResponse(status_code=500, content={"detail": "Server is missing YOUTUBE_API_KEY"})

    try:
        raw = await asyncio.to_thread(
            services.youtube.fetch_comments,
            video_id,
            clamp_max_comments(body.max_comments),
            body.include_replies,
        )
    except YouTubeAPIError as e:
        logger.error("analyze failed for %s: %s", video_id, e)
        return JSONResponse(status_code=502, content={"detail": str(e)})

    analyzed = await asyncio.to_thread(services.sentiment.analyze_comments, raw)
    suggestions = await asyncio.to_thread(
        services.suggester.suggest,
        [{"text": c.text, "sentiment": c.sentiment} for c in analyzed],
    )
    return AnalyzeResponse(
        comments=[CommentOut(**c.to_dict()) for c in analyzed],
        counts=SentimentCounts(**count_sentiments(analyzed)),
        suggestions=suggestions,
        comment_summary=summarize_comments(analyzed),
    )


@router.post("/suggest", response_model=SuggestResponse)
async def suggest(request: Request, body: SuggestRequest) -> SuggestResponse:
    """Suggest topics for a caller-supplied labelled corpus."""
    services = _get_services(request)
    report = await asyncio.to_thread(
        services.suggester.report,
        [{"text": c.text, "sentiment": c.sentiment} for c in body.comments],
        body.count,
    )
    strategies = [_strategy_out(r) for r in report.strategies] if body.explain else []
    return SuggestResponse(suggestions=report.suggestions, strategies=strategies)


@router.post("/generate-script", response_model=ScriptResponse)
async def generate_script(request: Request, body: ScriptRequest) -> ScriptResponse | JSONResponse:
    """Generate a structured video script for one suggestion."""
    services = _get_services(request)
    if services.generator is None:
        return JSONResponse(
            status_code=503,
            content={"detail": "Service unavailable: LLM client not configured."},
        )
    try:
        script = await asyncio.to_thread(
            services.generator.generate, body.topic_idea, body.comment_context or ""
        )
    except ScriptGenerationError as e:
        logger.error("Script generation failed: %s", e)
        return JSONResponse(status_code=502, content={"detail": "Failed to generate script"})
    return ScriptResponse(
        title=script.title,
        description=script.description,
        duration=script.duration,
        sections=[
            ScriptSectionOut(title=s.title, duration=s.duration, content=s.content, tips=s.tips)
            for s in script.sections
        ],
        talking_points=script.talking_points,
        thumbnail_ideas=script.thumbnail_ideas,
        seo_keywords=script.seo_keywords,
    )
