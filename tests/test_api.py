"""
Tests for the commentscope FastAPI routes.
"""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from commentscope.api.deps import Services
from commentscope.api.main import app
from commentscope.comments import RawComment, SentimentScorer, YouTubeAPIError
from commentscope.generation import ScriptGenerationError, ScriptSection, VideoScript
from commentscope.settings import Settings
from commentscope.topics import TopicSuggester

SCORES = {"love this react supabase video": 0.6, "audio is terrible": -0.5}


def _stub_analyzer() -> MagicMock:
    analyzer = MagicMock()
    analyzer.polarity_scores.side_effect = lambda text: {"compound": SCORES.get(text, 0.0)}
    return analyzer


@pytest.fixture
def services():
    """Services with mocked YouTube and generator; no network, no keys."""
    svc = Services(
        settings=Settings(),
        suggester=TopicSuggester(),
        sentiment=SentimentScorer(analyzer=_stub_analyzer()),
        youtube=MagicMock(),
        generator=MagicMock(),
    )
    app.state.services = svc
    yield svc
    app.state.services = None


@pytest.fixture
def client(services) -> TestClient:
    return TestClient(app)


def test_health(client: TestClient):
    """GET /api/health reports which integrations are configured."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["youtube_configured"] is True
    assert data["llm_configured"] is True


def test_health_unconfigured(client: TestClient, services: Services):
    services.youtube = None
    services.generator = None
    data = client.get("/api/health").json()
    assert data["youtube_configured"] is False
    assert data["llm_configured"] is False


def test_suggest(client: TestClient):
    """POST /api/suggest returns merged titles."""
    r = client.post(
        "/api/suggest",
        json={"comments": [{"text": "please make a video on react with supabase", "sentiment": "neutral"}]},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["suggestions"][0] == "Integrate React with Supabase (Step-by-step)"
    assert data["strategies"] == []


def test_suggest_explain(client: TestClient):
    """explain=true exposes per-strategy picks with their coverage."""
    r = client.post(
        "/api/suggest",
        json={
            "comments": [{"text": "please make a video on react with supabase"}],
            "count": 1,
            "explain": True,
        },
    )
    assert r.status_code == 200
    strategies = r.json()["strategies"]
    assert [s["name"] for s in strategies] == ["intent_driven"]
    assert strategies[0]["selected"] == [
        {
            "key": "react|supabase",
            "kind": "integration",
            "title": "Integrate React with Supabase (Step-by-step)",
            "coverage": 1,
        }
    ]


def test_suggest_empty_corpus(client: TestClient):
    r = client.post("/api/suggest", json={"comments": []})
    assert r.status_code == 200
    assert r.json()["suggestions"] == []


@pytest.mark.parametrize(
    "body",
    [
        {"comments": [{"text": "x", "sentiment": "angry"}]},
        {"comments": [], "count": -1},
        {"comments": [], "count": 51},
    ],
)
def test_suggest_validation(client: TestClient, body):
    """Unknown sentiment labels and out-of-range counts are rejected."""
    assert client.post("/api/suggest", json=body).status_code == 422


def test_analyze_bad_url(client: TestClient):
    """Unparsable URLs return 400 before any fetch."""
    r = client.post("/api/analyze", json={"url": "not a url"})
    assert r.status_code == 400
    assert "video ID" in r.json()["detail"]


def test_analyze_missing_key(client: TestClient, services: Services):
    services.youtube = None
    r = client.post("/api/analyze", json={"url": "https://youtu.be/abc123"})
    assert r.status_code == 500
    assert "YOUTUBE_API_KEY" in r.json()["detail"]


def test_analyze_upstream_error(client: TestClient, services: Services):
    services.youtube.fetch_comments.side_effect = YouTubeAPIError(403, "quotaExceeded")
    r = client.post("/api/analyze", json={"url": "https://www.youtube.com/watch?v=abc123"})
    assert r.status_code == 502
    assert "403" in r.json()["detail"]


def test_analyze(client: TestClient, services: Services):
    """Comments are labelled, counted, summarized and turned into suggestions."""
    services.youtube.fetch_comments.return_value = [
        RawComment("love this react supabase video", "ann", "2024-01-01T00:00:00Z"),
        RawComment("audio is terrible", "bob", "2024-01-02T00:00:00Z"),
        RawComment("please make a video on react with supabase", "cy", "2024-01-03T00:00:00Z"),
    ]
    r = client.post(
        "/api/analyze",
        json={"url": "https://www.youtube.com/watch?v=abc123", "max_comments": 5000},
    )
    assert r.status_code == 200
    services.youtube.fetch_comments.assert_called_once_with("abc123", 1000, False)

    data = r.json()
    assert [c["sentiment"] for c in data["comments"]] == ["positive", "negative", "neutral"]
    assert data["comments"][0]["author"] == "ann"
    assert data["counts"] == {"positive": 1, "neutral": 1, "negative": 1}
    assert "Integrate React with Supabase (Step-by-step)" in data["suggestions"]
    assert data["comment_summary"].startswith("Positive: 1, Neutral: 1, Negative: 1. Top comments:")


def test_generate_script_requires_topic(client: TestClient):
    assert client.post("/api/generate-script", json={}).status_code == 422
    assert client.post("/api/generate-script", json={"topic_idea": ""}).status_code == 422


def test_generate_script_unconfigured(client: TestClient, services: Services):
    services.generator = None
    r = client.post("/api/generate-script", json={"topic_idea": "React auth"})
    assert r.status_code == 503


def test_generate_script(client: TestClient, services: Services):
    """Script fields come back in camelCase."""
    services.generator.generate.return_value = VideoScript(
        title="React Auth in 10 Minutes",
        description="desc",
        duration="10 minutes",
        sections=[ScriptSection(title="Intro", duration="1:00", content="Hi", tips=["smile"])],
        talking_points=["why auth"],
        thumbnail_ideas=["lock icon"],
        seo_keywords=["react auth"],
    )
    r = client.post(
        "/api/generate-script",
        json={"topic_idea": "React auth", "comment_context": "viewers want login"},
    )
    assert r.status_code == 200
    services.generator.generate.assert_called_once_with("React auth", "viewers want login")
    data = r.json()
    assert data["title"] == "React Auth in 10 Minutes"
    assert data["sections"][0]["tips"] == ["smile"]
    assert data["talkingPoints"] == ["why auth"]
    assert data["thumbnailIdeas"] == ["lock icon"]
    assert data["seoKeywords"] == ["react auth"]


def test_generate_script_failure(client: TestClient, services: Services):
    services.generator.generate.side_effect = ScriptGenerationError("no JSON")
    r = client.post("/api/generate-script", json={"topic_idea": "React auth"})
    assert r.status_code == 502
    assert r.json()["detail"] == "Failed to generate script"


def _event_loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def test_cpu_bound_work_runs_off_the_event_loop(client: TestClient, services: Services):
    """Sentiment scoring and topic selection run in worker threads."""
    on_loop = []
    real_sentiment, real_suggester = services.sentiment, services.suggester

    def analyze_comments(raw):
        on_loop.append(_event_loop_running())
        return real_sentiment.analyze_comments(raw)

    def suggest(comments, count=None):
        on_loop.append(_event_loop_running())
        return real_suggester.suggest(comments, count)

    def report(comments, count=None):
        on_loop.append(_event_loop_running())
        return real_suggester.report(comments, count)

    services.sentiment = MagicMock()
    services.sentiment.analyze_comments.side_effect = analyze_comments
    services.suggester = MagicMock()
    services.suggester.suggest.side_effect = suggest
    services.suggester.report.side_effect = report
    services.youtube.fetch_comments.return_value = [RawComment("react tips", "ann", "")]

    assert client.post("/api/analyze", json={"url": "https://youtu.be/abc123"}).status_code == 200
    assert client.post("/api/suggest", json={"comments": [{"text": "react"}]}).status_code == 200
    assert on_loop == [False, False, False]
