"""
Tests for comment collection, sentiment labelling, corpus loading and settings.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from commentscope.comments import (
    RawComment,
    SentimentScorer,
    YouTubeAPIError,
    YouTubeClient,
    clamp_max_comments,
    count_sentiments,
    extract_video_id,
    load_comments,
    summarize_comments,
)
from commentscope.comments.sentiment import label_for_score
from commentscope.settings import DEFAULT_LLM_MODEL, Settings
from commentscope.topics import Sentiment


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?feature=share&v=abc123", "abc123"),
        ("https://youtu.be/abc123?t=42", "abc123"),
        ("https://www.youtube.com/embed/abc123", "abc123"),
        ("https://www.youtube.com/", None),
        ("youtube.com/watch?v=abc123", None),
        ("", None),
    ],
)
def test_extract_video_id(url: str, expected):
    assert extract_video_id(url) == expected


@pytest.mark.parametrize(
    "value,expected",
    [(None, 100), ("abc", 100), (0, 100), (-5, 1), (250, 250), ("300", 300), (5000, 1000)],
)
def test_clamp_max_comments(value, expected):
    assert clamp_max_comments(value) == expected


def _thread(text: str, author: str = "viewer", replies: list[str] | None = None) -> dict:
    item = {
        "snippet": {
            "topLevelComment": {
                "snippet": {
                    "textOriginal": text,
                    "authorDisplayName": author,
                    "publishedAt": "2024-05-01T10:00:00Z",
                }
            }
        }
    }
    if replies:
        item["replies"] = {"comments": [{"snippet": {"textOriginal": r}} for r in replies]}
    return item


def _client(handler) -> YouTubeClient:
    return YouTubeClient("test-key", transport=httpx.MockTransport(handler))


def test_fetch_comments_follows_pages():
    """nextPageToken is followed until the API stops returning one."""
    seen_tokens = []

    def handler(request: httpx.Request) -> httpx.Response:
        token = request.url.params.get("pageToken")
        seen_tokens.append(token)
        assert request.url.params["videoId"] == "abc123"
        assert request.url.params["key"] == "test-key"
        if token is None:
            return httpx.Response(200, json={"items": [_thread("first")], "nextPageToken": "p2"})
        return httpx.Response(200, json={"items": [_thread("second", author="")]})

    comments = _client(handler).fetch_comments("abc123", max_comments=10)
    assert [c.text for c in comments] == ["first", "second"]
    assert comments[1].author == "Unknown"
    assert seen_tokens == [None, "p2"]


def test_fetch_comments_stops_at_max():
    def handler(request: httpx.Request) -> httpx.Response:
        items = [_thread(f"c{i}") for i in range(5)]
        return httpx.Response(200, json={"items": items, "nextPageToken": "more"})

    comments = _client(handler).fetch_comments("abc123", max_comments=3)
    assert [c.text for c in comments] == ["c0", "c1", "c2"]


def test_fetch_comments_with_replies():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["part"] == "snippet,replies"
        return httpx.Response(200, json={"items": [_thread("top", replies=["re 1", "re 2"])]})

    comments = _client(handler).fetch_comments("abc123", include_replies=True)
    assert [c.text for c in comments] == ["top", "re 1", "re 2"]
    assert comments[1].author == "Unknown"


def test_fetch_comments_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="commentsDisabled")

    with pytest.raises(YouTubeAPIError) as exc:
        _client(handler).fetch_comments("abc123")
    assert exc.value.status_code == 403
    assert "commentsDisabled" in str(exc.value)


def test_youtube_client_requires_key():
    with pytest.raises(ValueError):
        YouTubeClient("")


def test_label_for_score():
    assert label_for_score(0.4) is Sentiment.POSITIVE
    assert label_for_score(-0.1) is Sentiment.NEGATIVE
    assert label_for_score(0.0) is Sentiment.NEUTRAL


def test_sentiment_scorer_with_stub_analyzer():
    analyzer = MagicMock()
    analyzer.polarity_scores.return_value = {"compound": -0.7}
    result = SentimentScorer(analyzer).score("whatever")
    assert result.label is Sentiment.NEGATIVE
    assert result.score == pytest.approx(-0.7)


def test_sentiment_scorer_vader():
    """Clear-cut texts get the expected VADER polarity."""
    scorer = SentimentScorer()
    assert scorer.score("I love this, it is amazing!").label is Sentiment.POSITIVE
    assert scorer.score("This is terrible and I hate it.").label is Sentiment.NEGATIVE
    assert scorer.score("").label is Sentiment.NEUTRAL


def test_analyze_count_and_summarize():
    analyzer = MagicMock()
    analyzer.polarity_scores.side_effect = [{"compound": 0.5}, {"compound": 0.0}, {"compound": -0.3}, {"compound": 0.2}]
    raw = [RawComment(t, "a", "") for t in ("great", "ok", "bad", "nice")]
    analyzed = SentimentScorer(analyzer).analyze_comments(raw)
    assert analyzed[0].to_dict()["sentiment"] == "positive"
    assert count_sentiments(analyzed) == {"positive": 2, "neutral": 1, "negative": 1}
    assert summarize_comments(analyzed) == (
        "Positive: 2, Neutral: 1, Negative: 1. Top comments: great | ok | bad"
    )
    assert summarize_comments([]) == ""


def test_load_comments(tmp_path):
    path = tmp_path / "comments.jsonl"
    path.write_text(
        '{"text": "please cover docker", "sentiment": "positive"}\n'
        "\n"
        '{"text": "no label"}\n',
        encoding="utf-8",
    )
    comments = load_comments(path)
    assert [c.index for c in comments] == [0, 1]
    assert comments[0].sentiment is Sentiment.POSITIVE
    assert comments[1].sentiment is Sentiment.NEUTRAL


def test_load_comments_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_comments(tmp_path / "missing.jsonl")

    bad = tmp_path / "bad.jsonl"
    bad.write_text('{"text": "ok"}\nnot json\n', encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        load_comments(bad)

    unknown = tmp_path / "unknown.jsonl"
    unknown.write_text('{"text": "ok", "sentiment": "furious"}\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_comments(unknown)


def test_settings_from_env():
    settings = Settings.from_env(
        {"YOUTUBE_API_KEY": "yt", "LLM_API_KEY": "llm", "SUGGESTION_COUNT": "4"}
    )
    assert settings.youtube_configured
    assert settings.llm_configured
    assert settings.llm_model == DEFAULT_LLM_MODEL
    assert settings.suggestion_count == 4


def test_settings_defaults_and_bad_int():
    settings = Settings.from_env({})
    assert not settings.youtube_configured
    assert not settings.llm_configured
    assert settings.suggestion_count == 6
    with pytest.raises(ValueError, match="SUGGESTION_COUNT"):
        Settings.from_env({"SUGGESTION_COUNT": "six"})


def test_load_comments_non_string_text(tmp_path):
    """Non-string text loads as an empty comment instead of failing later."""
    path = tmp_path / "comments.jsonl"
    path.write_text('{"text": 12345, "sentiment": "neutral"}\n{"text": "react"}\n', encoding="utf-8")
    comments = load_comments(path)
    assert [c.text for c in comments] == ["", "react"]
