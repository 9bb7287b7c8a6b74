"""
Tests for production-intent detection.
"""

from __future__ import annotations

import pytest

from commentscope.topics import IntentDetector, build_comments, solid_intent_threshold


@pytest.fixture
def detector() -> IntentDetector:
    return IntentDetector()


@pytest.mark.parametrize(
    "text",
    [
        "Can you cover Docker next?",
        "please do a video on stripe",
        "Build a netflix clone",
        "next video should be on redis",
        "MAKE A TUTORIAL ON PRISMA",
    ],
)
def test_intent_comments_detected(detector: IntentDetector, text: str):
    """Request phrasing and production verbs are intent."""
    assert detector.is_intent(text)


@pytest.mark.parametrize("text", ["Great video, thanks!", "loved the music", "", None])
def test_non_intent_comments(detector: IntentDetector, text):
    """Praise and empty text are not intent."""
    assert not detector.is_intent(text)


def test_explicit_request_phrases(detector: IntentDetector):
    """Only literal next/new video asks are explicit requests."""
    assert detector.is_explicit_request("Next video should be on Redis")
    assert detector.is_explicit_request("waiting for the new video!")
    assert not detector.is_explicit_request("please make a video on redis")


@pytest.mark.parametrize(
    "size,expected",
    [(0, 3), (10, 3), (40, 5), (60, 8)],
)
def test_solid_intent_threshold(size: int, expected: int):
    """Threshold is max(3, ceil(0.12 * n))."""
    assert solid_intent_threshold(size) == expected


def test_analyze_solid_intent_flag(detector: IntentDetector):
    """Three requests in ten comments is solid; two is not."""
    filler = [{"text": "nice one", "sentiment": "positive"}] * 7
    requests = [{"text": "please cover docker", "sentiment": "neutral"}] * 3
    profile = detector.analyze(build_comments(requests + filler))
    assert profile.indices == frozenset({0, 1, 2})
    assert profile.has_solid_intent is True

    weaker = detector.analyze(build_comments(requests[:2] + filler + [{"text": "ok"}]))
    assert weaker.has_solid_intent is False


def test_analyze_empty_corpus(detector: IntentDetector):
    """Empty corpus has no intent and is not solid."""
    profile = detector.analyze([])
    assert profile.indices == frozenset()
    assert profile.has_solid_intent is False
