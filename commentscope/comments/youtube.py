"""
YouTube Data API comment collector.

Pages through ``commentThreads`` for a video and returns plain-text comments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlparse

import httpx

from commentscope.settings import DEFAULT_YOUTUBE_API_BASE

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
MAX_COMMENTS_LIMIT = 1000
DEFAULT_MAX_COMMENTS = 100


class YouTubeAPIError(RuntimeError):
    """Non-2xx response from the YouTube Data API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"YouTube API error: {status_code} {body}")


@dataclass
class RawComment:
    text: str
    author: str
    published_at: str


def extract_video_id(url: str) -> Optional[str]:
    """Video ID from watch, youtu.be and /embed/ URLs; None if not found."""
    if not url or not isinstance(url, str):
        return None
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    parts = [p for p in parsed.path.split("/") if p]
    if "youtu.be" in parsed.netloc:
        return parts[0] if parts else None
    video_id = parse_qs(parsed.query).get("v")
    if video_id and video_id[0]:
        return video_id[0]
    if "embed" in parts:
        pos = parts.index("embed")
        if pos + 1 < len(parts):
            return parts[pos + 1]
    return None


def clamp_max_comments(value: Any) -> int:
    """Coerce a requested comment count into [1, 1000]; unparsable means 100."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        n = 0
    if n == 0:
        n = DEFAULT_MAX_COMMENTS
    return min(MAX_COMMENTS_LIMIT, max(1, n))


def _snippet_to_comment(snippet: Dict[str, Any]) -> Optional[RawComment]:
    text = snippet.get("textOriginal")
    if not text:
        return None
    return RawComment(
        text=text,
        author=snippet.get("authorDisplayName") or "Unknown",
        published_at=snippet.get("publishedAt") or "",
    )


class YouTubeClient:
    """Synchronous client for the comment threads endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_YOUTUBE_API_BASE,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("YouTube API key required. Set YOUTUBE_API_KEY.")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _get_page(
        self,
        client: httpx.Client,
        video_id: str,
        include_replies: bool,
        page_token: Optional[str],
    ) -> Dict[str, Any]:
        params = {
            "part": "snippet,replies" if include_replies else "snippet",
            "videoId": video_id,
            "maxResults": str(PAGE_SIZE),
            "key": self.api_key,
            "order": "time",
            "textFormat": "plainText",
        }
        if page_token:
            params["pageToken"] = page_token
        response = client.get(f"{self.base_url}/commentThreads", params=params)
        if response.status_code >= 400:
            logger.error("YouTube API returned %s for video %s", response.status_code, video_id)
            raise YouTubeAPIError(response.status_code, response.text)
        return response.json()

    def fetch_comments(
        self,
        video_id: str,
        max_comments: int = DEFAULT_MAX_COMMENTS,
        include_replies: bool = False,
    ) -> List[RawComment]:
        """Collect up to ``max_comments`` top-level comments (and replies if asked)."""
        collected: List[RawComment] = []
        page_token: Optional[str] = None
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            while len(collected) < max_comments:
                data = self._get_page(client, video_id, include_replies, page_token)
                for item in data.get("items") or []:
                    top = ((item.get("snippet") or {}).get("topLevelComment") or {}).get("snippet") or {}
                    comment = _snippet_to_comment(top)
                    if comment:
                        collected.append(comment)
                    if include_replies:
                        for reply in (item.get("replies") or {}).get("comments") or []:
                            comment = _snippet_to_comment(reply.get("snippet") or {})
                            if comment:
                                collected.append(comment)
                    if len(collected) >= max_comments:
                        break
                page_token = data.get("nextPageToken")
                if not page_token:
                    break
        logger.info("Fetched %d comments for video %s", len(collected), video_id)
        return collected[:max_comments]
