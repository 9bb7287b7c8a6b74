"""
Structured video script records and parsing of model output into them.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*\})\s*```", re.DOTALL)


@dataclass
class ScriptSection:
    title: str
    duration: str = ""
    content: str = ""
    tips: List[str] = field(default_factory=list)


@dataclass
class VideoScript:
    """A generated script; keys serialize in the camelCase the model is asked for."""

    title: str
    description: str = ""
    duration: str = ""
    sections: List[ScriptSection] = field(default_factory=list)
    talking_points: List[str] = field(default_factory=list)
    thumbnail_ideas: List[str] = field(default_factory=list)
    seo_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "duration": self.duration,
            "sections": [
                {"title": s.title, "duration": s.duration, "content": s.content, "tips": list(s.tips)}
                for s in self.sections
            ],
            "talkingPoints": list(self.talking_points),
            "thumbnailIdeas": list(self.thumbnail_ideas),
            "seoKeywords": list(self.seo_keywords),
        }


def extract_json_object(raw: str) -> Optional[Dict[str, Any]]:
    """First JSON object in ``raw``: fenced block, whole text, or outermost braces."""
    if not raw or not raw.strip():
        return None

    text = raw.strip()
    candidates = [text]
    fenced = _JSON_FENCE_RE.search(text)
    if fenced:
        candidates.insert(0, fenced.group(1))
    if not text.startswith("{"):
        generic = re.search(r"\{.*\}", text, re.DOTALL)
        if generic:
            candidates.append(generic.group(0))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if str(v).strip()]


def script_from_payload(payload: Dict[str, Any]) -> VideoScript:
    """Build a VideoScript; raises ValueError when the title is missing."""
    title = str(payload.get("title") or "").strip()
    if not title:
        raise ValueError("script payload has no title")
    sections = []
    for raw in payload.get("sections") or []:
        if not isinstance(raw, dict):
            continue
        sections.append(
            ScriptSection(
                title=str(raw.get("title") or "").strip(),
                duration=str(raw.get("duration") or "").strip(),
                content=str(raw.get("content") or "").strip(),
                tips=_str_list(raw.get("tips")),
            )
        )
    return VideoScript(
        title=title,
        description=str(payload.get("description") or "").strip(),
        duration=str(payload.get("duration") or "").strip(),
        sections=sections,
        talking_points=_str_list(payload.get("talkingPoints")),
        thumbnail_ideas=_str_list(payload.get("thumbnailIdeas")),
        seo_keywords=_str_list(payload.get("seoKeywords")),
    )
