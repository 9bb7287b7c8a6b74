"""
Render selected candidates as human-readable video titles.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .models import Candidate, CandidateKind
from .utils import title_case

CLONE_TITLE = "Build a Modern Clone App (Full Tutorial)"
API_TITLE = "How to Build an API (Complete Guide)"

_CLONE_RE = re.compile(r"\bclone\b")
_API_RE = re.compile(r"\bapi\b")

PHRASE_TEMPLATES: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r"\b(auth|authentication|login|signup)\b"), "{name}: Secure Auth Best Practices"),
    (re.compile(r"\b(animation|video)\b"), "{name}: Full Workflow & Tools"),
    (re.compile(r"\b(connect|integrate|with)\b"), "{name}: Integration Guide"),
]


def render_candidate(candidate: Candidate) -> str:
    name = candidate.display_name or title_case(candidate.key)
    if candidate.kind is CandidateKind.INTEGRATION:
        a, b = candidate.parts
        return f"Integrate {title_case(a)} with {title_case(b)} (Step-by-step)"
    if candidate.kind is CandidateKind.TECH:
        if _CLONE_RE.search(candidate.key):
            return CLONE_TITLE
        if _API_RE.search(candidate.key):
            return API_TITLE
        return f"{name} Project Tutorial (Hands-on)"
    for pattern, template in PHRASE_TEMPLATES:
        if pattern.search(candidate.key):
            return template.format(name=name)
    return f"{name}: Deep Dive"


def render_title(kind: CandidateKind, key: str, display_name: str = "") -> str:
    return render_candidate(Candidate(key=key, kind=kind, display_name=display_name))
