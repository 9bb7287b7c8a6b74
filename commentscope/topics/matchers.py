"""
Vocabulary matchers used during candidate extraction.

Vocabularies are plain term lists compiled into a single case-insensitive
whole-word pattern, so new platforms or verbs can be added here without
touching extraction or scoring.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

TECH_VOCABULARY: Tuple[str, ...] = (
    "github", "supabase", "api", "database", "clone", "animation", "css", "html",
    "javascript", "react", "next", "node", "python", "java", "typescript", "docker",
    "kubernetes", "aws", "azure", "firebase", "mongodb", "sql", "redux", "vue",
    "angular", "tailwind", "bootstrap", "figma", "design", "ui", "ux", "backend",
    "frontend", "fullstack", "auth", "authentication", "deployment", "hosting",
    "vercel", "netlify", "cravix", "openai", "stripe", "redis", "neon", "prisma",
)

ACTION_VOCABULARY: Tuple[str, ...] = (
    "create", "make", "build", "add", "implement", "integrate", "connect", "generate",
    "improve", "fix", "explain", "show", "teach", "tutorial", "guide", "learn", "understand",
)


def compile_vocabulary(terms: Iterable[str]) -> re.Pattern[str]:
    """Compile terms into one whole-word, case-insensitive alternation."""
    ordered = sorted({t.strip().lower() for t in terms if t and t.strip()}, key=len, reverse=True)
    if not ordered:
        # Matches nothing.
        return re.compile(r"(?!x)x")
    alternation = "|".join(re.escape(t) for t in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.I)


@dataclass
class VocabularyMatcher:
    """Whole-word matcher over a fixed vocabulary."""

    terms: Sequence[str]
    pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.terms = tuple(self.terms)
        self.pattern = compile_vocabulary(self.terms)

    def find_all(self, text: str) -> List[str]:
        """Every match in ``text``, lower-cased, in order (repeats kept)."""
        if not text:
            return []
        return [m.group(0).lower() for m in self.pattern.finditer(text)]

    def find_unique(self, text: str) -> List[str]:
        """Distinct matches in first-seen order."""
        seen: dict[str, None] = {}
        for term in self.find_all(text):
            seen.setdefault(term, None)
        return list(seen)

    def extend(self, terms: Iterable[str]) -> "VocabularyMatcher":
        """Return a new matcher with ``terms`` added to the vocabulary."""
        return VocabularyMatcher(tuple(self.terms) + tuple(terms))


TECH_MATCHER = VocabularyMatcher(TECH_VOCABULARY)
ACTION_MATCHER = VocabularyMatcher(ACTION_VOCABULARY)

# "<word> with <word>", e.g. "github with supabase"
ADJACENT_PAIR_RE = re.compile(r"\b([a-z0-9]+)\s+with\s+([a-z0-9]+)\b", re.I)

QUESTION_PREFIXES = ("how", "can you", "could you")


def is_question(text: str) -> bool:
    lower = (text or "").lower()
    return "?" in lower or lower.startswith(QUESTION_PREFIXES)
