"""
Tokenization and display helpers shared by every extraction path.
"""

from __future__ import annotations

import re
from typing import Iterable, List

TOKEN_RE = re.compile(r"[a-z0-9']+")
TITLE_WORD_RE = re.compile(r"\w\S*")

MIN_TOKEN_LENGTH = 3

STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "this", "that",
    "to", "of", "in", "on", "for", "with", "as", "by", "at", "it",
    "is", "are", "be", "was", "were", "from", "you", "i", "we", "they",
    "he", "she", "them", "your", "our", "my", "me", "us", "so",
    "not", "just", "can", "could", "should", "would", "what", "when", "how", "why",
    "which", "who", "will", "about", "up", "down", "out", "over", "under", "into",
    "more", "most", "less", "least", "very", "much", "make", "like", "get", "got",
    "have", "has", "had", "do", "does", "did", "please", "plz", "pls",
    "project", "projects", "app", "apps", "website", "code", "video", "tutorial", "real",
})


def iter_tokens(text: str) -> Iterable[str]:
    """Yield lowercase tokens, skipping stopwords and tokens under three characters."""
    if not text:
        return
    for match in TOKEN_RE.finditer(text.lower()):
        tok = match.group(0)
        if len(tok) < MIN_TOKEN_LENGTH:
            continue
        if tok in STOPWORDS:
            continue
        yield tok


def tokenize(text: str) -> List[str]:
    return list(iter_tokens(text))


def iter_ngrams(tokens: List[str], n: int) -> Iterable[str]:
    """Yield space-joined runs of ``n`` adjacent tokens."""
    for i in range(len(tokens) - n + 1):
        yield " ".join(tokens[i : i + n])


def title_case(text: str) -> str:
    """Upper-case the first character of each word, leaving the rest untouched."""
    return TITLE_WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], text)
