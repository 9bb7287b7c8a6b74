"""
Candidate extraction and the coverage index.

Three candidate kinds are derived from each comment:
- tech: vocabulary matches on the raw comment text
- phrase: adjacent token bigrams and trigrams
- integration: pairs of tech candidates mentioned together in a comment
  (plus, when enabled, explicit "<a> with <b>" pairs in intent comments)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Set

from .intent import IntentProfile
from .matchers import ADJACENT_PAIR_RE, TECH_MATCHER, VocabularyMatcher
from .models import INTEGRATION_SEPARATOR, Candidate, CandidateKind, Comment
from .utils import iter_ngrams, title_case, tokenize


def integration_key(a: str, b: str) -> str:
    return f"{a}{INTEGRATION_SEPARATOR}{b}"


class CoverageIndex:
    """Mapping from normalized key to Candidate, in insertion order."""

    def __init__(self) -> None:
        self._candidates: Dict[str, Candidate] = {}

    def add(self, key: str, kind: CandidateKind, display_name: str, idx: int) -> Candidate:
        """Register that comment ``idx`` mentions ``key``. Kind is fixed on first sight."""
        key = key.lower()
        cand = self._candidates.get(key)
        if cand is None:
            cand = Candidate(key=key, kind=kind, display_name=display_name)
            self._candidates[key] = cand
        cand.coverage.add(idx)
        cand.mentions += 1
        return cand

    def put(self, candidate: Candidate) -> None:
        self._candidates[candidate.key] = candidate

    def get(self, key: str) -> Optional[Candidate]:
        return self._candidates.get(key.lower())

    def coverage_of(self, key: str) -> Set[int]:
        cand = self.get(key)
        return set(cand.coverage) if cand else set()

    def of_kind(self, kind: CandidateKind) -> List[Candidate]:
        return [c for c in self._candidates.values() if c.kind is kind]

    def keys(self) -> List[str]:
        return list(self._candidates)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._candidates

    def __iter__(self) -> Iterator[Candidate]:
        return iter(list(self._candidates.values()))

    def __len__(self) -> int:
        return len(self._candidates)


@dataclass
class ExtractionPolicy:
    """What to extract and which candidates are worth reporting."""

    tech_matcher: VocabularyMatcher = field(default_factory=lambda: TECH_MATCHER)
    detect_adjacent_pairs: bool = False
    min_phrase_coverage: int = 2
    max_tech: Optional[int] = None
    max_bigrams: Optional[int] = None
    max_trigrams: Optional[int] = None


def _pair_word(word: str, tech_matcher: VocabularyMatcher) -> bool:
    return tokenize(word) == [word] or tech_matcher.find_all(word) == [word]


def _adjacent_pair(
    text: str, tech_matcher: VocabularyMatcher = TECH_MATCHER
) -> Optional[tuple[str, str]]:
    """
    First "<a> with <b>" pair where both words are tech terms or survive
    tokenization.
    """
    for match in ADJACENT_PAIR_RE.finditer(text.lower()):
        a, b = match.group(1), match.group(2)
        if a != b and _pair_word(a, tech_matcher) and _pair_word(b, tech_matcher):
            return a, b
    return None


def _top(candidates: List[Candidate], limit: Optional[int]) -> List[Candidate]:
    ranked = sorted(candidates, key=lambda c: c.mentions, reverse=True)
    return ranked if limit is None else ranked[:limit]


def build_raw_index(
    comments: Sequence[Comment],
    policy: ExtractionPolicy,
    intent: Optional[IntentProfile] = None,
) -> tuple[CoverageIndex, List[tuple[str, str, int]]]:
    """Index every tech and n-gram mention; collect adjacency pairs separately."""
    raw = CoverageIndex()
    pairs: List[tuple[str, str, int]] = []
    for comment in comments:
        text = comment.text or ""
        for term in policy.tech_matcher.find_all(text):
            raw.add(term, CandidateKind.TECH, title_case(term), comment.index)

        tokens = tokenize(text)
        for n in (2, 3):
            for gram in iter_ngrams(tokens, n):
                raw.add(gram, CandidateKind.PHRASE, title_case(gram), comment.index)

        if policy.detect_adjacent_pairs and intent is not None and intent.is_intent(comment.index):
            pair = _adjacent_pair(text, policy.tech_matcher)
            if pair:
                pairs.append((pair[0], pair[1], comment.index))
    return raw, pairs


def extract_candidates(
    comments: Sequence[Comment],
    policy: Optional[ExtractionPolicy] = None,
    intent: Optional[IntentProfile] = None,
) -> CoverageIndex:
    """
    Build the reportable candidate set for one strategy run.

    Phrases need at least ``policy.min_phrase_coverage`` distinct comments.
    Integration coverage is the intersection of the two techs' coverage,
    i.e. only comments that mention both.
    """
    policy = policy or ExtractionPolicy()
    raw, pairs = build_raw_index(comments, policy, intent)

    techs = _top(raw.of_kind(CandidateKind.TECH), policy.max_tech)
    phrases = [
        c for c in raw.of_kind(CandidateKind.PHRASE)
        if len(c.coverage) >= policy.min_phrase_coverage
    ]
    bigrams = _top([c for c in phrases if c.key.count(" ") == 1], policy.max_bigrams)
    trigrams = _top([c for c in phrases if c.key.count(" ") == 2], policy.max_trigrams)

    index = CoverageIndex()
    for cand in techs + bigrams + trigrams:
        index.put(cand)

    for i, a in enumerate(techs):
        for b in techs[i + 1 :]:
            shared = a.coverage & b.coverage
            if not shared:
                continue
            index.put(
                Candidate(
                    key=integration_key(a.key, b.key),
                    kind=CandidateKind.INTEGRATION,
                    display_name=f"{a.display_name} + {b.display_name}",
                    coverage=set(shared),
                    mentions=len(shared),
                )
            )

    for a, b, idx in pairs:
        key = integration_key(a, b)
        reverse = integration_key(b, a)
        existing = index.get(key) or index.get(reverse)
        if existing is not None and existing.kind is CandidateKind.INTEGRATION:
            existing.coverage.add(idx)
            existing.mentions = len(existing.coverage)
            continue
        index.add(key, CandidateKind.INTEGRATION, f"{title_case(a)} + {title_case(b)}", idx)
    return index
