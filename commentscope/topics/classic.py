"""
Classic frequency-based suggestions, used only as a last-resort fallback.

No coverage bookkeeping here: titles come from the most frequent actions,
technologies, phrases and question topics.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .matchers import ACTION_MATCHER, TECH_MATCHER, VocabularyMatcher, is_question
from .utils import iter_ngrams, tokenize

TOP_TECH = 10
TOP_ACTIONS = 5
TOP_PHRASES = 8
MIN_PHRASE_FREQUENCY = 2


@dataclass
class TopicStats:
    """Occurrence counts gathered from raw comment texts."""

    technologies: Counter = field(default_factory=Counter)
    actions: Counter = field(default_factory=Counter)
    phrases: Counter = field(default_factory=Counter)
    questions: List[str] = field(default_factory=list)


def extract_topics(
    texts: Iterable[str],
    tech_matcher: VocabularyMatcher = TECH_MATCHER,
    action_matcher: VocabularyMatcher = ACTION_MATCHER,
) -> TopicStats:
    stats = TopicStats()
    for text in texts:
        text = text or ""
        if is_question(text):
            stats.questions.append(text)
        stats.technologies.update(tech_matcher.find_all(text))
        stats.actions.update(action_matcher.find_all(text))
        tokens = tokenize(text)
        stats.phrases.update(iter_ngrams(tokens, 2))
        stats.phrases.update(iter_ngrams(tokens, 3))
    return stats


def _ranked(counter: Counter, limit: int) -> List[Tuple[str, int]]:
    # Counter.most_common keeps first-seen order among equal counts
    return counter.most_common(limit)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _mentions(titles: List[str], term: str) -> bool:
    return any(term in t.lower() for t in titles)


def suggest_classic(stats: TopicStats, count: int = 6) -> List[str]:
    suggestions: List[str] = []
    top_tech = _ranked(stats.technologies, TOP_TECH)
    top_actions = _ranked(stats.actions, TOP_ACTIONS)
    top_phrases = [
        (p, n) for p, n in stats.phrases.most_common() if n >= MIN_PHRASE_FREQUENCY
    ][:TOP_PHRASES]

    # Top actions x top technologies
    for action, _ in top_actions[:2]:
        for tech, _ in top_tech[:2]:
            if len(suggestions) >= count:
                break
            target = "an API" if tech == "api" else tech
            title = f"How to {action} {target}"
            if title not in suggestions:
                suggestions.append(title)

    for phrase, _ in top_phrases[:3]:
        if len(suggestions) >= count:
            break
        if not _mentions(suggestions, phrase):
            suggestions.append(f"{' '.join(_capitalize(w) for w in phrase.split())}: Complete guide")

    if stats.questions and len(suggestions) < count:
        question_topics: Counter = Counter()
        for question in stats.questions:
            lower = question.lower()
            for tech, _ in top_tech:
                if tech in lower:
                    question_topics[tech] += 1
        for tech, _ in question_topics.most_common():
            if len(suggestions) >= count:
                break
            if not _mentions(suggestions, tech):
                suggestions.append(f"Answering your questions about {tech}")

    if len(top_tech) >= 2 and len(suggestions) < count:
        title = f"Integrating {top_tech[0][0]} with {top_tech[1][0]}"
        if title not in suggestions:
            suggestions.append(title)

    for tech, _ in top_tech:
        if len(suggestions) >= count:
            break
        if _mentions(suggestions, tech):
            continue
        suggestions.append(f"{_capitalize(tech)} tutorial for beginners")

    return suggestions[:count]
