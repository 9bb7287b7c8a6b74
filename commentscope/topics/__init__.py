"""
Topic suggestion engine.

Turns labelled comments into a short, deduplicated, ranked list of video titles:
- Tokenization and vocabulary matching
- Intent detection
- Candidate extraction into a coverage index
- Marginal-gain scoring and greedy selection
- Title rendering and priority merge across strategies
"""

from .candidates import CoverageIndex, ExtractionPolicy, extract_candidates
from .classic import TopicStats, extract_topics, suggest_classic
from .config import TopicConfig
from .intent import IntentDetector, IntentProfile, solid_intent_threshold
from .matchers import ACTION_MATCHER, TECH_MATCHER, VocabularyMatcher
from .merger import merge_suggestions
from .models import (
    Candidate,
    CandidateKind,
    Comment,
    SelectionState,
    Sentiment,
    build_comments,
)
from .scorer import MarginalScorer
from .selector import greedy_select, intent_prefilter
from .strategies import (
    StrategyName,
    StrategyResult,
    suggest_classic_strategy,
    suggest_enhanced,
    suggest_intent_driven,
)
from .suggester import SuggestionReport, TopicSuggester, suggest_topics
from .titles import render_candidate, render_title
from .utils import iter_tokens, tokenize

__all__ = [
    "ACTION_MATCHER",
    "Candidate",
    "CandidateKind",
    "Comment",
    "CoverageIndex",
    "ExtractionPolicy",
    "IntentDetector",
    "IntentProfile",
    "MarginalScorer",
    "SelectionState",
    "Sentiment",
    "StrategyName",
    "StrategyResult",
    "SuggestionReport",
    "TECH_MATCHER",
    "TopicConfig",
    "TopicStats",
    "TopicSuggester",
    "VocabularyMatcher",
    "build_comments",
    "extract_candidates",
    "extract_topics",
    "greedy_select",
    "intent_prefilter",
    "iter_tokens",
    "merge_suggestions",
    "render_candidate",
    "render_title",
    "solid_intent_threshold",
    "suggest_classic",
    "suggest_classic_strategy",
    "suggest_enhanced",
    "suggest_intent_driven",
    "suggest_topics",
    "tokenize",
]
