# analysis_pipeline.py
import logging
import math
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

FILLERS = (
    "um",
    "uh",
    "like",
    "you know",
    "basically",
    "actually",
    "sort of",
    "kind of",
    "i mean",
)
WEAK_PHRASES = ("i think", "maybe", "probably", "somewhat", "possibly")
COMMON_WORDS = frozenset(
    ["the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"]
)

IDEAL_WORDS_PER_SENTENCE = 15
LONG_SENTENCE_WORDS = 25
SHORT_SENTENCE_WORDS = 8
BRIEF_RESPONSE_WORDS = 50
LENGTHY_RESPONSE_WORDS = 300
OVERUSE_THRESHOLD = 3
STRONG_SCORE = 80

FILLER_PENALTY = 5
WEAK_PHRASE_PENALTY = 3
OVERUSED_WORD_PENALTY = 2

WEAK_PHRASE_TIP = (
    "Try to sound more confident by replacing uncertain phrases like 'I think' "
    "or 'maybe' with more assertive language."
)
ELABORATE_TIP = (
    "Your responses could benefit from more detailed explanations. "
    "Try to elaborate more on your points."
)
BRIEF_TIP = (
    "Your response is quite brief. Consider providing more details and examples "
    "to strengthen your answer."
)
LENGTHY_TIP = (
    "Your response is quite lengthy. Try to be more concise while maintaining "
    "the key points."
)
EXCELLENT_TIP = (
    "Excellent response! Your answer was clear, concise, and professionally delivered."
)
STRONG_TIP = (
    "Overall, this was a strong response with good clarity and professional delivery."
)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_WORDLIKE = re.compile(r"[^\W_]")
_TERM_PATTERNS = {
    term: re.compile(r"\b" + re.escape(term) + r"\b") for term in FILLERS + WEAK_PHRASES
}


@dataclass
class TextMetrics:
    filler_word_count: int = 0
    weak_phrases_count: int = 0
    total_words: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    fillers_found: List[str] = field(default_factory=list)
    repeated_words: Dict[str, int] = field(default_factory=dict)
    overused_words: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AnalysisResult:
    filler_words: str
    clarity_score: str
    suggestions: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filler_words": self.filler_words,
            "clarity_score": self.clarity_score,
            "suggestions": list(self.suggestions),
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _count_term(term: str, text_lower: str) -> int:
    return len(_TERM_PATTERNS[term].findall(text_lower))


def compute_metrics(transcript: str) -> TextMetrics:
    """
    Derive the counts the scorer works from.

    Matching is case-insensitive and whole-term ("like" does not match inside
    "likely"); sentence and word splitting run on the original text.
    """
    text_lower = transcript.lower()
    metrics = TextMetrics()

    for term in FILLERS:
        count = _count_term(term, text_lower)
        if count:
            metrics.filler_word_count += count
            metrics.fillers_found.append(term)

    for phrase in WEAK_PHRASES:
        metrics.weak_phrases_count += _count_term(phrase, text_lower)

    # whitespace-only segments are dropped too, so a trailing space is not a sentence
    sentences = [s for s in _SENTENCE_SPLIT.split(transcript) if s.strip()]
    metrics.sentence_count = len(sentences)
    # punctuation-only input has no words at all
    if _WORDLIKE.search(transcript):
        metrics.total_words = len(transcript.split())

    # zero sentences implies zero words; the average stays 0.0
    if metrics.sentence_count:
        metrics.avg_words_per_sentence = metrics.total_words / metrics.sentence_count

    for word in text_lower.split():
        if word not in COMMON_WORDS and len(word) > 2:
            metrics.repeated_words[word] = metrics.repeated_words.get(word, 0) + 1

    metrics.overused_words = [
        word for word, count in metrics.repeated_words.items() if count > OVERUSE_THRESHOLD
    ]
    return metrics


def clarity_score(metrics: TextMetrics) -> float:
    score = (
        100
        - metrics.filler_word_count * FILLER_PENALTY
        - metrics.weak_phrases_count * WEAK_PHRASE_PENALTY
        - len(metrics.overused_words) * OVERUSED_WORD_PENALTY
    )
    if metrics.total_words:
        score -= abs(metrics.avg_words_per_sentence - IDEAL_WORDS_PER_SENTENCE)
    return max(0.0, min(100.0, float(score)))


def build_suggestions(metrics: TextMetrics) -> List[str]:
    suggestions: List[str] = []

    if metrics.filler_word_count > 0:
        quoted = '", "'.join(metrics.fillers_found)
        suggestions.append(
            f'Reduce filler words: "{quoted}" appear '
            f"{metrics.filler_word_count} times in your response."
        )

    if metrics.weak_phrases_count > 0:
        suggestions.append(WEAK_PHRASE_TIP)

    # nothing to measure on a transcript without words
    if metrics.total_words:
        avg = metrics.avg_words_per_sentence
        if avg > LONG_SENTENCE_WORDS:
            suggestions.append(
                f"Your sentences are quite long (average {_round_half_up(avg)} words). "
                "Consider breaking them into shorter, clearer statements."
            )
        elif avg < SHORT_SENTENCE_WORDS:
            suggestions.append(ELABORATE_TIP)

    if metrics.overused_words:
        quoted = '", "'.join(metrics.overused_words)
        suggestions.append(f'Consider using synonyms for frequently repeated words: "{quoted}"')

    if metrics.total_words:
        if metrics.total_words < BRIEF_RESPONSE_WORDS:
            suggestions.append(BRIEF_TIP)
        elif metrics.total_words > LENGTHY_RESPONSE_WORDS:
            suggestions.append(LENGTHY_TIP)

    if not suggestions:
        suggestions.append(EXCELLENT_TIP)
    return suggestions


def score_metrics(metrics: TextMetrics) -> AnalysisResult:
    """
    Build the result from already computed metrics.

    A high score prepends the strong-response note, even when the only other
    entry is the excellent-response fallback.
    """
    score = clarity_score(metrics)
    suggestions = build_suggestions(metrics)

    if score > STRONG_SCORE:
        suggestions.insert(0, STRONG_TIP)

    logger.debug(
        "analysis: words=%d sentences=%d fillers=%d weak=%d overused=%d score=%.2f",
        metrics.total_words,
        metrics.sentence_count,
        metrics.filler_word_count,
        metrics.weak_phrases_count,
        len(metrics.overused_words),
        score,
    )

    return AnalysisResult(
        filler_words=(
            f"Found {metrics.filler_word_count} filler words and "
            f"{metrics.weak_phrases_count} uncertain phrases in your response of "
            f"{metrics.total_words} words."
        ),
        clarity_score=f"{_round_half_up(score)}/100",
        suggestions=suggestions,
    )


def analyze_text(transcript: str) -> AnalysisResult:
    """Score a transcript and return filler summary, clarity score and suggestions. Never raises."""
    return score_metrics(compute_metrics(transcript))
