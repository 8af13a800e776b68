"""
Voice Metrics

The nine dimension extractors. Each one is a cheap heuristic over the
shared word/sentence tokens; precision matters less than applying the
same heuristic to the profile samples and to the checked text.
"""

import logging
import math
import re
import statistics
from typing import Optional

from .models import Analysis
from .tokenizer import get_sentences, get_words

logger = logging.getLogger(__name__)


# Persuasive / conversion copy vocabulary
POWER_WORDS = frozenset([
    "free", "proven", "secret", "instant", "guaranteed", "exclusive",
    "now", "easy", "discover", "save", "new", "you", "because",
    "results", "simple", "fast", "limited", "bonus", "premium",
    "essential", "powerful", "amazing", "unlock", "boost", "transform",
    "ultimate", "effortless", "remarkable", "revolutionary", "unbeatable",
])

FORMAL_MARKERS = frozenset([
    "therefore", "however", "moreover", "furthermore", "consequently",
    "nevertheless", "henceforth", "accordingly", "whereas", "thus",
    "hereby", "notwithstanding", "pursuant", "facilitate", "utilize",
    "implement", "endeavor", "subsequent", "prior", "aforementioned",
])

INFORMAL_MARKERS = frozenset([
    "hey", "yeah", "gonna", "wanna", "gotta", "kinda", "sorta",
    "awesome", "cool", "super", "totally", "literally", "basically",
    "stuff", "thing", "things", "ok", "okay", "btw", "tbh", "ngl",
    "lol", "omg", "wow", "yep", "nope", "yikes",
])

FIRST_PERSON = frozenset(["i", "me", "my", "mine", "we", "us", "our", "ours"])
SECOND_PERSON = frozenset(["you", "your", "yours", "yourself"])
THIRD_PERSON = frozenset([
    "he", "she", "it", "they", "them", "his", "her", "its", "their", "theirs",
])

EMPHASIS_PATTERNS = (
    re.compile(r"[A-Z]{2,}"),         # ALL CAPS runs
    re.compile(r"!{2,}"),             # repeated exclamation marks
    re.compile(r"\*\*[^*]+\*\*"),     # **bold**
    re.compile(r"_{2}[^_]+_{2}"),     # __bold__
)

PASSIVE_PATTERN = re.compile(
    r"\b(is|are|was|were|been|being|be|am|has been|have been|had been|"
    r"will be|would be|could be|should be|might be|must be)"
    r"\s+(\w+ly\s+)?(\w+(?:ed|en|wn|nt|ght))\b",
    re.IGNORECASE | re.ASCII,
)

VOWEL_GROUP = re.compile(r"[aeiouy]+")
NON_LETTER = re.compile(r"[^a-z]")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for positive values (2.5 -> 3, 0.25 -> 0.3)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _percent(count: int, total: int) -> int:
    return int(round_half_up(count / total * 100))


def _per_hundred(count: int, total: int) -> float:
    """Rate per 100, one decimal."""
    return round_half_up(count / total * 1000) / 10


def count_syllables(word: str) -> int:
    """
    Estimate syllable count for a word.

    Counts vowel groups, then drops a silent trailing "e" (but not "-le")
    and a non-syllabic "-ed" (but not "-ted"/"-ded").
    """
    word = NON_LETTER.sub("", word.lower())
    if len(word) <= 2:
        return 1

    count = len(VOWEL_GROUP.findall(word)) or 1

    if word.endswith("e") and not word.endswith("le") and count > 1:
        count -= 1

    if (word.endswith("ed") and count > 1
            and not word.endswith("ted") and not word.endswith("ded")):
        count -= 1

    return max(1, count)


def formality_score(lower_words: list[str]) -> int:
    """Share of formal markers among all register markers; 50 when none appear."""
    formal = sum(1 for w in lower_words if w in FORMAL_MARKERS)
    informal = sum(1 for w in lower_words if w in INFORMAL_MARKERS)
    total = formal + informal
    if total == 0:
        return 50
    return _percent(formal, total)


def average_sentence_length(word_count: int, sentence_count: int) -> float:
    return round_half_up(word_count / sentence_count, 1)


def vocabulary_complexity(words: list[str]) -> int:
    """Mean syllables per word mapped linearly from [1.0, 3.0] onto [0, 100]."""
    if not words:
        return 0
    avg_syllables = sum(count_syllables(w) for w in words) / len(words)
    return int(round_half_up(min(100, max(0, (avg_syllables - 1.0) / 2.0 * 100))))


def active_ratio(text: str, sentence_count: int) -> int:
    """Percentage of sentences not flagged by the passive-voice pattern."""
    passive_count = sum(1 for _ in PASSIVE_PATTERN.finditer(text))
    ratio = (1 - passive_count / sentence_count) * 100
    return int(round_half_up(max(0, min(100, ratio))))


def question_frequency(sentences: list[str], sentence_count: int) -> int:
    questions = sum(1 for s in sentences if s.endswith("?"))
    return _percent(questions, sentence_count)


def pronoun_usage(lower_words: list[str]) -> int:
    """
    Perspective axis: 0 = all first person, 50 = all second, 100 = all third.

    Defaults to 50 when the text has no pronouns at all.
    """
    first = sum(1 for w in lower_words if w in FIRST_PERSON)
    second = sum(1 for w in lower_words if w in SECOND_PERSON)
    third = sum(1 for w in lower_words if w in THIRD_PERSON)
    total = first + second + third
    if total == 0:
        return 50
    return int(round_half_up((first * 0 + second * 50 + third * 100) / total))


def power_word_density(lower_words: list[str], word_count: int) -> float:
    power_count = sum(1 for w in lower_words if w in POWER_WORDS)
    return _per_hundred(power_count, word_count)


def emphasis_rate(text: str, word_count: int) -> float:
    """Emphasis markers plus single exclamation marks, per 100 words."""
    emphasis_count = sum(len(p.findall(text)) for p in EMPHASIS_PATTERNS)
    emphasis_count += text.count("!")
    return _per_hundred(emphasis_count, word_count)


def sentence_variety(sentences: list[str]) -> int:
    """Coefficient of variation of per-sentence word counts, as 0-100."""
    if not sentences:
        return 0
    lengths = [len(get_words(s)) for s in sentences]
    mean = statistics.fmean(lengths)
    if mean <= 0:
        return 0
    std = statistics.pstdev(lengths, mu=mean)
    return int(round_half_up(min(100, std / mean * 100)))


def measure(text: Optional[str]) -> Optional[Analysis]:
    """
    Measure all nine voice dimensions of a text.

    Args:
        text: Raw text to analyze

    Returns:
        Analysis with every dimension, or None for empty/whitespace input
    """
    if not text or not text.strip():
        return None

    words = get_words(text)
    sentences = get_sentences(text)
    word_count = max(1, len(words))
    sentence_count = max(1, len(sentences))
    lower_words = [w.lower() for w in words]

    analysis = Analysis(
        formality=formality_score(lower_words),
        avg_sentence_length=average_sentence_length(len(words), sentence_count),
        vocabulary_complexity=vocabulary_complexity(words),
        active_ratio=active_ratio(text, sentence_count),
        question_frequency=question_frequency(sentences, sentence_count),
        pronoun_usage=pronoun_usage(lower_words),
        power_word_density=power_word_density(lower_words, word_count),
        emphasis_rate=emphasis_rate(text, word_count),
        sentence_variety=sentence_variety(sentences),
        word_count=word_count,
        sentence_count=sentence_count,
    )
    logger.debug(
        "Measured %d words in %d sentences", analysis.word_count, analysis.sentence_count
    )
    return analysis
