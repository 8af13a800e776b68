"""Split raw text into word and sentence tokens."""

import re

WORD_PATTERN = re.compile(r"[a-zA-Z'-]+")

# A run of non-terminators closed by terminators, or a trailing unterminated fragment
SENTENCE_PATTERN = re.compile(r"[^.!?]*[.!?]+\s?|[^.!?]+$")


def get_words(text: str) -> list[str]:
    """Return word tokens in order, case preserved."""
    return WORD_PATTERN.findall(text)


def get_sentences(text: str) -> list[str]:
    """
    Return sentence tokens in order.

    Text without terminal punctuation yields a single sentence as long as it
    has any non-whitespace content.
    """
    sentences = [s.strip() for s in SENTENCE_PATTERN.findall(text)]
    return [s for s in sentences if s]
