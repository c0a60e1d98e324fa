"""Sentence and word segmentation.

Sentences come from NLTK's Punkt algorithm with untrained parameters, so no
corpus download is needed. Words come from an NLTK regexp tokenizer that keeps
contractions whole and emits punctuation as separate tokens.
"""
from __future__ import annotations

from typing import List, Tuple

from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer

from .config import CLAUSE_DELIMITERS

_SENTENCES = PunktSentenceTokenizer()
_WORDS = RegexpTokenizer(r"\w+(?:['’]\w+)*|[^\w\s]")
_TERMINATORS = ".?!"
_CLOSERS = "\"')]»”’"


def split_sentences(text: str) -> List[str]:
    """Split ``text`` into sentences that tile it, trailing whitespace included."""
    if not text:
        return []
    spans = list(_SENTENCES.span_tokenize(text))
    if not spans:
        return []
    starts = [0]
    for start, _ in spans[1:]:
        # a run such as "?!" or "!!!" belongs to the sentence it ends
        while start < len(text) and text[start] in _TERMINATORS:
            start += 1
        if start > starts[-1]:
            starts.append(start)
    sentences: List[str] = []
    for idx, start in enumerate(starts):
        end = starts[idx + 1] if idx + 1 < len(starts) else len(text)
        piece = text[start:end]
        if sentences and (not _has_word_chars(piece) or _continues_after_period(sentences[-1], piece)):
            sentences[-1] += piece
        else:
            sentences.append(piece)
    return sentences


def word_spans(sentence: str) -> List[Tuple[int, int]]:
    return list(_WORDS.span_tokenize(sentence))


def split_words(sentence: str) -> List[str]:
    return [sentence[start:end] for start, end in word_spans(sentence)]


def split_on(text: str, delimiter: str) -> List[str]:
    """Literal split, unlike :func:`split_words`; empty input gives no pieces."""
    if not text:
        return []
    return text.split(delimiter)


def starts_with(container: str, prefix: str) -> bool:
    """True if ``container`` is longer than ``prefix`` and begins with it."""
    return len(container) > len(prefix) and container.startswith(prefix)


def count_chars(text: str, char: str) -> int:
    return text.count(char)


def in_same_clause(sentence: str, first: int, second: int) -> bool:
    """True if no clause delimiter sits between two offsets of ``sentence``."""
    lo, hi = min(first, second), max(first, second)
    return not any(ch in CLAUSE_DELIMITERS for ch in sentence[lo:hi])


def _has_word_chars(text: str) -> bool:
    return any(ch.isalnum() for ch in text)


def _continues_after_period(previous: str, piece: str) -> bool:
    # no break after a period when the next letter is lowercase (UAX #29 SB8)
    if not previous.rstrip().rstrip(_CLOSERS).endswith("."):
        return False
    first_letter = next((ch for ch in piece if ch.isalpha()), "")
    return first_letter.islower()


__all__ = [
    "split_sentences",
    "split_words",
    "word_spans",
    "split_on",
    "starts_with",
    "count_chars",
    "in_same_clause",
]
