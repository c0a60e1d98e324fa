"""Surface-text heuristics that sharpen or redirect lexicon matches.

Each coefficient is at least 1.0; the engine multiplies the ones that apply.
"""
from __future__ import annotations

from typing import Iterable

from . import config
from .entry import AffectSample
from .lexicon import LexiconStore
from .parsing import count_chars


def exclamation_coef(sentence: str) -> float:
    """More exclamation marks in a sentence mean stronger weights."""
    return 1.0 + config.EXCLAMATION_STEP * count_chars(sentence, "!")


def has_exclamation_question(sentence: str) -> bool:
    return "?!" in sentence or "!?" in sentence


def emoticon_coef(token: str, emoticon: AffectSample) -> float:
    """Reward repeated terminal characters, e.g. the extra ``)`` in ``:)))``."""
    if not emoticon.starts_with_emoticon or not emoticon.word:
        return 1.0
    return 1.0 + config.EMOTICON_STEP * count_chars(token, emoticon.word[-1])


def sentence_emoticon_coef(sentence: str, store: LexiconStore) -> float:
    value = 1.0
    for emoticon in store.find_emoticons_in(sentence):
        value *= emoticon_coef(sentence, emoticon)
    return value


def is_negation(word: str, store: LexiconStore) -> bool:
    return store.is_negation(word.lower())


def caps_lock_coef(word: str) -> float:
    return config.CAPS_LOCK_COEF if _is_caps_lock(word) else 1.0


def modifier_coef(previous_word: str, store: LexiconStore) -> float:
    """Boost a match that follows an intensity modifier such as "extremely"."""
    if previous_word and store.is_intensity_modifier(previous_word.lower()):
        return config.MODIFIER_COEF
    return 1.0


def combine(coefficients: Iterable[float]) -> float:
    value = 1.0
    for coefficient in coefficients:
        value *= coefficient
    return value


def _is_caps_lock(word: str) -> bool:
    # any lowercase letter disqualifies; non-letters are ignored
    return not any(ch.islower() for ch in word)
