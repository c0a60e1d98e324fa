"""Textual affect sensing: lexicon lookup refined by six heuristic rules."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from . import config
from .emotion import Emotion, EmotionalResult, EmotionCategory
from .entry import WEIGHT_FIELDS, AffectSample
from .heuristics import (
    caps_lock_coef,
    combine,
    emoticon_coef,
    exclamation_coef,
    has_exclamation_question,
    is_negation,
    modifier_coef,
)
from .lexicon import LexiconStore, default_store
from .parsing import in_same_clause, split_on, split_sentences, word_spans

logger = logging.getLogger(__name__)

_CATEGORY_COLUMNS = (
    (EmotionCategory.HAPPINESS, WEIGHT_FIELDS.index("happiness")),
    (EmotionCategory.SADNESS, WEIGHT_FIELDS.index("sadness")),
    (EmotionCategory.ANGER, WEIGHT_FIELDS.index("anger")),
    (EmotionCategory.FEAR, WEIGHT_FIELDS.index("fear")),
    (EmotionCategory.DISGUST, WEIGHT_FIELDS.index("disgust")),
    (EmotionCategory.SURPRISE, WEIGHT_FIELDS.index("surprise")),
)
_GENERAL_COLUMN = WEIGHT_FIELDS.index("general")


@dataclass
class _SentenceState:
    negation_end: Optional[int] = None
    last_word: str = ""


class Empathyscope:
    """Infer Ekman emotions from text with a preloaded :class:`LexiconStore`."""

    def __init__(self, store: Optional[LexiconStore] = None) -> None:
        self._store = store if store is not None else default_store()

    @property
    def store(self) -> LexiconStore:
        return self._store

    def feel(self, text: str) -> EmotionalResult:
        """Analyse ``text``; never fails once the lexicon is loaded."""
        text = text.replace("\n", " ")
        samples: List[AffectSample] = []
        for sentence in split_sentences(text):
            logger.debug("Analysing sentence: %r", sentence)
            samples.extend(self._sentence_samples(sentence))
        return _aggregate(text, samples)

    def _sentence_samples(self, sentence: str) -> List[AffectSample]:
        samples: List[AffectSample] = []
        exclamation = exclamation_coef(sentence.lower())
        if has_exclamation_question(sentence):
            samples.append(AffectSample.surprise_marker())

        state = _SentenceState()
        offset = 0
        for token in split_on(sentence, " "):
            token_start = offset
            offset += len(token) + 1
            if not token:
                continue

            emoticon = self._store.lookup_emoticon(token)
            if emoticon is None:
                emoticon = self._store.lookup_emoticon(token.lower())
            if emoticon is not None:
                coef = emoticon_coef(token, emoticon)
                if coef == 1.0:
                    coef = emoticon_coef(token.lower(), emoticon)
                emoticon.scale(exclamation * coef)
                samples.append(emoticon)
                continue

            for start, end in word_spans(token):
                word = token[start:end]
                sample = self._word_sample(sentence, token_start + start, token_start + end, word, state, exclamation)
                if sample is not None:
                    samples.append(sample)
                state.last_word = word
        return samples

    def _word_sample(
        self,
        sentence: str,
        start: int,
        end: int,
        word: str,
        state: _SentenceState,
        exclamation: float,
    ) -> Optional[AffectSample]:
        if is_negation(word, self._store):
            state.negation_end = end

        lowered = word.lower()
        sample = self._store.lookup_word(word) or self._store.lookup_word(lowered)
        if sample is None:
            sample = self._store.lookup_emoticon(lowered)
        if sample is None:
            return None

        if state.negation_end is not None and in_same_clause(sentence, state.negation_end, start):
            sample.invert_polarity()
        sample.scale(combine((exclamation, caps_lock_coef(word), modifier_coef(state.last_word, self._store))))
        return sample


def _aggregate(text: str, samples: List[AffectSample]) -> EmotionalResult:
    if not samples:
        general_weight = 0.0
        polarity = 0.0
        maxima = np.zeros(len(WEIGHT_FIELDS))
    else:
        stacked = np.vstack([sample.as_vector() for sample in samples])
        maxima = np.maximum(stacked.max(axis=0), 0.0)
        general_weight = float(maxima[_GENERAL_COLUMN])
        polarity = sum(sample.polarity for sample in samples)

    valence = 1 if polarity > 0 else -1 if polarity < 0 else 0
    emotions = [
        Emotion(category, float(maxima[column])) for category, column in _CATEGORY_COLUMNS if maxima[column] > 0
    ]
    if not emotions:
        neutral = (config.NEUTRAL_BASE + general_weight) / config.NEUTRAL_SCALE
        emotions = [Emotion(EmotionCategory.NEUTRAL, neutral)]
    return EmotionalResult(text=text, emotions=tuple(emotions), general_weight=general_weight, valence=valence)


def feel(text: str) -> EmotionalResult:
    """Analyse ``text`` with the process-wide default lexicon."""
    return Empathyscope(default_store()).feel(text)


__all__ = ["Empathyscope", "feel"]
