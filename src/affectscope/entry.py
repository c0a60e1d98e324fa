"""Lexicon records and the per-match working copies scaled during analysis."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

WEIGHT_FIELDS: Tuple[str, ...] = (
    "general",
    "happiness",
    "sadness",
    "anger",
    "fear",
    "disgust",
    "surprise",
)


def _polarity(happiness: float, sadness: float, anger: float, fear: float, disgust: float, surprise: float) -> float:
    return happiness + surprise - (sadness + anger + fear + disgust)


@dataclass(frozen=True)
class AffectEntry:
    """One lexicon line: a word or emoticon pattern and its seven weights."""

    word: str
    general: float = 0.0
    happiness: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    disgust: float = 0.0
    surprise: float = 0.0

    @property
    def polarity(self) -> float:
        return _polarity(self.happiness, self.sadness, self.anger, self.fear, self.disgust, self.surprise)

    def weights(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in WEIGHT_FIELDS)

    def sample(self, *, starts_with_emoticon: bool = False) -> "AffectSample":
        """Return an independent working copy of this entry."""
        return AffectSample(self.word, *self.weights(), starts_with_emoticon=starts_with_emoticon)


@dataclass
class AffectSample:
    """Working copy of an :class:`AffectEntry` owned by a single ``feel`` call.

    Weights are scaled in place by heuristic coefficients and are not clamped,
    so repeated boosts can push them above 1.
    """

    word: str
    general: float = 0.0
    happiness: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    disgust: float = 0.0
    surprise: float = 0.0
    starts_with_emoticon: bool = False

    @classmethod
    def surprise_marker(cls) -> "AffectSample":
        """Synthetic sample standing for a ``?!`` / ``!?`` in a sentence."""
        return cls("?!", surprise=1.0)

    @property
    def polarity(self) -> float:
        return _polarity(self.happiness, self.sadness, self.anger, self.fear, self.disgust, self.surprise)

    def scale(self, coefficient: float) -> None:
        if coefficient <= 0:
            raise ValueError(f"scale coefficient must be positive, got {coefficient!r}")
        for name in WEIGHT_FIELDS:
            setattr(self, name, getattr(self, name) * coefficient)

    def invert_polarity(self) -> None:
        """Remap the weights of a negated match.

        Happiness takes the strongest negative weight; the negative categories
        take the former happiness (sadness in full, the others at half).
        """
        happiness = self.happiness
        self.happiness = max(self.sadness, self.anger, self.fear, self.disgust)
        self.sadness = happiness
        self.anger = happiness / 2
        self.fear = happiness / 2
        self.disgust = happiness / 2

    def as_vector(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in WEIGHT_FIELDS], dtype=np.float64)


__all__ = ["WEIGHT_FIELDS", "AffectEntry", "AffectSample"]
