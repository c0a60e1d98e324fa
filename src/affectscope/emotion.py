"""Emotion categories and the ranked result of one ``feel`` call."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import orjson


class EmotionCategory(IntEnum):
    """Ekman's six basic emotions plus a neutral fallback."""

    NEUTRAL = -1
    HAPPINESS = 0
    SADNESS = 1
    FEAR = 2
    ANGER = 3
    DISGUST = 4
    SURPRISE = 5


@dataclass(frozen=True)
class Emotion:
    """A single emotion category with its weight."""

    category: EmotionCategory
    weight: float

    @property
    def sort_key(self) -> Tuple[float, int]:
        # heavier first; equal weights fall back to category order
        return (-self.weight, int(self.category))

    def __lt__(self, other: "Emotion") -> bool:
        if not isinstance(other, Emotion):
            return NotImplemented
        return self.sort_key < other.sort_key


def rank(emotions: Iterable[Emotion]) -> Tuple[Emotion, ...]:
    return tuple(sorted(emotions, key=lambda emotion: emotion.sort_key))


@dataclass
class EmotionalResult:
    """Emotional content recognised in a piece of text.

    ``emotions`` holds only categories with a positive weight, strongest first,
    or a single NEUTRAL entry when nothing scored. ``valence`` is -1, 0 or 1.
    ``previous`` is never set by the engine; callers may link results into a
    conversation history.
    """

    text: str
    emotions: Tuple[Emotion, ...]
    general_weight: float = 0.0
    valence: int = 0
    previous: Optional["EmotionalResult"] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.emotions = rank(self.emotions)

    @classmethod
    def empty(cls, text: str = "") -> "EmotionalResult":
        return cls(text=text, emotions=(Emotion(EmotionCategory.NEUTRAL, 1.0),))

    @property
    def strongest_emotion(self) -> Emotion:
        return self.emotions[0]

    def strongest_emotions(self, count: int) -> List[Emotion]:
        if count <= 0:
            return []
        return list(self.emotions[:count])

    def emotion(self, category: EmotionCategory) -> Emotion:
        for item in self.emotions:
            if item.category == category:
                return item
        return Emotion(category, 0.0)

    @property
    def happiness_weight(self) -> float:
        return self.emotion(EmotionCategory.HAPPINESS).weight

    @property
    def sadness_weight(self) -> float:
        return self.emotion(EmotionCategory.SADNESS).weight

    @property
    def fear_weight(self) -> float:
        return self.emotion(EmotionCategory.FEAR).weight

    @property
    def anger_weight(self) -> float:
        return self.emotion(EmotionCategory.ANGER).weight

    @property
    def disgust_weight(self) -> float:
        return self.emotion(EmotionCategory.DISGUST).weight

    @property
    def surprise_weight(self) -> float:
        return self.emotion(EmotionCategory.SURPRISE).weight

    def history(self) -> Iterator["EmotionalResult"]:
        """Yield this result and then every linked ``previous`` result."""
        current: Optional[EmotionalResult] = self
        while current is not None:
            yield current
            current = current.previous

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "general_weight": self.general_weight,
            "valence": self.valence,
            "emotions": [
                {"category": item.category.name.lower(), "weight": item.weight} for item in self.emotions
            ],
        }

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict())

    def __str__(self) -> str:
        lines = [
            f"Text: {self.text}",
            f"General weight: {self.general_weight}",
            f"Valence: {self.valence}",
            f"Happiness weight: {self.happiness_weight}",
            f"Sadness weight: {self.sadness_weight}",
            f"Anger weight: {self.anger_weight}",
            f"Fear weight: {self.fear_weight}",
            f"Disgust weight: {self.disgust_weight}",
            f"Surprise weight: {self.surprise_weight}",
        ]
        return "\n".join(lines)


__all__ = ["EmotionCategory", "Emotion", "EmotionalResult", "rank"]
