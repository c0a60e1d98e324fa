#!/usr/bin/env python3
"""
Plot the emotional trajectory of a text, sentence by sentence.

Usage:
    python scripts/emotion_timeline.py story.txt output.png
"""
import logging
import sys

import matplotlib.pyplot as plt

from affectscope import Empathyscope, EmotionCategory, LexiconStore
from affectscope.config import LOG_LEVEL
from affectscope.parsing import split_sentences

CATEGORIES = [category for category in EmotionCategory if category is not EmotionCategory.NEUTRAL]


def load_sentences(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as handle:
        text = handle.read().strip()
    return [sentence.strip() for sentence in split_sentences(text.replace("\n", " ")) if sentence.strip()]


def main(text_path: str, output_path: str) -> None:
    engine = Empathyscope(LexiconStore.from_defaults())
    results = [engine.feel(sentence) for sentence in load_sentences(text_path)]

    fig, (top, bottom) = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    for category in CATEGORIES:
        weights = [result.emotion(category).weight for result in results]
        top.plot(weights, marker="o", label=category.name.title())
    top.set_ylabel("Emotional Weight")
    top.legend(ncol=3, fontsize="small")

    bottom.bar(range(len(results)), [result.valence for result in results], color="#2E5EAA")
    bottom.axhline(0.0, color="#888", linestyle="--", linewidth=1)
    bottom.set_xlabel("Sentence Index")
    bottom.set_ylabel("Valence")
    top.set_title("Emotional Trajectory")
    fig.tight_layout()
    fig.savefig(output_path, dpi=200)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    text, output = sys.argv[1], sys.argv[2]
    main(text, output)
