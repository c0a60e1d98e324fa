#!/usr/bin/env python3
"""
Print the emotional content recognised in a piece of text.

Usage:
    python scripts/text_to_emotion.py "I love you so very much" [--json]
"""
import logging
import sys

from affectscope import LexiconLoadError, feel
from affectscope.config import LOG_LEVEL


def main(argv: list[str]) -> int:
    args = [arg for arg in argv if arg != "--json"]
    if not args:
        print("Please pass the text you want to sense for emotion", file=sys.stderr)
        return 2
    try:
        result = feel(args[0])
    except LexiconLoadError as exc:
        print(f"Failed to load the lexicon: {exc}", file=sys.stderr)
        return 1
    if "--json" in argv:
        print(result.to_json().decode("utf-8"))
    else:
        print(result)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    sys.exit(main(sys.argv[1:]))
