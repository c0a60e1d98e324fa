"""Loading and lookup of the affect lexicon, the emoticon lexicon and keyword lists.

A :class:`LexiconStore` is built once and is read-only afterwards, so any
number of threads may query it. Every lookup hands back a fresh
:class:`~affectscope.entry.AffectSample`; the stored entries are never mutated.
"""
from __future__ import annotations

import logging
import math
import threading
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Union

import orjson
from pydantic import ValidationError

from . import config
from .entry import WEIGHT_FIELDS, AffectEntry, AffectSample
from .exceptions import LexiconLoadError
from .parsing import starts_with
from .schema import KeywordLists

logger = logging.getLogger(__name__)

Resource = Union[str, Path, Traversable]

_FIELD_COUNT = 1 + len(WEIGHT_FIELDS)


class LexiconStore:
    """Word and emoticon affect tables plus negation and modifier word lists."""

    def __init__(
        self,
        words: Sequence[AffectEntry],
        emoticons: Sequence[AffectEntry],
        negations: Sequence[str] = (),
        intensity_modifiers: Sequence[str] = (),
    ) -> None:
        self._words: Tuple[AffectEntry, ...] = tuple(words)
        self._emoticons: Tuple[AffectEntry, ...] = tuple(emoticons)
        self._word_index: Mapping[str, AffectEntry] = MappingProxyType(_index(self._words))
        self._emoticon_index: Mapping[str, AffectEntry] = MappingProxyType(_index(self._emoticons))
        self._negations: FrozenSet[str] = frozenset(negations)
        self._intensity_modifiers: FrozenSet[str] = frozenset(intensity_modifiers)

    @classmethod
    def load(cls, lexicon: Resource, emoticons: Resource, keywords: Resource) -> "LexiconStore":
        """Parse the three resources; raise :class:`LexiconLoadError` on any problem."""
        keyword_lists = _parse_keywords(keywords)
        store = cls(
            words=_parse_lexicon(lexicon),
            emoticons=_parse_lexicon(emoticons),
            negations=keyword_lists.negation_words(),
            intensity_modifiers=keyword_lists.intensity_modifier_words(),
        )
        logger.debug(
            "Lexicon store ready: %d words, %d emoticons, %d negations, %d modifiers",
            len(store._words),
            len(store._emoticons),
            len(store._negations),
            len(store._intensity_modifiers),
        )
        return store

    @classmethod
    def from_defaults(cls) -> "LexiconStore":
        """Load the packaged resources, honouring any configured path overrides."""
        return cls.load(
            _resource(config.LEXICON_PATH, config.LEXICON_RESOURCE),
            _resource(config.EMOTICONS_PATH, config.EMOTICONS_RESOURCE),
            _resource(config.KEYWORDS_PATH, config.KEYWORDS_RESOURCE),
        )

    @property
    def words(self) -> Tuple[AffectEntry, ...]:
        return self._words

    @property
    def emoticons(self) -> Tuple[AffectEntry, ...]:
        return self._emoticons

    def __len__(self) -> int:
        return len(self._words) + len(self._emoticons)

    def lookup_word(self, word: str) -> Optional[AffectSample]:
        entry = self._word_index.get(word)
        return entry.sample() if entry is not None else None

    def lookup_emoticon(self, token: str) -> Optional[AffectSample]:
        """Exact emoticon match, else the first pattern ``token`` starts with."""
        entry = self._emoticon_index.get(token)
        if entry is not None:
            return entry.sample()
        for entry in self._emoticons:
            if starts_with(token, entry.word):
                return entry.sample(starts_with_emoticon=True)
        return None

    def find_emoticons_in(self, sentence: str) -> List[AffectSample]:
        return [entry.sample(starts_with_emoticon=True) for entry in self._emoticons if entry.word in sentence]

    def is_negation(self, word: str) -> bool:
        return word in self._negations

    def is_intensity_modifier(self, word: str) -> bool:
        return word in self._intensity_modifiers


_default_store: Optional[LexiconStore] = None
_default_lock = threading.Lock()


def default_store() -> LexiconStore:
    """Process-wide store built from the defaults on first use."""
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                logger.debug("Initialising default lexicon store")
                _default_store = LexiconStore.from_defaults()
                logger.info("Default lexicon store loaded (%d entries)", len(_default_store))
    return _default_store


def reset_default_store() -> None:
    global _default_store
    with _default_lock:
        _default_store = None


def _resource(override: str, name: str) -> Resource:
    if override:
        return Path(override)
    return resources.files(config.DATA_PACKAGE).joinpath(name)


def _read_text(resource: Resource) -> str:
    path = Path(resource) if isinstance(resource, str) else resource
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LexiconLoadError(str(resource), f"cannot read resource: {exc}") from exc


def _parse_lexicon(resource: Resource) -> List[AffectEntry]:
    name = str(resource)
    entries: List[AffectEntry] = []
    for line_number, line in enumerate(_read_text(resource).splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(_parse_line(stripped, name, line_number))
    logger.debug("Parsed lexicon file %s (%d entries)", name, len(entries))
    return entries


def _parse_line(line: str, resource: str, line_number: int) -> AffectEntry:
    parts = line.split()
    if len(parts) != _FIELD_COUNT:
        raise LexiconLoadError(
            resource,
            f"expected {_FIELD_COUNT} fields, found {len(parts)}: {line!r}",
            line_number=line_number,
        )
    word, *raw_weights = parts
    try:
        weights = [float(value) for value in raw_weights]
    except ValueError as exc:
        raise LexiconLoadError(resource, f"non-numeric weight in {line!r}", line_number=line_number) from exc
    if not all(math.isfinite(value) for value in weights):
        raise LexiconLoadError(resource, f"non-finite weight in {line!r}", line_number=line_number)
    return AffectEntry(word, *weights)


def _parse_keywords(resource: Resource) -> KeywordLists:
    name = str(resource)
    raw = _read_text(resource)
    try:
        return KeywordLists.model_validate(orjson.loads(raw))
    except orjson.JSONDecodeError as exc:
        raise LexiconLoadError(name, f"invalid JSON: {exc}") from exc
    except ValidationError as exc:
        raise LexiconLoadError(name, f"invalid keyword lists: {exc}") from exc


def _index(entries: Sequence[AffectEntry]) -> Dict[str, AffectEntry]:
    index: Dict[str, AffectEntry] = {}
    for entry in entries:
        if entry.word in index:
            logger.debug("Duplicate lexicon entry %r ignored", entry.word)
            continue
        index[entry.word] = entry
    return index


__all__ = ["LexiconStore", "default_store", "reset_default_store"]
