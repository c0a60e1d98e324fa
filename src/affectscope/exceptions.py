"""Exception types raised by affectscope."""
from __future__ import annotations

from typing import Optional


class AffectscopeError(Exception):
    """Base class for all affectscope errors."""


class LexiconLoadError(AffectscopeError):
    """A lexicon or keyword resource is missing, unreadable or malformed.

    Raised only while a :class:`~affectscope.lexicon.LexiconStore` is being
    built. The engine is unusable until the resource is fixed, so callers
    should not retry.
    """

    def __init__(self, resource: str, message: str, *, line_number: Optional[int] = None) -> None:
        self.resource = resource
        self.line_number = line_number
        location = resource if line_number is None else f"{resource}:{line_number}"
        super().__init__(f"{location}: {message}")
