from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "feel",
    "Empathyscope",
    "LexiconStore",
    "default_store",
    "AffectEntry",
    "AffectSample",
    "Emotion",
    "EmotionCategory",
    "EmotionalResult",
    "KeywordLists",
    "AffectscopeError",
    "LexiconLoadError",
]

_ATTR_TO_MODULE = {
    "feel": (".affect", "feel"),
    "Empathyscope": (".affect", "Empathyscope"),
    "LexiconStore": (".lexicon", "LexiconStore"),
    "default_store": (".lexicon", "default_store"),
    "AffectEntry": (".entry", "AffectEntry"),
    "AffectSample": (".entry", "AffectSample"),
    "Emotion": (".emotion", "Emotion"),
    "EmotionCategory": (".emotion", "EmotionCategory"),
    "EmotionalResult": (".emotion", "EmotionalResult"),
    "KeywordLists": (".schema", "KeywordLists"),
    "AffectscopeError": (".exceptions", "AffectscopeError"),
    "LexiconLoadError": (".exceptions", "LexiconLoadError"),
}


def __getattr__(name: str) -> Any:
    if name not in _ATTR_TO_MODULE:
        raise AttributeError(f"module 'affectscope' has no attribute {name!r}")
    module_name, attr_name = _ATTR_TO_MODULE[name]
    module = import_module(module_name, __name__)
    attr = getattr(module, attr_name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:
    return sorted(__all__)


if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from .affect import Empathyscope, feel
    from .lexicon import LexiconStore, default_store
    from .entry import AffectEntry, AffectSample
    from .emotion import Emotion, EmotionCategory, EmotionalResult
    from .schema import KeywordLists
    from .exceptions import AffectscopeError, LexiconLoadError
