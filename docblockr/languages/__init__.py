"""Language interpreter implementations and the registration table."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List, Optional

from ..settings import LanguageSettings
from .base import NullInterpreter, TokenInterpreter
from .javascript import JavaScriptInterpreter
from .php import PhpInterpreter
from .typescript import TypeScriptInterpreter

_ENTRY_POINT_GROUP = "docblockr.languages"

InterpreterFactory = Callable[..., TokenInterpreter]

_BUILTIN_FACTORIES: Dict[str, InterpreterFactory] = {
    "javascript": JavaScriptInterpreter,
    "php": PhpInterpreter,
    "typescript": TypeScriptInterpreter,
    "plaintext": NullInterpreter,
}


class UnknownLanguageError(ValueError):
    """Raised when no interpreter is registered for a language id."""


def discover_interpreters() -> Dict[str, InterpreterFactory]:
    """Return the language id -> interpreter factory table, plugins included."""

    factories: Dict[str, InterpreterFactory] = dict(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        name = entry.name.lower()
        if name in factories:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load language entry point '{name}': {exc}") from exc
        factories[name] = _coerce_factory(name, loaded)
    return factories


def available_languages() -> List[str]:
    """Return the sorted ids of every registered language."""
    return sorted(discover_interpreters())


def get_interpreter(
    language: str, settings: Optional[LanguageSettings] = None
) -> TokenInterpreter:
    """Instantiate the interpreter registered for ``language``."""
    key = language.lower()
    factory = discover_interpreters().get(key)
    if factory is None:
        known = ", ".join(available_languages())
        raise UnknownLanguageError(f"Unsupported language '{language}' (known: {known})")
    instance = factory(settings)
    if not isinstance(instance, TokenInterpreter):
        raise TypeError(f"Interpreter factory for '{language}' did not return a TokenInterpreter")
    return instance


def _coerce_factory(name: str, obj: object) -> InterpreterFactory:
    if isinstance(obj, type) and issubclass(obj, TokenInterpreter):
        return obj
    if callable(obj):
        return obj  # type: ignore[return-value]
    raise TypeError(f"Language entry point '{name}' must be a TokenInterpreter subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    try:
        entry_points = metadata.entry_points()
    except Exception:  # pragma: no cover - defensive guard
        return []

    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]

    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "JavaScriptInterpreter",
    "NullInterpreter",
    "PhpInterpreter",
    "TokenInterpreter",
    "TypeScriptInterpreter",
    "UnknownLanguageError",
    "available_languages",
    "discover_interpreters",
    "get_interpreter",
]
