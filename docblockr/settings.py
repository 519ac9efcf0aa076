"""Language specific settings handed to interpreters and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .grammar import GrammarTable

_OVERRIDABLE = ("comment_open", "comment_close", "separator", "eos")


@dataclass(frozen=True)
class LanguageSettings:
    """Grammar plus the comment delimiters used to assemble a docblock."""

    grammar: GrammarTable = field(default_factory=GrammarTable)
    comment_open: str = "/**"
    comment_close: str = " */"
    separator: str = " * "
    eos: str = "\n"

    def with_overrides(self, overrides: Mapping[str, Any] | None) -> "LanguageSettings":
        """Return a copy with the delimiter fields present in ``overrides``."""
        if not overrides:
            return self
        changes = {
            key: str(overrides[key])
            for key in _OVERRIDABLE
            if key in overrides and isinstance(overrides[key], str)
        }
        return replace(self, **changes) if changes else self


__all__ = ["LanguageSettings"]
