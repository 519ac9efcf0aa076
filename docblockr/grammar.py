"""Per-language keyword tables and the grammar matcher."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Tuple, Union

GrammarValue = Union[str, Tuple[str, ...]]

# Categories whose value is an ordered collection rather than a single keyword.
LIST_CATEGORIES = frozenset({"modifiers", "variables", "types"})


@dataclass(frozen=True)
class GrammarTable:
    """Keyword categories used to classify scanned fragments."""

    function: str = "function"
    class_: str = "class"
    identifier: str = r"[a-zA-Z_$0-9]"
    modifiers: Tuple[str, ...] = ()
    variables: Tuple[str, ...] = ()
    types: Tuple[str, ...] = ()

    def get(self, category: str) -> GrammarValue | None:
        """Return the value configured for ``category`` or None."""
        attribute = _attribute_name(category)
        if attribute is None:
            return None
        return getattr(self, attribute)

    def categories(self) -> Iterator[Tuple[str, GrammarValue]]:
        for item in fields(self):
            yield item.name.rstrip("_"), getattr(self, item.name)

    def matches(self, token: str, category: str = "") -> bool:
        """Return True when ``token`` is a keyword of ``category``.

        Without a category (or with one the table does not define) the token
        is looked up across every category instead.
        """
        value = self.get(category) if category else None
        if value is not None:
            if category in LIST_CATEGORIES:
                return token in value
            return value == token
        for name, value in self.categories():
            if name in LIST_CATEGORIES:
                if token in value:
                    return True
            elif value == token:
                return True
        return False


def _attribute_name(category: str) -> str | None:
    if category == "class":
        return "class_"
    if category in {item.name for item in fields(GrammarTable)}:
        return category
    return None


__all__ = ["GrammarTable", "GrammarValue", "LIST_CATEGORIES"]
