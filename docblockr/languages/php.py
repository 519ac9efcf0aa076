"""PHP interpreter.

PHP shares the JavaScript declaration shapes (``function``, ``class`` and
modifier-prefixed members) but names variables with a ``$`` sigil, puts
parameter types in front of the name and declares class properties without a
keyword.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..grammar import GrammarTable
from ..lexer import FragmentKind, find_by_kind
from ..models import EntityKind, Fragment, Parameter, SemanticDescription
from ..settings import LanguageSettings
from .javascript import JavaScriptInterpreter

PHP_GRAMMAR = GrammarTable(
    function="function",
    class_="class",
    identifier=r"[a-zA-Z_$0-9]",
    modifiers=("public", "private", "protected", "static", "abstract", "final", "readonly"),
    variables=("const", "var"),
    types=(
        "array",
        "bool",
        "callable",
        "float",
        "int",
        "iterable",
        "mixed",
        "never",
        "null",
        "object",
        "self",
        "string",
        "void",
    ),
)

_ASSIGNMENT_RE = re.compile(r"^(\$\w+)\s*(?<![=!<>])=(?![=>])\s*(.*)$")
_RETURN_TYPE_RE = re.compile(r"^\)\s*:\s*(.+?)\s*(?:\{|;|$)")


class PhpInterpreter(JavaScriptInterpreter):
    """Recovers functions, classes, properties and ``$variables`` from PHP."""

    language = "php"

    def __init__(self, settings: Optional[LanguageSettings] = None) -> None:
        super().__init__(settings)
        modifiers = "|".join(re.escape(word) for word in self.grammar.modifiers)
        # ``protected ?int $count = 0;``
        self._property_re = re.compile(
            rf"^(?:(?:{modifiers}|var)\s+)+(?:([?\w\\|]+)\s+)?(\$\w+)\s*(?:=|;|$)"
        )

    @classmethod
    def default_settings(cls) -> LanguageSettings:
        return LanguageSettings(grammar=PHP_GRAMMAR)

    def interpret(
        self,
        code: str,
        next_hint: str = "",
        partial: Optional[SemanticDescription] = None,
    ) -> SemanticDescription:
        description = partial if partial is not None else SemanticDescription()

        prop = self._property_re.match(code)
        if prop:
            description.kind = EntityKind.VARIABLE
            description.name = prop.group(2)
            description.var_type = prop.group(1)
            description.params = []
            return description

        assignment = _ASSIGNMENT_RE.match(code)
        if assignment:
            # ``$total = 0;`` scans as code once the spaces are gone
            code = f"{assignment.group(1)}={assignment.group(2)}"
        return self._interpret(code, next_hint, description, 0)

    def _make_param(self, fragment: Fragment) -> Parameter:
        words = [
            word
            for word in (fragment.name or "").split()
            if not self.grammar.matches(word, "modifiers")
        ]
        if not words:
            return Parameter(name="", value=fragment.value)
        name = words[-1].lstrip("&")
        declared = " ".join(words[:-1])
        return Parameter(name=name, value=fragment.value, type=declared or None)

    def _annotate(
        self, code: str, fragments: List[Fragment], description: SemanticDescription
    ) -> None:
        found = find_by_kind(FragmentKind.END_ATTRIBUTES, fragments)
        if found is None or description.kind == EntityKind.CLASS:
            return
        end, _ = found
        match = _RETURN_TYPE_RE.match(code[end.column :])
        if match:
            description.returns.type = match.group(1)


__all__ = ["PHP_GRAMMAR", "PhpInterpreter"]
