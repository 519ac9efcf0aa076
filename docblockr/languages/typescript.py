"""TypeScript interpreter: the JavaScript policy plus type annotations."""

from __future__ import annotations

import re
from typing import List

from ..grammar import GrammarTable
from ..lexer import FragmentKind, find_by_kind
from ..models import EntityKind, Fragment, Parameter, SemanticDescription
from ..settings import LanguageSettings
from .javascript import JavaScriptInterpreter

TYPESCRIPT_GRAMMAR = GrammarTable(
    function="function",
    class_="class",
    identifier=r"[a-zA-Z_$0-9]",
    modifiers=(
        "get",
        "set",
        "static",
        "async",
        "public",
        "private",
        "protected",
        "readonly",
        "abstract",
    ),
    variables=("const", "let", "var"),
    types=(
        "any",
        "bigint",
        "boolean",
        "never",
        "null",
        "number",
        "object",
        "string",
        "symbol",
        "undefined",
        "unknown",
        "void",
    ),
)

_RETURN_TYPE_RE = re.compile(r"^\)\s*:\s*(.+?)\s*(?:\{|=>|;|$)")


class TypeScriptInterpreter(JavaScriptInterpreter):
    """Reads ``name: type`` parameters, return types and typed variables."""

    language = "typescript"

    @classmethod
    def default_settings(cls) -> LanguageSettings:
        return LanguageSettings(grammar=TYPESCRIPT_GRAMMAR)

    def _make_param(self, fragment: Fragment) -> Parameter:
        name, _, declared = (fragment.name or "").partition(":")
        name = name.strip().rstrip("?")
        declared = declared.strip()
        return Parameter(name=name, value=fragment.value, type=declared or None)

    def _annotate(
        self, code: str, fragments: List[Fragment], description: SemanticDescription
    ) -> None:
        found = find_by_kind(FragmentKind.END_ATTRIBUTES, fragments)
        if found is not None:
            end, _ = found
            match = _RETURN_TYPE_RE.match(code[end.column :])
            if match and description.kind != EntityKind.CLASS:
                description.returns.type = match.group(1)
            return

        # ``private label: string;`` is a typed class property
        if (
            description.kind == EntityKind.UNKNOWN
            and description.name
            and description.name == fragments[0].value
            and len(fragments) > 2
            and fragments[1].kind == FragmentKind.COLON
            and fragments[2].kind == FragmentKind.TAG
        ):
            description.kind = EntityKind.VARIABLE
            description.var_type = fragments[2].value
            description.params = []

    def _annotate_variable(
        self, fragments: List[Fragment], description: SemanticDescription
    ) -> None:
        if (
            len(fragments) > 2
            and fragments[1].kind == FragmentKind.COLON
            and fragments[2].kind == FragmentKind.TAG
        ):
            description.var_type = fragments[2].value


__all__ = ["TYPESCRIPT_GRAMMAR", "TypeScriptInterpreter"]
