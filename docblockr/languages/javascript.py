"""JavaScript interpreter.

Each pass scans the code, classifies the first fragment and, when free text is
left over, re-scans that text with the partially filled description. A pass
that decides the next identifier is the entity name hands that decision to the
following pass through the continuation hint.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..grammar import GrammarTable
from ..lexer import FragmentKind, find_by_kind, scan
from ..logging import get_logger
from ..models import EntityKind, Fragment, Parameter, SemanticDescription
from ..settings import LanguageSettings
from .base import TokenInterpreter

JAVASCRIPT_GRAMMAR = GrammarTable(
    function="function",
    class_="class",
    identifier=r"[a-zA-Z_$0-9]",
    modifiers=("get", "set", "static", "async"),
    variables=("const", "let", "var"),
)

# Upper bound on re-scans of one line; each pass normally shrinks the input.
MAX_DEPTH = 16


def strip_leading_assignment(text: str) -> str:
    """Drop a leading ``= `` left over from ``Foo.prototype.bar = ...``."""
    return re.sub(r"^=\s*", "", text, count=1)


def normalize_declaration(text: str, identifier: str, function_keyword: str) -> str:
    """Rewrite the remainder of a ``const``/``let``/``var`` statement for re-scanning.

    ``add = function(a) {`` and ``add = (a) => {`` both become
    ``function add(a) {``; plain assignments are squeezed to ``x=5`` so the
    value scans as code.
    """
    word = f"{identifier}+"
    keyword = re.escape(function_keyword)

    match = re.match(rf"({word})\s*=\s*(?:async\s+)?({keyword})\b\s*", text)
    if match:
        rest = text[match.end() :]
        if rest.startswith("("):
            return f"{match.group(2)} {match.group(1)}{rest}"
        # Named function expression, ``add = function inner(a)``
        return f"{match.group(2)} {match.group(1)}{_strip_name(rest, word)}"

    match = re.match(
        rf"({word})\s*=\s*(?:async\s+)?(\([^()]*\)|{word})(\s*:\s*[^=]+?)?\s*=>", text
    )
    if match:
        params = match.group(2)
        if not params.startswith("("):
            params = f"({params})"
        annotation = (match.group(3) or "").strip()
        if annotation:
            params = f"{params}{annotation}"
        return f"{function_keyword} {match.group(1)}{params} {{"

    return text.replace(" = ", "=", 1).replace(";", "", 1)


def _strip_name(rest: str, word: str) -> str:
    return re.sub(rf"^{word}\s*(?=\()", "", rest, count=1)


class JavaScriptInterpreter(TokenInterpreter):
    """Recovers functions, classes, prototype methods and variables from JavaScript."""

    language = "javascript"

    def __init__(self, settings: Optional[LanguageSettings] = None) -> None:
        super().__init__(settings)
        identifier = self.grammar.identifier
        self._prototype_re = re.compile(rf"({identifier}+)\.prototype\.({identifier}+)")
        self._continuable_re = re.compile(rf"^{identifier}")
        self._bare_name_re = re.compile(rf"^{identifier}+$")
        self.logger = get_logger(f"languages.{self.language}")

    @classmethod
    def default_settings(cls) -> LanguageSettings:
        return LanguageSettings(grammar=JAVASCRIPT_GRAMMAR)

    def interpret(
        self,
        code: str,
        next_hint: str = "",
        partial: Optional[SemanticDescription] = None,
    ) -> SemanticDescription:
        description = partial if partial is not None else SemanticDescription()
        return self._interpret(code, next_hint, description, 0)

    def _interpret(
        self, code: str, hint: str, description: SemanticDescription, depth: int
    ) -> SemanticDescription:
        if depth >= MAX_DEPTH:
            self.logger.debug("Giving up after %d passes on %r", depth, code)
            return description
        self.logger.debug("Pass %d: %r (hint=%r)", depth, code, hint)

        grammar = self.grammar
        fragments = scan(code)
        first = fragments[0].value
        eos = fragments[-1]
        found = find_by_kind(FragmentKind.TEXT, fragments)
        current = found[0] if found else None
        remainder = current.value if current is not None else ""

        prototype = self._prototype_re.search(code)
        if grammar.matches(first, "function") or grammar.matches(first, "class"):
            is_class = grammar.matches(first, "class")
            description.kind = EntityKind.CLASS if is_class else EntityKind.FUNCTION
            # The next identifier seen is the name
            hint = first
            if is_class:
                description.returns.present = False
        elif prototype:
            description.kind = EntityKind.FUNCTION
            description.name = prototype.group(2)
            remainder = strip_leading_assignment(remainder)
        elif find_by_kind(FragmentKind.CODE, fragments):
            description.name = first
            description.kind = EntityKind.VARIABLE
            description.params = []
            self._annotate_variable(fragments, description)
            return description
        elif grammar.matches(first, "variables"):
            remainder = normalize_declaration(remainder, grammar.identifier, grammar.function)
            if self._bare_name_re.match(remainder):
                # ``let counter;`` declares without assigning
                description.name = remainder
                description.kind = EntityKind.VARIABLE
                description.params = []
                return description
        elif grammar.matches(first, "modifiers"):
            name = self._find_name(fragments)
            if not (grammar.matches(name, "function") or grammar.matches(name, "class")):
                description.name = name
        elif hint and not description.name and grammar.matches(hint):
            description.name = first

        self._collect_params(fragments, description)
        self._annotate(code, fragments, description)

        if current is not None and current.column < eos.column:
            if self._continuable_re.match(remainder):
                return self._interpret(remainder, hint, description, depth + 1)
            return self._interpret_trailing(remainder, hint, description, depth)
        return description

    def _interpret_trailing(
        self, remainder: str, hint: str, description: SemanticDescription, depth: int
    ) -> SemanticDescription:
        """Read what follows ``function`` in ``function (a)`` and ``function* gen(a)``."""
        if not self.grammar.matches(hint, "function"):
            return description
        rest = remainder.lstrip("* \t")
        if self._continuable_re.match(rest):
            return self._interpret(rest, hint, description, depth + 1)
        if rest.startswith("("):
            fragments = scan(rest)
            self._collect_params(fragments, description)
            self._annotate(rest, fragments, description)
        return description

    def _find_name(self, fragments: List[Fragment], depth: int = 0) -> str:
        """Skip modifier keywords and return the first other identifier."""
        following = fragments[1] if len(fragments) > 1 else None
        if following is None or following.kind != FragmentKind.TEXT or depth >= MAX_DEPTH:
            return ""
        lexed = scan(following.value)
        if self.grammar.matches(lexed[0].value, "modifiers"):
            return self._find_name(lexed, depth + 1)
        return lexed[0].value

    def _collect_params(self, fragments: List[Fragment], description: SemanticDescription) -> None:
        if find_by_kind(FragmentKind.START_ATTRIBUTES, fragments) is None:
            return
        for fragment in fragments:
            if fragment.kind == FragmentKind.ATTRIBUTE and fragment.name:
                description.params.append(self._make_param(fragment))

    def _make_param(self, fragment: Fragment) -> Parameter:
        return Parameter(name=fragment.name or "", value=fragment.value)

    def _annotate(
        self, code: str, fragments: List[Fragment], description: SemanticDescription
    ) -> None:
        """Hook for languages that read type annotations off a pass."""

    def _annotate_variable(
        self, fragments: List[Fragment], description: SemanticDescription
    ) -> None:
        """Hook for languages that declare variable types."""


__all__ = [
    "JAVASCRIPT_GRAMMAR",
    "JavaScriptInterpreter",
    "MAX_DEPTH",
    "normalize_declaration",
    "strip_leading_assignment",
]
