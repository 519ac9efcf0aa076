"""Line scanner turning a single line of code into lexical fragments.

The fragment vocabulary follows the shape of an indentation-insensitive
template-language lexer: a leading word becomes a ``tag``, ``(...)`` becomes an
attribute list, ``= expr`` directly after a word becomes ``code`` and whatever
follows whitespace is kept verbatim as ``text`` so callers can re-scan it.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .models import Fragment


class FragmentKind:
    """Names of the fragment kinds produced by :func:`scan`."""

    TAG = "tag"
    ID = "id"
    CLASS_NAME = "class"
    START_ATTRIBUTES = "start-attributes"
    ATTRIBUTE = "attribute"
    END_ATTRIBUTES = "end-attributes"
    CODE = "code"
    COLON = "colon"
    TEXT = "text"
    EOS = "eos"


_TAG_RE = re.compile(r"[\w$](?:[-\w$]*[\w$])?")
_CODE_RE = re.compile(r"(!?=|-)[ \t]*(.+)")
_ID_RE = re.compile(r"#([\w-]+)")
_CLASS_RE = re.compile(r"\.([_a-z0-9\-$]*[_a-z$][_a-z0-9\-$]*)", re.IGNORECASE)
_COLON_RE = re.compile(r":[ \t]*")
_TEXT_RE = re.compile(r"(?:\|[ \t]?|[ \t]+)(.*)")
_ASSIGN_RE = re.compile(r"^(.+?)\s*(?<![=!<>])=(?![=>])\s*(.*)$", re.DOTALL)

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_QUOTES = {'"', "'", "`"}


def scan(line: str) -> List[Fragment]:
    """Scan ``line`` into fragments; the final fragment is always ``eos``."""
    return _Scanner(line).scan()


def find_by_kind(kind: str, fragments: Sequence[Fragment]) -> Optional[Tuple[Fragment, int]]:
    """Return the first fragment of ``kind`` with its index, or None."""
    for index, fragment in enumerate(fragments):
        if fragment.kind == kind:
            return fragment, index
    return None


class _Scanner:
    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0
        self._fragments: List[Fragment] = []

    def scan(self) -> List[Fragment]:
        line = self._line
        # Leading whitespace is indentation, not text.
        while self._pos < len(line) and line[self._pos] in " \t":
            self._pos += 1
        while self._pos < len(line):
            if not self._advance():
                self._emit_text(line[self._pos :], self._pos)
                break
        self._fragments.append(Fragment(FragmentKind.EOS, "", len(line)))
        return self._fragments

    def _advance(self) -> bool:
        line = self._line
        pos = self._pos

        match = _TAG_RE.match(line, pos)
        if match:
            self._fragments.append(Fragment(FragmentKind.TAG, match.group(0), pos))
            self._pos = match.end()
            return True

        match = _CODE_RE.match(line, pos)
        if match:
            self._fragments.append(Fragment(FragmentKind.CODE, match.group(2), pos))
            self._pos = len(line)
            return True

        match = _ID_RE.match(line, pos)
        if match:
            self._fragments.append(Fragment(FragmentKind.ID, match.group(1), pos))
            self._pos = match.end()
            return True

        match = _CLASS_RE.match(line, pos)
        if match:
            self._fragments.append(Fragment(FragmentKind.CLASS_NAME, match.group(1), pos))
            self._pos = match.end()
            return True

        if line[pos] == "(":
            return self._attributes()

        match = _COLON_RE.match(line, pos)
        if match:
            self._fragments.append(Fragment(FragmentKind.COLON, ":", pos))
            self._pos = match.end()
            return True

        match = _TEXT_RE.match(line, pos)
        if match:
            self._emit_text(match.group(1), match.start(1))
            self._pos = len(line)
            return True

        return False

    def _attributes(self) -> bool:
        start = self._pos
        end = _matching_paren(self._line, start)
        if end is None:
            return False

        self._fragments.append(Fragment(FragmentKind.START_ATTRIBUTES, "(", start))
        offset = start + 1
        for part in _split_top_level(self._line[start + 1 : end]):
            stripped = part.strip()
            column = offset + (len(part) - len(part.lstrip()))
            offset += len(part) + 1
            if not stripped:
                continue
            assignment = _ASSIGN_RE.match(stripped)
            if assignment:
                name, value = assignment.group(1).strip(), assignment.group(2).strip()
            else:
                name, value = stripped, ""
            if name:
                self._fragments.append(
                    Fragment(FragmentKind.ATTRIBUTE, value, column, name=name)
                )
        self._fragments.append(Fragment(FragmentKind.END_ATTRIBUTES, ")", end))
        self._pos = end + 1
        return True

    def _emit_text(self, text: str, column: int) -> None:
        if text:
            self._fragments.append(Fragment(FragmentKind.TEXT, text, column))


def _matching_paren(line: str, start: int) -> Optional[int]:
    stack: List[str] = []
    quote: Optional[str] = None
    index = start
    while index < len(line):
        char = line[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            stack.append(_OPENERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
            if not stack:
                return index
        index += 1
    return None


def _split_top_level(inner: str) -> List[str]:
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None
    escaped = False
    for char in inner:
        if quote is not None:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _OPENERS.values():
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


__all__ = ["FragmentKind", "find_by_kind", "scan"]
