"""Core data models shared across docblockr components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class EntityKind:
    """Coarse classification of the code a docblock is written for."""

    FUNCTION = "function"
    CLASS = "class"
    VARIABLE = "variable"
    UNKNOWN = ""


@dataclass(frozen=True)
class Fragment:
    """One lexical unit scanned from a source line."""

    kind: str
    value: str
    column: int
    name: Optional[str] = None


@dataclass
class Parameter:
    """Describes a function parameter."""

    name: str
    value: str = ""
    type: Optional[str] = None


@dataclass
class ReturnInfo:
    """Whether a return value is documented, and its type when known."""

    present: bool = True
    type: Optional[str] = None


@dataclass
class SemanticDescription:
    """What the interpreter recovered from a line of code."""

    name: str = ""
    kind: str = EntityKind.UNKNOWN
    var_type: Optional[str] = None
    returns: ReturnInfo = field(default_factory=ReturnInfo)
    params: List[Parameter] = field(default_factory=list)

    @property
    def is_variable(self) -> bool:
        return self.kind == EntityKind.VARIABLE


__all__ = ["EntityKind", "Fragment", "Parameter", "ReturnInfo", "SemanticDescription"]
