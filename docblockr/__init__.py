"""Docblock templates generated from the line of code below the cursor."""

from .models import EntityKind, Fragment, Parameter, ReturnInfo, SemanticDescription
from .parser import DocBlockParser
from .renderer import BlockRenderer, RenderOptions

__all__ = [
    "BlockRenderer",
    "DocBlockParser",
    "EntityKind",
    "Fragment",
    "Parameter",
    "RenderOptions",
    "ReturnInfo",
    "SemanticDescription",
]
