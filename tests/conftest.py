from __future__ import annotations

import pytest

from docblockr.config import DocBlockrConfig
from docblockr.languages import JavaScriptInterpreter, TypeScriptInterpreter
from docblockr.parser import DocBlockParser


@pytest.fixture
def javascript() -> JavaScriptInterpreter:
    """Provide a JavaScript interpreter with its default grammar."""
    return JavaScriptInterpreter()


@pytest.fixture
def typescript() -> TypeScriptInterpreter:
    """Provide a TypeScript interpreter with its default grammar."""
    return TypeScriptInterpreter()


@pytest.fixture
def js_parser() -> DocBlockParser:
    """JavaScript parser with two-space columns and return tags enabled."""
    config = DocBlockrConfig(column_spacing=2, default_return_tag=True)
    return DocBlockParser("javascript", config=config)
