"""Entry point tying the scanner, interpreter and renderer together.

A host editor hands over the text of the line below the cursor; the parser
trims it, lets the language interpreter recover a description from it and
renders that description as a snippet docblock.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .config import DocBlockrConfig
from .failsafe import build_block_stub
from .languages import TokenInterpreter, get_interpreter
from .logging import get_logger
from .models import SemanticDescription
from .renderer import BlockRenderer, RenderOptions


class DocBlockParser:
    """Generates docblocks for one language."""

    def __init__(
        self,
        language: str = "javascript",
        *,
        config: Optional[DocBlockrConfig] = None,
        interpreter: Optional[TokenInterpreter] = None,
    ) -> None:
        self.language = language.lower()
        self.config = config or DocBlockrConfig()
        self.logger = get_logger("parser")

        if interpreter is None:
            interpreter = get_interpreter(self.language)
            overrides = self.config.language_overrides(self.language)
            settings = interpreter.settings.with_overrides(overrides)
            if settings is not interpreter.settings:
                interpreter = get_interpreter(self.language, settings)
        self.interpreter = interpreter
        self.settings = interpreter.settings
        self.renderer = BlockRenderer(self.settings)

    def tokenize(self, line: str) -> SemanticDescription:
        """Recover a description from a single line of code."""
        return self.interpreter.interpret(line.strip())

    def render(
        self, description: SemanticDescription, options: Optional[RenderOptions] = None
    ) -> str:
        return self.renderer.render(description, options or self.config.render_options())

    def render_line(self, line: str, options: Optional[RenderOptions] = None) -> str:
        """Return the docblock for ``line``; never raises on malformed code."""
        try:
            description = self.tokenize(line)
            self.logger.debug(
                "Recovered %s %r with %d parameter(s)",
                description.kind or "unknown",
                description.name,
                len(description.params),
            )
            return self.render(description, options)
        except Exception as exc:
            self.logger.warning("Docblock generation failed for %r: %s", line, exc)
            return build_block_stub(self.settings)

    def render_after_cursor(
        self,
        lines: Sequence[str],
        cursor_line: int,
        options: Optional[RenderOptions] = None,
    ) -> str:
        """Render the docblock for the line below ``cursor_line`` (0-based)."""
        index = cursor_line + 1
        next_line = lines[index] if 0 <= index < len(lines) else ""
        return self.render_line(next_line, options)


__all__ = ["DocBlockParser"]
