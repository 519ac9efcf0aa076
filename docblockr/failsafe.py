"""Fail-safe docblock used when the render pipeline breaks."""

from __future__ import annotations

from .settings import LanguageSettings


def build_block_stub(settings: LanguageSettings | None = None) -> str:
    """Return a description-only docblock in the language's delimiters."""
    settings = settings or LanguageSettings()
    rows = [
        settings.comment_open,
        f"{settings.separator}${{1:[description]}}",
        settings.comment_close,
    ]
    return settings.eos.join(row.rstrip() for row in rows)


__all__ = ["build_block_stub"]
