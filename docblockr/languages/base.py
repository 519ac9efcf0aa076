"""Base classes for language interpreters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..grammar import GrammarTable
from ..models import SemanticDescription
from ..settings import LanguageSettings


class TokenInterpreter(ABC):
    """Contract for interpreters that recover a description from one line of code."""

    language: str = ""

    def __init__(self, settings: Optional[LanguageSettings] = None) -> None:
        self.settings = settings if settings is not None else self.default_settings()

    @classmethod
    def default_settings(cls) -> LanguageSettings:
        """Return the settings used when none are injected."""
        return LanguageSettings()

    @property
    def grammar(self) -> GrammarTable:
        return self.settings.grammar

    @abstractmethod
    def interpret(
        self,
        code: str,
        next_hint: str = "",
        partial: Optional[SemanticDescription] = None,
    ) -> SemanticDescription:
        """Build a description for ``code``, continuing ``partial`` when given."""


class NullInterpreter(TokenInterpreter):
    """Interpreter for languages without a dedicated policy; recovers nothing."""

    language = "plaintext"

    def interpret(
        self,
        code: str,
        next_hint: str = "",
        partial: Optional[SemanticDescription] = None,
    ) -> SemanticDescription:
        return partial if partial is not None else SemanticDescription()
