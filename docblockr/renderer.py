"""Renders a semantic description into an editor snippet docblock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from jinja2 import DictLoader, Environment

from .models import SemanticDescription
from .settings import LanguageSettings

DEFAULT_COLUMN_SPACING = 2
TYPE_PLACEHOLDER = "[type]"

# Space between the @param column and the type column, on top of column spacing.
PARAM_TYPE_SPACER = " "

# Tuned by eye: stands in for the spacers around the parameter name column.
# One of them is already counted by the column spacing, so the @return line
# pads by one less to put its description under the @param descriptions.
RETURN_NAME_PADDING = 3

_TAG_TEMPLATES = {
    "param": (
        "@param{{ columns }}{{ spacer }}{{ type }}{{ type_space }}"
        "{{ name }}{{ name_space }}{{ desc }}"
    ),
    "return": "@return{{ columns }}{{ type }}{{ spacing }}{{ desc }}",
    "var": "@var{{ columns }}{{ type }}",
}

Placeholder = Callable[[str], str]


@dataclass(frozen=True)
class RenderOptions:
    """User facing render settings."""

    column_spacing: int = DEFAULT_COLUMN_SPACING
    default_return_tag: bool = False

    @property
    def columns(self) -> str:
        return " " * max(self.column_spacing, 0)


def escape(text: str) -> str:
    """Escape ``$`` so it cannot be read as a tabstop."""
    return text.replace("$", "\\$")


def placeholder_counter(start: int = 1) -> Placeholder:
    """Return a function wrapping text in ``${n:text}`` with an increasing n."""
    count = start

    def _wrap(text: str) -> str:
        nonlocal count
        wrapped = f"${{{count}:{text}}}"
        count += 1
        return wrapped

    return _wrap


class BlockRenderer:
    """Turns a description into the docblock string for one language."""

    def __init__(self, settings: Optional[LanguageSettings] = None) -> None:
        self.settings = settings or LanguageSettings()
        self._env = Environment(loader=DictLoader(_TAG_TEMPLATES), autoescape=False)

    def render(
        self, description: SemanticDescription, options: Optional[RenderOptions] = None
    ) -> str:
        """Render ``description``; placeholders are numbered from 1 in line order."""
        options = options or RenderOptions()
        placeholder = placeholder_counter()

        lines: List[str] = [placeholder(f"[{escape(description.name)} description]")]
        lines.extend(self.render_param_tags(description, options, placeholder))
        lines.extend(self.render_return_tag(description, options, placeholder))
        lines.extend(self.render_var_tag(description, options, placeholder))
        return self.assemble(lines)

    def render_param_tags(
        self,
        description: SemanticDescription,
        options: RenderOptions,
        placeholder: Placeholder,
    ) -> List[str]:
        params = description.params
        if not params or description.is_variable:
            return []

        spacing = max(options.column_spacing, 0)
        name_width = _max_width(param.name for param in params)
        shown_types = [param.type or TYPE_PLACEHOLDER for param in params]
        type_width = _max_width(shown_types)

        lines = [""]
        for param, shown in zip(params, shown_types):
            type_field = placeholder(escape(param.type) if param.type else TYPE_PLACEHOLDER)
            name = escape(param.name)
            lines.append(
                self._tag(
                    "param",
                    columns=options.columns,
                    spacer=PARAM_TYPE_SPACER,
                    type=type_field,
                    type_space=" " * (spacing + type_width - len(shown)),
                    name=name,
                    name_space=" " * (spacing + name_width - len(param.name)),
                    desc=placeholder(f"[{name} description]"),
                )
            )
        return lines

    def render_return_tag(
        self,
        description: SemanticDescription,
        options: RenderOptions,
        placeholder: Placeholder,
    ) -> List[str]:
        if not (
            description.returns.present
            and options.default_return_tag
            and not description.is_variable
        ):
            return []

        return_type = escape(description.returns.type) if description.returns.type else TYPE_PLACEHOLDER
        type_field = placeholder(return_type)
        name_width = _max_width(param.name for param in description.params)
        padding = max(options.column_spacing, 0) + RETURN_NAME_PADDING - 1
        spacing = " " * (padding + name_width)
        return [
            "",
            self._tag(
                "return",
                columns=options.columns,
                type=type_field,
                spacing=spacing,
                desc=placeholder("[return description]"),
            ),
        ]

    def render_var_tag(
        self,
        description: SemanticDescription,
        options: RenderOptions,
        placeholder: Placeholder,
    ) -> List[str]:
        if not description.is_variable:
            return []
        var_type = escape(description.var_type) if description.var_type else TYPE_PLACEHOLDER
        return ["", self._tag("var", columns=options.columns, type=placeholder(var_type))]

    def assemble(self, lines: Iterable[str]) -> str:
        """Wrap comment lines in the language delimiters, trimming trailing whitespace."""
        settings = self.settings
        rows = [settings.comment_open]
        rows.extend(settings.separator + line for line in lines)
        rows.append(settings.comment_close)
        return settings.eos.join(row.rstrip() for row in rows)

    def _tag(self, template: str, **context: str) -> str:
        return self._env.get_template(template).render(**context)


def _max_width(values: Iterable[str]) -> int:
    return max((len(value) for value in values), default=0)


__all__ = [
    "BlockRenderer",
    "DEFAULT_COLUMN_SPACING",
    "PARAM_TYPE_SPACER",
    "RETURN_NAME_PADDING",
    "RenderOptions",
    "TYPE_PLACEHOLDER",
    "escape",
    "placeholder_counter",
]
