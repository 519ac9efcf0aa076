"""Tests for docblock rendering and column alignment."""

from __future__ import annotations

import pytest

from docblockr.models import EntityKind, Parameter, ReturnInfo, SemanticDescription
from docblockr.renderer import BlockRenderer, RenderOptions, escape, placeholder_counter
from docblockr.settings import LanguageSettings
from tests._fixtures.snippets import comment_lines, expand, tabstops

OPTIONS = RenderOptions(column_spacing=2, default_return_tag=True)


def _function(*params: Parameter, return_type: str | None = None) -> SemanticDescription:
    return SemanticDescription(
        name="add",
        kind=EntityKind.FUNCTION,
        params=list(params),
        returns=ReturnInfo(present=True, type=return_type),
    )


def test_function_block_layout() -> None:
    block = BlockRenderer().render(_function(Parameter("a"), Parameter("b")), OPTIONS)

    assert block == "\n".join(
        [
            "/**",
            " * ${1:[add description]}",
            " *",
            " * @param   ${2:[type]}  a  ${3:[a description]}",
            " * @param   ${4:[type]}  b  ${5:[b description]}",
            " *",
            " * @return  ${6:[type]}     ${7:[return description]}",
            " */",
        ]
    )


def test_variable_block_has_only_var_tag() -> None:
    description = SemanticDescription(name="x", kind=EntityKind.VARIABLE)

    block = BlockRenderer().render(description, OPTIONS)

    assert block == "/**\n * ${1:[x description]}\n *\n * @var  ${2:[type]}\n */"


def test_variable_block_uses_declared_type_and_ignores_params() -> None:
    description = SemanticDescription(
        name="total", kind=EntityKind.VARIABLE, var_type="number", params=[Parameter("a")]
    )

    block = BlockRenderer().render(description, OPTIONS)

    assert "@param" not in block
    assert "@return" not in block
    assert "@var  ${2:number}" in block


def test_class_block_has_no_return_tag() -> None:
    description = SemanticDescription(
        name="Foo", kind=EntityKind.CLASS, returns=ReturnInfo(present=False)
    )

    assert BlockRenderer().render(description, OPTIONS) == "/**\n * ${1:[Foo description]}\n */"


def test_return_tag_requires_configuration_flag() -> None:
    block = BlockRenderer().render(_function(Parameter("a")), RenderOptions(column_spacing=2))

    assert "@return" not in block
    assert "@param" in block


def test_default_options_use_two_column_spacing_without_return() -> None:
    block = BlockRenderer().render(_function(Parameter("a")))

    assert " * @param   ${2:[type]}  a  ${3:[a description]}" in block
    assert "@return" not in block


def test_return_type_is_rendered_when_known() -> None:
    block = BlockRenderer().render(_function(return_type="number"), OPTIONS)

    assert " * @return  ${2:number}    ${3:[return description]}" in block


@pytest.mark.parametrize("names", [("a", "b"), ("first", "cb"), ("options",)])
def test_return_description_lines_up_with_param_descriptions(names: tuple[str, ...]) -> None:
    block = BlockRenderer().render(_function(*(Parameter(name) for name in names)), OPTIONS)
    rows = block.split("\n")
    param_row = next(row for row in rows if "@param" in row)
    return_row = next(row for row in rows if "@return" in row)

    assert param_row.index("${3:") == return_row.index(f"${{{2 * len(names) + 3}:")


def test_parameter_columns_line_up() -> None:
    params = [
        Parameter("first", type="number"),
        Parameter("cb"),
        Parameter("options", type="string[]"),
    ]
    block = BlockRenderer().render(_function(*params), OPTIONS)
    tag_lines = [line for line in comment_lines(expand(block)) if line.startswith("@param")]

    name_column = len("@param") + 2 + 1 + len("string[]") + 2
    description_column = name_column + len("options") + 2
    assert len(tag_lines) == 3
    for line, param in zip(tag_lines, params):
        assert line.index(param.type or "[type]") == len("@param") + 3
        assert line[name_column:].startswith(param.name + " ")
        assert line.index(f"[{param.name} description]") == description_column


def test_placeholders_are_numbered_in_order() -> None:
    params = [Parameter(name) for name in "abcdefghij"]

    block = BlockRenderer().render(_function(*params), OPTIONS)

    numbers = tabstops(block)
    assert numbers == list(range(1, len(numbers) + 1))
    assert len(numbers) == 1 + 2 * len(params) + 2


def test_dollar_signs_are_escaped_once() -> None:
    description = SemanticDescription(
        name="$el", kind=EntityKind.FUNCTION, params=[Parameter("$a", type="$T")]
    )

    block = BlockRenderer().render(description, OPTIONS)

    assert "${1:[\\$el description]}" in block
    assert "${2:\\$T}" in block
    assert " \\$a " in block
    assert "${3:[\\$a description]}" in block
    assert "\\\\$" not in block


def test_escape_is_identity_without_dollar() -> None:
    assert escape("plain text") == "plain text"
    assert escape("a$b$c") == "a\\$b\\$c"


def test_placeholder_counter_increments() -> None:
    placeholder = placeholder_counter()

    assert placeholder("x") == "${1:x}"
    assert placeholder("y") == "${2:y}"


def test_rendering_is_repeatable() -> None:
    renderer = BlockRenderer()
    description = _function(Parameter("a", type="number"), Parameter("bb"))

    assert renderer.render(description, OPTIONS) == renderer.render(description, OPTIONS)


def test_custom_delimiters_and_terminator() -> None:
    settings = LanguageSettings(comment_open="/*!", separator=" ** ", comment_close="**/", eos="\r\n")
    description = SemanticDescription(name="x", kind=EntityKind.VARIABLE)

    block = BlockRenderer(settings).render(description, OPTIONS)

    assert block == "/*!\r\n ** ${1:[x description]}\r\n **\r\n ** @var  ${2:[type]}\r\n**/"


def test_zero_column_spacing_keeps_base_spacer() -> None:
    block = BlockRenderer().render(
        _function(Parameter("a")), RenderOptions(column_spacing=0)
    )

    assert " * @param ${2:[type]}a${3:[a description]}" in block
