"""Tests for the JavaScript interpreter."""

from __future__ import annotations

import pytest

from docblockr.languages.javascript import (
    JavaScriptInterpreter,
    normalize_declaration,
    strip_leading_assignment,
)
from docblockr.models import EntityKind, SemanticDescription

IDENTIFIER = r"[a-zA-Z_$0-9]"


def _param_names(description: SemanticDescription) -> list[str]:
    return [param.name for param in description.params]


def test_function_declaration(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("function add(a, b) {")

    assert description.kind == EntityKind.FUNCTION
    assert description.name == "add"
    assert _param_names(description) == ["a", "b"]
    assert all(param.type is None for param in description.params)
    assert description.returns.present is True


def test_class_declaration_has_no_return(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("class Foo {")

    assert description.kind == EntityKind.CLASS
    assert description.name == "Foo"
    assert description.returns.present is False
    assert description.params == []


def test_class_name_is_not_replaced_by_heritage(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("export default class Widget extends Base {")

    assert description.kind == EntityKind.CLASS
    assert description.name == "Widget"


def test_prototype_method(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("Foo.prototype.bar = function(x) {")

    assert description.kind == EntityKind.FUNCTION
    assert description.name == "bar"
    assert _param_names(description) == ["x"]


def test_variable_assignment(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("const x = 5;")

    assert description.kind == EntityKind.VARIABLE
    assert description.name == "x"
    assert description.params == []
    assert description.var_type is None


def test_variable_declaration_without_value(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("let counter;")

    assert description.kind == EntityKind.VARIABLE
    assert description.name == "counter"


def test_function_expression_assigned_to_variable(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("const add = function(a, b) {")

    assert description.kind == EntityKind.FUNCTION
    assert description.name == "add"
    assert _param_names(description) == ["a", "b"]


def test_arrow_function_assigned_to_variable(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("const double = (n) => n * 2;")

    assert description.kind == EntityKind.FUNCTION
    assert description.name == "double"
    assert _param_names(description) == ["n"]


def test_async_function(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("async function fetchAll(url, retries = 3) {")

    assert description.kind == EntityKind.FUNCTION
    assert description.name == "fetchAll"
    assert [(p.name, p.value) for p in description.params] == [("url", ""), ("retries", "3")]


@pytest.mark.parametrize(
    "line,name",
    [
        ("static create(options) {", "create"),
        ("get size() {", "size"),
        ("static async load(path) {", "load"),
    ],
)
def test_modifier_prefixed_members(javascript: JavaScriptInterpreter, line: str, name: str) -> None:
    description = javascript.interpret(line)

    assert description.name == name
    assert description.kind != EntityKind.VARIABLE


def test_modifier_member_parameters(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("static create(options, flag) {")

    assert _param_names(description) == ["options", "flag"]


@pytest.mark.parametrize(
    "line,name",
    [
        ("function (a, b) {", ""),
        ("function(a, b) {", ""),
        ("function* walk(a, b) {", "walk"),
        ("function add (a, b) {", "add"),
    ],
)
def test_parameters_after_anonymous_or_generator_keyword(
    javascript: JavaScriptInterpreter, line: str, name: str
) -> None:
    description = javascript.interpret(line)

    assert description.kind == EntityKind.FUNCTION
    assert description.name == name
    assert _param_names(description) == ["a", "b"]


def test_parenthesised_text_after_other_words_is_not_a_parameter_list(
    javascript: JavaScriptInterpreter,
) -> None:
    assert javascript.interpret("if (ready) {").params == []


@pytest.mark.parametrize("line", ["static", "static get", "static static static static static"])
def test_modifiers_all_the_way_down_yield_empty_name(
    javascript: JavaScriptInterpreter, line: str
) -> None:
    description = javascript.interpret(line)

    assert description.name == ""


@pytest.mark.parametrize("line", ["", "}", "// just a comment", "if (ready) {", "@@@"])
def test_unrecognized_input_never_raises(javascript: JavaScriptInterpreter, line: str) -> None:
    description = javascript.interpret(line)

    assert description.name == ""
    assert description.kind == EntityKind.UNKNOWN


def test_continues_from_partial_description(javascript: JavaScriptInterpreter) -> None:
    partial = SemanticDescription(kind=EntityKind.FUNCTION)

    description = javascript.interpret("add(a) {", "function", partial)

    assert description is partial
    assert description.name == "add"
    assert _param_names(description) == ["a"]


def test_dollar_names_survive(javascript: JavaScriptInterpreter) -> None:
    description = javascript.interpret("var $el = $('#app');")

    assert description.kind == EntityKind.VARIABLE
    assert description.name == "$el"


def test_strip_leading_assignment() -> None:
    assert strip_leading_assignment("= function(x) {") == "function(x) {"
    assert strip_leading_assignment("function(x) {") == "function(x) {"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("add = function(a, b) {", "function add(a, b) {"),
        ("add = function (a) {", "function add(a) {"),
        ("add = async function(a) {", "function add(a) {"),
        ("add = function inner(a) {", "function add(a) {"),
        ("add = (a, b) => {", "function add(a, b) {"),
        ("inc = x => x + 1;", "function inc(x) {"),
        ("x = 5;", "x=5"),
    ],
)
def test_normalize_declaration(text: str, expected: str) -> None:
    assert normalize_declaration(text, IDENTIFIER, "function") == expected
