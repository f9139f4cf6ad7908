from __future__ import annotations

import json

import pytest

from ai_executor.utils.templating import stringify, substitute


@pytest.mark.parametrize("value", [None, 42, 3.5, ["{{input}}"], {"a": "{{input}}"}, True])
def test_substitute_passes_non_strings_through(value) -> None:
    assert substitute(value, {"a": 1}) is value


def test_whole_input_object_is_compact_json() -> None:
    data = {"name": "Ada", "tags": ["x", "y"], "ok": True}
    out = substitute("{{input}}", data)
    assert out == '{"name":"Ada","tags":["x","y"],"ok":true}'
    assert json.loads(out) == data


def test_whole_input_scalars_use_plain_string_form() -> None:
    assert substitute("{{input}}", "hello") == "hello"
    assert substitute("{{input}}", 5) == "5"
    assert substitute("{{input}}", 2.0) == "2"
    assert substitute("{{input}}", False) == "false"
    assert substitute("{{input}}", None) == "null"
    assert substitute("{{input}}", [1, 2]) == "[1,2]"


def test_every_whole_input_occurrence_is_replaced() -> None:
    assert substitute("{{input}} and {{input}}", "x") == "x and x"


def test_nested_field_lookup() -> None:
    assert substitute("{{input.a.b}}", {"a": {"b": 5}}) == "5"


def test_structured_field_value_is_json() -> None:
    data = {"user": {"profile": {"city": "Oslo", "zip": "0150"}}}
    assert substitute("{{input.user.profile}}", data) == '{"city":"Oslo","zip":"0150"}'


def test_unresolved_path_is_left_verbatim() -> None:
    assert substitute("{{input.a.c}}", {"a": 1}) == "{{input.a.c}}"
    assert substitute("{{input.missing}}", {"a": 1}) == "{{input.missing}}"
    assert substitute("{{input.a}}", "not an object") == "{{input.a}}"


def test_unresolved_placeholder_does_not_block_others() -> None:
    data = {"first": "Ada", "last": "Lovelace"}
    out = substitute("{{input.first}} {{input.middle}} {{input.last}}", data)
    assert out == "Ada {{input.middle}} Lovelace"


def test_list_elements_can_be_addressed_by_index() -> None:
    data = {"items": [{"sku": "A1"}, {"sku": "B2"}]}
    assert substitute("{{input.items.1.sku}}", data) == "B2"
    assert substitute("{{input.items.5.sku}}", data) == "{{input.items.5.sku}}"


def test_null_field_renders_as_null() -> None:
    assert substitute("v={{input.a}}", {"a": None}) == "v=null"


def test_whole_input_pass_runs_before_field_pass() -> None:
    data = {"name": "Ada"}
    out = substitute("{{input}} / {{input.name}}", data)
    assert out == '{"name":"Ada"} / Ada'


def test_substitution_is_idempotent_once_resolved() -> None:
    data = {"topic": "tides", "n": 3}
    once = substitute("Write {{input.n}} facts about {{input.topic}}.", data)
    assert once == "Write 3 facts about tides."
    assert substitute(once, data) == once


def test_integral_floats_render_without_fraction_at_any_depth() -> None:
    assert substitute("{{input}}", {"b": 2.0}) == '{"b":2}'
    data = {"a": {"b": 2.0, "c": [1.0, 1.5]}}
    assert substitute("{{input.a}}", data) == '{"b":2,"c":[1,1.5]}'
    assert substitute("{{input.a.b}}", data) == "2"


def test_non_ascii_is_preserved() -> None:
    assert stringify({"city": "Zürich"}) == '{"city":"Zürich"}'
