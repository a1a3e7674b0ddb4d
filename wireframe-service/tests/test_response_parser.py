import json

import pytest

from app.services.generation.response_parser import (
    UnparsableJsonError,
    extract_json,
    extract_json_array,
    loads_with_repair,
    parse_model_json,
    repair_json,
)


def test_extract_strips_fence_and_prose():
    reply = 'Sure! ```json\n{"app": {"name": "Demo"}}\n```'
    assert extract_json(reply) == '{"app": {"name": "Demo"}}'


@pytest.mark.parametrize("payload", [
    '{"a": 1}',
    '{"screens": [{"name": "home", "components": []}]}',
    '[1, 2, 3]',
    '{"text": "braces } and ] inside"}',
    '{"a": "```"}',
    '{\n  "code": "```json x ```",\n  "b": 1\n}',
])
def test_extract_returns_fenced_payload_verbatim(payload):
    assert extract_json(f"```json\n{payload}\n```") == payload


def test_extract_falls_back_to_outer_braces():
    reply = 'Here is the wireframe: {"a": {"b": 2}} Let me know if you need changes.'
    assert extract_json(reply) == '{"a": {"b": 2}}'


def test_extract_returns_trimmed_text_without_json():
    assert extract_json("  I cannot help with that.  ") == "I cannot help with that."
    assert extract_json("") == ""
    assert extract_json(None) == ""


def test_extract_array_variant():
    reply = 'Workflow:\n[{"id": "home"}, {"id": "login"}]\nThat is all.'
    assert extract_json_array(reply) == '[{"id": "home"}, {"id": "login"}]'


def test_repair_trailing_commas_and_single_quotes():
    assert repair_json("{'a': 'b',}") == '{"a": "b"}'


def test_repair_quotes_bare_keys():
    repaired = repair_json("{name: 'Bob', tags: ['x',], nav-type: 'tabs',}")
    assert json.loads(repaired) == {"name": "Bob", "tags": ["x"], "nav-type": "tabs"}


def test_repair_escapes_double_quotes_inside_single_quoted_strings():
    repaired = repair_json(r"""{'quote': 'say "hi"', 'owner': 'it\'s mine'}""")
    assert json.loads(repaired) == {"quote": 'say "hi"', "owner": "it's mine"}


def test_repair_leaves_string_contents_alone():
    repaired = repair_json('{"text": "keep, } this", "title": "Bob\'s app", extra: 1,}')
    assert json.loads(repaired) == {"text": "keep, } this", "title": "Bob's app", "extra": 1}


def test_repair_collapses_newlines():
    repaired = repair_json("{\n  a: 1,\n  b: [\n    2,\n  ],\n}")
    assert "\n" not in repaired
    assert json.loads(repaired) == {"a": 1, "b": [2]}


@pytest.mark.parametrize("text", [
    "{'a': 'b',}",
    "{name: 'Bob', tags: ['x',],}",
    "{\n  screens: [\n    {name: 'home', components: [],},\n  ],\n}",
    "{'unterminated: 1, k: 2}",
    '{"ok": true}',
    "{'a': 'x', b: \"it's\", c: [1, 2,],}",
    "{items: ['a', 'b',,], name: 'x'}",
    "[1,\n,]",
])
def test_repair_is_idempotent(text):
    once = repair_json(text)
    assert repair_json(once) == once


def test_loads_with_repair_reports_whether_repair_was_needed():
    assert loads_with_repair('{"a": 1}') == ({"a": 1}, False)
    assert loads_with_repair("{a: 1,}") == ({"a": 1}, True)


def test_loads_with_repair_raises_on_prose():
    with pytest.raises(UnparsableJsonError) as exc_info:
        loads_with_repair("this is not json at all")
    assert exc_info.value.snippet == "this is not json at all"


def test_parse_model_json_checks_top_level_shape():
    value, repaired = parse_model_json('Result: [{"id": "home"},]', expect=list)
    assert value == [{"id": "home"}]
    assert repaired is True

    with pytest.raises(UnparsableJsonError):
        parse_model_json('{"id": "home"}', expect=list)


def test_parse_model_json_rejects_empty_reply():
    with pytest.raises(UnparsableJsonError):
        parse_model_json("   ")


def test_repair_removes_runs_of_trailing_commas():
    assert json.loads(repair_json("{items: ['a', 'b',,], name: 'x'}")) == {"items": ["a", "b"], "name": "x"}
    assert loads_with_repair("[1,\n,]") == ([1], True)


def test_extract_inline_fence_without_newlines():
    assert extract_json('```json {"a": 1} ``` and more') == '{"a": 1}'
