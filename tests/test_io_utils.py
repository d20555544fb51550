from __future__ import annotations

import io

import pytest

from json_type_generator.io_utils import (
    DEMO_DATA,
    MAX_NESTING_DEPTH,
    JsonInputError,
    demo_json_text,
    format_json,
    minify_json,
    nesting_depth,
    parse_json_text,
    read_json_text,
)


def test_parse_keeps_big_integers_exact() -> None:
    data = parse_json_text('{"id": 12345678901234567890123}')
    assert data["id"] == 12345678901234567890123
    assert isinstance(data["id"], int)


def test_parse_blank_text_is_none() -> None:
    assert parse_json_text("") is None
    assert parse_json_text("   \n") is None


def test_parse_error_carries_position() -> None:
    with pytest.raises(JsonInputError) as excinfo:
        parse_json_text('{"a": 1,\n "b": }')
    assert excinfo.value.lineno == 2
    assert "line 2" in str(excinfo.value)


def test_format_and_minify() -> None:
    value = {"b": [1, 2], "a": "é"}
    assert format_json(value) == '{\n  "b": [\n    1,\n    2\n  ],\n  "a": "é"\n}'
    assert minify_json(value) == '{"b":[1,2],"a":"é"}'


def test_demo_text_parses_back_to_demo_data() -> None:
    assert parse_json_text(demo_json_text()) == DEMO_DATA


def test_read_json_text_from_file_like() -> None:
    assert read_json_text(io.BytesIO(b'{"a": 1}')) == '{"a": 1}'
    assert read_json_text(io.StringIO('[1]')) == '[1]'


def test_read_json_text_from_path(tmp_path) -> None:
    path = tmp_path / "input.json"
    path.write_text('{"x": true}', encoding="utf-8")
    assert read_json_text(str(path)) == '{"x": true}'


def test_read_json_text_requires_file() -> None:
    with pytest.raises(ValueError):
        read_json_text(None)


def test_integers_beyond_default_digit_limit_survive() -> None:
    digits = "9" * 5000
    data = parse_json_text('{"id": ' + digits + '}')
    assert data["id"] == int(digits)
    assert format_json(data) == '{\n  "id": ' + digits + '\n}'
    assert minify_json(data) == '{"id":' + digits + '}'


def test_deeply_nested_input_is_a_parse_error() -> None:
    with pytest.raises(JsonInputError, match="Nesting too deep"):
        parse_json_text("[" * 5000 + "]" * 5000)


def test_nesting_beyond_limit_is_rejected() -> None:
    depth = MAX_NESTING_DEPTH + 1
    with pytest.raises(JsonInputError, match="Nesting too deep"):
        parse_json_text("[" * depth + "]" * depth)
    nested = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
    assert nesting_depth(parse_json_text(nested)) == MAX_NESTING_DEPTH


def test_nesting_depth() -> None:
    assert nesting_depth(1) == 0
    assert nesting_depth([]) == 1
    assert nesting_depth({"a": [{"b": None}], "c": 1}) == 3
