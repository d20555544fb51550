from __future__ import annotations

import io

from json_type_generator.handlers import (
    collapse_all_handler,
    expand_all_handler,
    format_handler,
    generate_code_handler,
    handle_file_upload,
    handle_input_change,
    load_demo_handler,
    minify_handler,
)
from json_type_generator.io_utils import DEMO_DATA
from json_type_generator.tree_view import PLACEHOLDER_TEXT


def test_input_change_valid() -> None:
    data, status, tree = handle_input_change('{"a": [1]}')
    assert data == {"a": [1]}
    assert status == "Valid JSON."
    assert "Array(1)" in tree


def test_input_change_blank_clears_state() -> None:
    data, status, tree = handle_input_change("  ")
    assert data is None
    assert status == ""
    assert PLACEHOLDER_TEXT in tree


def test_input_change_invalid_reports_error() -> None:
    data, status, tree = handle_input_change('{"a": ')
    assert data is None
    assert status.startswith("Error parsing JSON:")
    assert PLACEHOLDER_TEXT in tree


def test_file_upload() -> None:
    text, data, status, _ = handle_file_upload(io.BytesIO(b'{"ok": true}'))
    assert text == '{"ok": true}'
    assert data == {"ok": True}
    assert status == "Valid JSON."


def test_file_upload_missing() -> None:
    text, data, status, _ = handle_file_upload(None)
    assert (text, data, status) == ("", None, "No file uploaded.")


def test_file_upload_unreadable(tmp_path) -> None:
    _, data, status, _ = handle_file_upload(str(tmp_path / "missing.json"))
    assert data is None
    assert status.startswith("Error reading file:")


def test_format_and_minify_handlers() -> None:
    text, data, status, _ = format_handler('{"a":1}')
    assert text == '{\n  "a": 1\n}'
    assert data == {"a": 1}
    text, data, status, _ = minify_handler('{\n  "a": 1\n}')
    assert text == '{"a":1}'


def test_format_invalid_leaves_text() -> None:
    text, data, status, _ = format_handler("{oops")
    assert text == "{oops"
    assert data is None
    assert status == "Cannot format invalid JSON"
    _, _, status, _ = minify_handler("{oops")
    assert status == "Cannot minify invalid JSON"


def test_load_demo() -> None:
    text, data, status, tree = load_demo_handler()
    assert data == DEMO_DATA
    assert '"magicNumber": 42' in text
    assert status == "Demo data loaded."


def test_expand_and_collapse() -> None:
    tree, expanded = expand_all_handler({"a": {"b": 1}})
    assert expanded is True and " open>" in tree
    tree, expanded = collapse_all_handler({"a": {"b": 1}})
    assert expanded is False and " open>" not in tree


def test_generate_uses_language_default_root_name() -> None:
    code, status = generate_code_handler({"a": 1}, "kotlin", "")
    assert code.startswith("data class RootData(")
    assert status.startswith("Kotlin code generated.")

    code, _ = generate_code_handler({"a": 1}, "java", "  ")
    assert "public class RootEntity {" in code

    code, _ = generate_code_handler({"a": 1}, "typescript", None)
    assert code.startswith("export interface RootStructure {")


def test_generate_with_custom_root_name() -> None:
    code, _ = generate_code_handler({"a": 1}, "typescript", " Payload ")
    assert code.startswith("export interface Payload {")


def test_generate_without_data_returns_stub() -> None:
    code, _ = generate_code_handler(None, "typescript")
    assert code == "export type RootStructure = null | undefined;"


def test_generate_unknown_language() -> None:
    code, status = generate_code_handler({"a": 1}, "cobol")
    assert code == ""
    assert "Unsupported language" in status


def test_input_change_with_huge_integer() -> None:
    digits = "9" * 5000
    data, status, tree = handle_input_change('{"id": ' + digits + '}')
    assert data == {"id": int(digits)}
    assert status == "Valid JSON."
    assert digits in tree
    code, _ = generate_code_handler(data, "typescript")
    assert "id: number;" in code


def test_input_change_too_deep_reports_error() -> None:
    data, status, tree = handle_input_change("[" * 5000 + "]" * 5000)
    assert data is None
    assert status.startswith("Error parsing JSON: Nesting too deep")
    assert PLACEHOLDER_TEXT in tree
