from __future__ import annotations

import logging
from typing import Any

from .io_utils import (
    DEMO_DATA,
    JsonInputError,
    demo_json_text,
    format_json,
    minify_json,
    parse_json_text,
    read_json_text,
)
from .renderers import Language, UnsupportedLanguageError, generate_code
from .tree_view import build_tree_html

logger = logging.getLogger(__name__)


def handle_input_change(text: str, expanded: bool = True):
    """Re-parse the editor text; returns (parsed, status, tree_html)."""
    if text is None or not text.strip():
        return None, "", build_tree_html(None)

    try:
        data = parse_json_text(text)
    except JsonInputError as e:
        logger.info("Rejected JSON input: %s", e)
        return None, f"Error parsing JSON: {e}", build_tree_html(None)

    return data, "Valid JSON.", build_tree_html(data, expanded)


def handle_file_upload(file_obj, expanded: bool = True):
    """Load an uploaded file into the editor; returns (text, parsed, status, tree_html)."""
    if file_obj is None:
        return "", None, "No file uploaded.", build_tree_html(None)

    try:
        text = read_json_text(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        logger.info("Could not read upload: %s", e)
        return "", None, f"Error reading file: {e}", build_tree_html(None)

    data, status, tree = handle_input_change(text, expanded)
    return text, data, status, tree


def _reformat(text: str, expanded: bool, dump, failure_message: str):
    try:
        data = parse_json_text(text)
    except JsonInputError:
        return text, None, failure_message, build_tree_html(None)
    if data is None:
        return text, None, failure_message, build_tree_html(None)
    return dump(data), data, "Valid JSON.", build_tree_html(data, expanded)


def format_handler(text: str, expanded: bool = True, indent: int = 2):
    return _reformat(text, expanded, lambda d: format_json(d, indent=indent), "Cannot format invalid JSON")


def minify_handler(text: str, expanded: bool = True):
    return _reformat(text, expanded, minify_json, "Cannot minify invalid JSON")


def load_demo_handler(expanded: bool = True, indent: int = 2):
    return demo_json_text(indent=indent), DEMO_DATA, "Demo data loaded.", build_tree_html(DEMO_DATA, expanded)


def expand_all_handler(data: Any):
    return build_tree_html(data, True), True


def collapse_all_handler(data: Any):
    return build_tree_html(data, False), False


def generate_code_handler(data: Any, language: str, root_name: str = ""):
    """Generate declarations for the parsed value; returns (code, status)."""
    try:
        lang = Language.parse(language)
    except UnsupportedLanguageError as e:
        return "", str(e)

    name = (root_name or "").strip() or lang.default_root_name
    code = generate_code(data, name, lang)
    logger.debug("Generated %s code for root %r (%d chars)", lang.display_name, name, len(code))
    return code, f"{lang.display_name} code generated. Use the copy button to copy it to the clipboard."
