from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Optional

MAX_NESTING_DEPTH = 500

DEMO_DATA = {
    "project": "JSON Type Generator",
    "version": 1.0,
    "isAwesome": True,
    "features": ["Collapsible tree", "Big integer safe parsing", "Type generation"],
    "creator": {
        "name": "Yoi",
        "mood": "Happy",
    },
    "nullValue": None,
    "magicNumber": 42,
}


class JsonInputError(ValueError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


@contextmanager
def unbounded_int_digits() -> Iterator[None]:
    """Lift the interpreter's int/str conversion digit limit for the block.

    Python 3.11+ refuses to convert integers longer than 4300 digits; JSON
    input may carry longer ones and they must survive exactly.
    """
    if not hasattr(sys, 'set_int_max_str_digits'):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def nesting_depth(value: Any) -> int:
    """Depth of nested lists/dicts; scalars are depth 0."""
    deepest = 0
    stack = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            deepest = max(deepest, depth)
            continue
        deepest = max(deepest, depth + 1)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def parse_json_text(text: str) -> Any:
    """Parse JSON text into a value tree.

    Integers of any size come back as exact Python ints. Blank text parses
    to `None`. Values nested deeper than `MAX_NESTING_DEPTH` are rejected so
    the recursive tree and type walks stay within the interpreter's limit.
    """
    if text is None or not text.strip():
        return None
    try:
        with unbounded_int_digits():
            data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonInputError(
            f"{exc.msg} (line {exc.lineno}, column {exc.colno})",
            lineno=exc.lineno,
            colno=exc.colno,
        ) from exc
    except RecursionError as exc:
        raise JsonInputError("Nesting too deep") from exc
    except ValueError as exc:
        raise JsonInputError(str(exc)) from exc

    if nesting_depth(data) > MAX_NESTING_DEPTH:
        raise JsonInputError(f"Nesting too deep (more than {MAX_NESTING_DEPTH} levels)")
    return data


def format_json(value: Any, indent: int = 2) -> str:
    with unbounded_int_digits():
        return json.dumps(value, indent=indent, ensure_ascii=False)


def minify_json(value: Any) -> str:
    with unbounded_int_digits():
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)



def demo_json_text(indent: int = 2) -> str:
    return format_json(DEMO_DATA, indent=indent)


def read_json_text(file_obj) -> str:
    """Read raw text from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
