from __future__ import annotations

from typing import Union

ROOT_PATH = '(root)'


def escape_path_segment(segment: Union[str, int]) -> str:
    """Escape a single key segment for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Backslashes are escaped as '\\\\' so the path stays unambiguous.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def child_path(parent: str, segment: Union[str, int]) -> str:
    escaped = escape_path_segment(segment)
    if parent in ('', ROOT_PATH):
        return escaped
    return f"{parent}.{escaped}"
