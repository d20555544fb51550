from __future__ import annotations

import html
import json
from typing import Any, List, Optional

from .io_utils import unbounded_int_digits
from .paths import ROOT_PATH, child_path

PLACEHOLDER_TEXT = "Your JSON structure will be displayed here..."

TREE_CSS = """
<style>
.json-tree { font-family: ui-monospace, monospace; font-size: 0.9rem; }
.json-tree details > .node-children { padding-left: 1.5rem; }
.json-tree .node-key { color: #8250df; }
.json-tree .val-string { color: #0a7d32; }
.json-tree .val-number { color: #0550ae; }
.json-tree .val-boolean { color: #cf222e; }
.json-tree .val-null { color: #6e7781; font-style: italic; }
.json-tree .val-complex { color: #6e7781; }
</style>
"""


def value_label(value: Any) -> str:
    """Collapsed one-line label for a node, as HTML."""
    if value is None:
        return '<span class="val-null">null</span>'
    if isinstance(value, bool):
        return f'<span class="val-boolean">{"true" if value else "false"}</span>'
    if isinstance(value, str):
        return f'<span class="val-string">"{html.escape(value)}"</span>'
    if isinstance(value, (int, float)):
        with unbounded_int_digits():
            text = json.dumps(value)
        return f'<span class="val-number">{html.escape(text)}</span>'
    if isinstance(value, list):
        if not value:
            return '<span>[]</span>'
        return f'<span class="val-complex">Array({len(value)})</span>'
    if isinstance(value, dict):
        if not value:
            return '<span>{}</span>'
        return '<span class="val-complex">{...}</span>'
    return f'<span>{html.escape(str(value))}</span>'


def _key_html(key: Optional[str]) -> str:
    if key is None:
        return ''
    return f'<span class="node-key">{html.escape(key)}</span><span class="key-colon">: </span>'


def _render_node(value: Any, key: Optional[str], path: str, expanded: bool, out: List[str]) -> None:
    data_path = html.escape(path, quote=True)
    is_complex = isinstance(value, (dict, list)) and len(value) > 0

    if not is_complex:
        out.append(f'<div class="node-line" data-path="{data_path}">{_key_html(key)}{value_label(value)}</div>')
        return

    if isinstance(value, dict):
        children = list(value.items())
        open_char, close_char = '{', '}'
    else:
        children = [(str(i), item) for i, item in enumerate(value)]
        open_char, close_char = '[', ']'

    open_attr = ' open' if expanded else ''
    out.append(f'<details class="node-wrapper" data-path="{data_path}"{open_attr}>')
    out.append(f'<summary>{_key_html(key)}{value_label(value)} <span class="node-open">{open_char}</span></summary>')
    out.append('<div class="node-children">')
    for child_key, child in children:
        _render_node(child, child_key, child_path(path, child_key), expanded, out)
    out.append('</div>')
    out.append(f'<div class="node-close">{close_char}</div>')
    out.append('</details>')


def build_tree_html(data: Any, expanded: bool = True) -> str:
    """Render a parsed JSON value as a nested <details> tree.

    `expanded` sets the initial open state of every container node, which is
    how expand-all / collapse-all are implemented.
    """
    if data is None:
        return f'<div class="empty-tree"><div class="placeholder-text">{PLACEHOLDER_TEXT}</div></div>'

    out: List[str] = [TREE_CSS, '<div class="json-tree">']
    _render_node(data, None, ROOT_PATH, expanded, out)
    out.append('</div>')
    return '\n'.join(out)
