from __future__ import annotations

import re

_IDENTIFIER_RE = re.compile(r'[a-zA-Z_$][a-zA-Z0-9_$]*')
_NON_IDENTIFIER_CHAR_RE = re.compile(r'[^a-zA-Z0-9_$]')

FALLBACK_ENTITY_NAME = 'AnyData'


def capitalize(hint: str) -> str:
    """Upper-case the first character of a name hint, leaving the rest alone.

    Unlike `str.capitalize` the tail is not lower-cased, so `userId` becomes
    `UserId`. An empty hint yields `AnyData`.
    """
    if not hint:
        return FALLBACK_ENTITY_NAME
    return hint[0].upper() + hint[1:]


def is_identifier(key: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(key) is not None


def quote_key(key: str, quote: str) -> str:
    """Return `key` unchanged if it is a bare identifier, else wrapped in `quote`."""
    if is_identifier(key):
        return key
    return f"{quote}{key}{quote}"


def sanitize_java_field(key: str) -> str:
    safe = _NON_IDENTIFIER_CHAR_RE.sub('_', key)
    if safe[:1].isdigit():
        safe = 'n_' + safe
    return safe
