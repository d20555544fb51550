from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from .renderers import Language

_FALSE_VALUES = {"0", "false", "False", "no", "off"}


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() not in _FALSE_VALUES


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the web app, read from JSON_TYPEGEN_* variables."""

    host: str = field(default_factory=lambda: _env_str("JSON_TYPEGEN_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("JSON_TYPEGEN_PORT", 7860))
    log_level: str = field(default_factory=lambda: _env_str("JSON_TYPEGEN_LOG_LEVEL", "INFO"))
    default_language: Language = field(
        default_factory=lambda: Language.parse(_env_str("JSON_TYPEGEN_DEFAULT_LANGUAGE", "typescript"))
    )
    tree_expanded: bool = field(default_factory=lambda: _env_bool("JSON_TYPEGEN_TREE_EXPANDED", True))
    indent: int = field(default_factory=lambda: _env_int("JSON_TYPEGEN_INDENT", 2))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(dotenv_path=Path(".env"), override=False)
    return Settings()
