"""Core logic for the JSON Type Generator.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse, format and minify JSON text
- render a collapsible tree of a parsed value
- infer named record types from a parsed value
- render those types as TypeScript, Kotlin or Java declarations
"""
from .models import Entity, EntityRef, ArrayOf, Primitive
from .inference import infer, prepare_root
from .renderers import Language, UnsupportedLanguageError, generate_code, render

__all__ = [
    'ArrayOf',
    'Entity',
    'EntityRef',
    'Language',
    'Primitive',
    'UnsupportedLanguageError',
    'generate_code',
    'infer',
    'prepare_root',
    'render',
]
