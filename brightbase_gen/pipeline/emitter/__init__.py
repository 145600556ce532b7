"""
Binding emitters.

Contains target-language document generators.
"""

from __future__ import annotations

from .base import BindingEmitter, GeneratedDocument, GenerationResult
from .typescript_emitter import TypeScriptEmitter

__all__ = [
    "BindingEmitter",
    "GeneratedDocument",
    "GenerationResult",
    "TypeScriptEmitter",
]
