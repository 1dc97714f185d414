"""Persistence layer – the preference store and its YAML file I/O."""

from .preference_store import (
    CustomExportsError,
    PreferenceFormatError,
    PreferenceStore,
)

__all__ = [
    "CustomExportsError",
    "PreferenceFormatError",
    "PreferenceStore",
]
