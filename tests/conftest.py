"""Shared test fixtures for the custom-exports test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from custom_exports.constants import CUSTOM_EXPORT_FORMAT
from custom_exports.features.custom_export_list import ExportFormatRegistry
from custom_exports.persistence import PreferenceStore
from custom_exports.preferences import LayoutFormatterPreferences, SavePreferences


@pytest.fixture
def prefs_file(tmp_path: Path) -> Path:
    """Path of a preference file that does not exist yet."""
    return tmp_path / "prefs.yaml"


@pytest.fixture
def store(prefs_file: Path) -> PreferenceStore:
    """An empty file-backed preference store."""
    return PreferenceStore(prefs_file)


@pytest.fixture
def layout_prefs() -> LayoutFormatterPreferences:
    return LayoutFormatterPreferences()


@pytest.fixture
def save_prefs() -> SavePreferences:
    return SavePreferences()


@pytest.fixture
def registry() -> ExportFormatRegistry:
    return ExportFormatRegistry()


@pytest.fixture
def seed():
    """Write raw descriptors to consecutive indexed keys of a store."""

    def _seed(store: PreferenceStore, descriptors: list[list[str]], start: int = 0) -> None:
        for i, descriptor in enumerate(descriptors, start):
            store.put_string_list(CUSTOM_EXPORT_FORMAT + str(i), descriptor)

    return _seed


@pytest.fixture
def sample_descriptors() -> list[list[str]]:
    """Three well-formed descriptors, deliberately out of name order."""
    return [
        ["Plain Text", "plaintext.layout", "txt"],
        ["BibTeXML", "bibtexml", "xml"],
        ["My HTML", "/home/user/layouts/myhtml.layout", "html"],
    ]
