"""Preference keys and other fixed values."""

from __future__ import annotations

import os
from pathlib import Path

# Indexed entries are stored as CUSTOM_EXPORT_FORMAT + "0", "1", ...
CUSTOM_EXPORT_FORMAT = "customExportFormat"

LAYOUT_SUFFIX = ".layout"

# Minimum descriptor length: [display name, layout file, extension]
DESCRIPTOR_FIELDS = 3

BUILTIN_LAYOUT_DIRECTORY = "layout"

PREFS_ENV_VAR = "CUSTOM_EXPORTS_PREFS"
DEFAULT_PREFS_PATH = Path.home() / ".custom-exports" / "preferences.yaml"


def prefs_path() -> Path:
    """Return the preference file path, honouring ``$CUSTOM_EXPORTS_PREFS``."""
    override = os.environ.get(PREFS_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_PREFS_PATH


# -- save/layout preference keys ---------------------------------------------

DEFAULT_ENCODING = "defaultEncoding"
EXPORT_IN_ORIGINAL_ORDER = "exportInOriginalOrder"
EXPORT_PRIMARY_SORT_FIELD = "exportPriSort"
EXPORT_PRIMARY_SORT_DESCENDING = "exportPriDescending"
EXPORT_SECONDARY_SORT_FIELD = "exportSecSort"
EXPORT_SECONDARY_SORT_DESCENDING = "exportSecDescending"
EXPORT_TERTIARY_SORT_FIELD = "exportTerSort"
EXPORT_TERTIARY_SORT_DESCENDING = "exportTerDescending"
NAME_FORMATTER_KEY = "nameFormatterNames"
NAME_FORMATTER_VALUE = "nameFormatterFormats"
MAIN_FILE_DIRECTORY = "fileDirectory"

DEFAULT_ENCODING_VALUE = "UTF-8"
