"""Preference helpers for custom export formats.

String lists are flattened into a single preference value: items are joined
with ``;`` and any ``;`` or ``\\`` inside an item is escaped with a leading
backslash.  The export-related preference groups (save options and layout
formatter options) are read from a :class:`PreferenceStore` here so the
registry only ever sees ready-made dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from . import constants

if TYPE_CHECKING:
    from .journals import JournalAbbreviationLoader
    from .persistence.preference_store import PreferenceStore

_SEPARATOR = ";"
_ESCAPE = "\\"


def convert_list_to_string(values: list[str]) -> str:
    """Encode *values* as one ``;``-separated, backslash-escaped string."""
    escaped = (
        value.replace(_ESCAPE, _ESCAPE * 2).replace(_SEPARATOR, _ESCAPE + _SEPARATOR)
        for value in values
    )
    return _SEPARATOR.join(escaped)


def convert_string_to_list(text: str | None) -> list[str]:
    """Decode a string produced by :func:`convert_list_to_string`.

    Empty or missing input yields an empty list.  An escaped character is
    taken literally and a lone trailing backslash is kept as is.  Text after
    the last separator is always an item, even when it is empty.
    """
    if not text:
        return []
    items: list[str] = []
    current: list[str] = []
    escape = False
    for ch in text:
        if escape:
            current.append(ch)
            escape = False
        elif ch == _ESCAPE:
            escape = True
        elif ch == _SEPARATOR:
            items.append("".join(current))
            current = []
        else:
            current.append(ch)
    if escape:
        current.append(_ESCAPE)
    items.append("".join(current))
    return items


# ---------------------------------------------------------------------------
# Preference groups
# ---------------------------------------------------------------------------


@dataclass
class SavePreferences:
    """Options that control how entries are written during an export."""

    encoding: str = constants.DEFAULT_ENCODING_VALUE
    save_in_original_order: bool = False
    save_order: list[tuple[str, bool]] = field(default_factory=list)  # (field, descending)
    make_backup: bool = False
    reformat_file: bool = False


@dataclass
class LayoutFormatterPreferences:
    """Inputs handed through to the layout engine when a format runs."""

    name_formatter_names: list[str] = field(default_factory=list)
    name_formatter_formats: list[str] = field(default_factory=list)
    main_file_directory: Path | None = None
    journal_abbreviation_loader: JournalAbbreviationLoader | None = None

    @property
    def name_formatters(self) -> dict[str, str]:
        """Pair up formatter names with their format strings."""
        return dict(zip(self.name_formatter_names, self.name_formatter_formats))


def load_save_preferences(store: PreferenceStore) -> SavePreferences:
    """Build export :class:`SavePreferences` from *store*."""
    save_order: list[tuple[str, bool]] = []
    for field_key, descending_key in (
        (constants.EXPORT_PRIMARY_SORT_FIELD, constants.EXPORT_PRIMARY_SORT_DESCENDING),
        (constants.EXPORT_SECONDARY_SORT_FIELD, constants.EXPORT_SECONDARY_SORT_DESCENDING),
        (constants.EXPORT_TERTIARY_SORT_FIELD, constants.EXPORT_TERTIARY_SORT_DESCENDING),
    ):
        sort_field = store.get(field_key)
        if sort_field:
            save_order.append((sort_field, store.get_bool(descending_key)))

    return SavePreferences(
        encoding=store.get(constants.DEFAULT_ENCODING) or constants.DEFAULT_ENCODING_VALUE,
        save_in_original_order=store.get_bool(constants.EXPORT_IN_ORIGINAL_ORDER),
        save_order=save_order,
        make_backup=False,  # exports never back up the target file
        reformat_file=False,
    )


def load_layout_preferences(
    store: PreferenceStore,
    loader: JournalAbbreviationLoader | None,
) -> LayoutFormatterPreferences:
    """Build :class:`LayoutFormatterPreferences` from *store* and *loader*."""
    directory = store.get(constants.MAIN_FILE_DIRECTORY)
    return LayoutFormatterPreferences(
        name_formatter_names=store.get_string_list(constants.NAME_FORMATTER_KEY),
        name_formatter_formats=store.get_string_list(constants.NAME_FORMATTER_VALUE),
        main_file_directory=Path(directory).expanduser() if directory else None,
        journal_abbreviation_loader=loader,
    )
