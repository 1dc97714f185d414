"""User-defined export formats.

Custom formats are read from the preference store as indexed string lists
(``customExportFormat0``, ``customExportFormat1``, ...) of the form
``[display name, layout file, extension]`` and kept sorted by name.
Formats can be added or removed during a session; :meth:`store` writes the
current list back and removes any leftover entries beyond its end.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..constants import CUSTOM_EXPORT_FORMAT, DESCRIPTOR_FIELDS, LAYOUT_SUFFIX
from ..preferences import (
    LayoutFormatterPreferences,
    SavePreferences,
    load_layout_preferences,
    load_save_preferences,
)
from .export_formats import ExportFormat

if TYPE_CHECKING:
    from ..journals import JournalAbbreviationLoader
    from ..persistence import PreferenceStore

logger = logging.getLogger(__name__)

Descriptor = list[str]


@dataclass(frozen=True)
class ValidDescriptor:
    """A descriptor that produced a format."""

    descriptor: Descriptor
    format: ExportFormat


@dataclass(frozen=True)
class Malformed:
    """A descriptor that could not be turned into a format."""

    descriptor: Descriptor
    reason: str


BuildResult = ValidDescriptor | Malformed


def _by_display_name(descriptor: Descriptor) -> str:
    return descriptor[0]


def build_format(
    descriptor: Descriptor,
    layout_prefs: LayoutFormatterPreferences,
    save_prefs: SavePreferences,
) -> BuildResult:
    """Turn *descriptor* into a custom :class:`ExportFormat`.

    A trailing ``.layout`` on the layout file name is dropped.  Nothing
    beyond the field count is validated.
    """
    if len(descriptor) < DESCRIPTOR_FIELDS:
        return Malformed(
            descriptor,
            f"expected {DESCRIPTOR_FIELDS} fields, got {len(descriptor)}",
        )
    name, layout, extension = descriptor[0], descriptor[1], descriptor[2]
    if layout.endswith(LAYOUT_SUFFIX):
        layout = layout[: -len(LAYOUT_SUFFIX)]
    fmt = ExportFormat(
        display_name=name,
        console_name=name,
        layout_file_name=layout,
        directory=None,
        extension=extension,
        layout_preferences=layout_prefs,
        save_preferences=save_prefs,
        custom_export=True,
    )
    return ValidDescriptor(descriptor, fmt)


class ExportFormatRegistry:
    """Sorted list of custom format descriptors and the formats built from them.

    *sort_key* orders :meth:`sorted_view` and :meth:`store`; it defaults to
    the display name.  Adding a format whose name is already present
    replaces the format but keeps both descriptors.
    """

    def __init__(self, sort_key: Callable[[Descriptor], Any] | None = None) -> None:
        self._sort_key = sort_key or _by_display_name
        self._descriptors: list[Descriptor] = []
        self._formats: dict[str, ExportFormat] = {}
        self._lock = threading.RLock()

    # -- loading --------------------------------------------------------------

    def load(
        self,
        preferences: PreferenceStore,
        loader: JournalAbbreviationLoader | None,
    ) -> dict[str, ExportFormat]:
        """Replace the current state with the formats stored in *preferences*."""
        layout_prefs = load_layout_preferences(preferences, loader)
        save_prefs = load_save_preferences(preferences)
        with self._lock:
            self._formats.clear()
            self._descriptors.clear()
            i = 0
            while True:
                descriptor = preferences.get_string_list(CUSTOM_EXPORT_FORMAT + str(i))
                if not descriptor:
                    break
                result = build_format(descriptor, layout_prefs, save_prefs)
                if isinstance(result, ValidDescriptor):
                    self._formats[result.format.console_name] = result.format
                    self._descriptors.append(descriptor)
                else:
                    logger.error(
                        "Error initializing custom export format from string %s",
                        preferences.get(CUSTOM_EXPORT_FORMAT + str(i)),
                    )
                i += 1
            logger.debug("loaded %d custom export format(s)", len(self._descriptors))
            return self._formats

    # -- mutation -------------------------------------------------------------

    def build_format(
        self,
        descriptor: Descriptor,
        layout_prefs: LayoutFormatterPreferences,
        save_prefs: SavePreferences,
    ) -> BuildResult:
        return build_format(descriptor, layout_prefs, save_prefs)

    def add(
        self,
        descriptor: Descriptor,
        layout_prefs: LayoutFormatterPreferences,
        save_prefs: SavePreferences,
    ) -> BuildResult:
        """Add *descriptor* and return the build result.

        Nothing is inserted when the result is :class:`Malformed`.
        """
        result = build_format(list(descriptor), layout_prefs, save_prefs)
        if isinstance(result, Malformed):
            logger.debug("not adding custom export format %r: %s", descriptor, result.reason)
            return result
        with self._lock:
            self._formats[result.format.console_name] = result.format
            self._descriptors.append(list(result.descriptor))
        return result

    def remove(
        self,
        descriptor: Descriptor,
        layout_prefs: LayoutFormatterPreferences,
        save_prefs: SavePreferences,
    ) -> bool:
        """Remove *descriptor*; return ``False`` if no stored descriptor matched.

        If another descriptor with the same name is still held, the mapping
        falls back to the format built from the last of them.
        """
        result = build_format(descriptor, layout_prefs, save_prefs)
        if isinstance(result, Malformed):
            return False
        name = result.format.console_name
        with self._lock:
            try:
                self._descriptors.remove(list(descriptor))
                removed = True
            except ValueError:
                removed = False
            self._formats.pop(name, None)
            for remaining in reversed(self._descriptors):
                if remaining[0] == name:
                    self._formats[name] = build_format(remaining, layout_prefs, save_prefs).format
                    break
        return removed

    # -- queries --------------------------------------------------------------

    def size(self) -> int:
        with self._lock:
            return len(self._descriptors)

    def __len__(self) -> int:
        return self.size()

    def sorted_view(self) -> list[Descriptor]:
        """Descriptors in sort order, as copies."""
        with self._lock:
            return [list(d) for d in sorted(self._descriptors, key=self._sort_key)]

    def formats(self) -> dict[str, ExportFormat]:
        """Snapshot of the console name -> format mapping."""
        with self._lock:
            return dict(self._formats)

    def get(self, console_name: str) -> ExportFormat | None:
        with self._lock:
            return self._formats.get(console_name)

    # -- persistence ----------------------------------------------------------

    def store(self, preferences: PreferenceStore) -> None:
        """Write the descriptors to *preferences* in sort order."""
        with self._lock:
            ordered = sorted(self._descriptors, key=self._sort_key)
            for i, descriptor in enumerate(ordered):
                preferences.put_string_list(CUSTOM_EXPORT_FORMAT + str(i), descriptor)
            self._purge(len(ordered), preferences)

    @staticmethod
    def _purge(start: int, preferences: PreferenceStore) -> None:
        """Remove indexed entries from *start* up to the first missing one."""
        i = start
        while preferences.get_string_list(CUSTOM_EXPORT_FORMAT + str(i)):
            preferences.remove(CUSTOM_EXPORT_FORMAT + str(i))
            i += 1
        if i > start:
            logger.debug("purged %d stale custom export entries", i - start)
