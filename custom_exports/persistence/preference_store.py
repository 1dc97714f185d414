"""Flat key/value preference store backed by a YAML file."""

from __future__ import annotations

from pathlib import Path

from ..log import logger
from ..preferences import convert_list_to_string, convert_string_to_list
from ._base import YamlStore


class CustomExportsError(Exception):
    """Base class for errors raised by this package."""


class PreferenceFormatError(CustomExportsError, TypeError):
    """A preference value that cannot be stored as a string."""


class PreferenceStore(YamlStore):
    """String-valued preferences (``{key: value}``), cached in memory.

    Reads and writes go to the in-memory mapping; :meth:`flush` persists it.
    A store created with ``path=None`` never touches the disk.
    """

    def __init__(self, path: Path | None = None) -> None:
        super().__init__(path)
        self._values: dict[str, str] = {}
        self._dirty = False
        self.load()

    def load(self) -> None:
        """(Re)read the backing file, dropping unsaved changes."""
        raw = self.load_raw()
        if not isinstance(raw, dict):
            logger.debug("ignoring non-mapping preference file %s", self.path)
            raw = {}
        self._values = {str(k): str(v) for k, v in raw.items() if v is not None}
        self._dirty = False

    def flush(self) -> None:
        """Write pending changes to disk."""
        if not self._dirty:
            return
        self.save_raw(self._values, sort_keys=True)
        self._dirty = False

    @property
    def dirty(self) -> bool:
        return self._dirty

    # -- scalar values --------------------------------------------------------

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the raw stored string for *key*."""
        return self._values.get(key, default)

    def put(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise PreferenceFormatError(
                f"preference {key!r} must be a string, got {type(value).__name__}"
            )
        if self._values.get(key) != value:
            self._values[key] = value
            self._dirty = True

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        return value.strip().lower() in ("true", "yes", "1", "on")

    def put_bool(self, key: str, value: bool) -> None:
        self.put(key, "true" if value else "false")

    def remove(self, key: str) -> None:
        """Delete *key*; a missing key is ignored."""
        if self._values.pop(key, None) is not None:
            self._dirty = True

    def keys(self) -> list[str]:
        return sorted(self._values)

    # -- string lists ---------------------------------------------------------

    def get_string_list(self, key: str) -> list[str]:
        """Decode the list stored under *key* (empty list if absent)."""
        return convert_string_to_list(self._values.get(key))

    def put_string_list(self, key: str, values: list[str]) -> None:
        self.put(key, convert_list_to_string(list(values)))
