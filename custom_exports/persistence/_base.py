"""Base YAML persistence store."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..log import logger


class YamlStore:
    """Simple YAML file store.

    Subclasses override ``_default()`` to provide the empty-state value
    (``{}`` for mappings, ``[]`` for sequences).
    """

    def __init__(self, path: Path | None) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the YAML file, returning ``_default()`` on any error."""
        try:
            if self.path is not None and self.path.exists():
                data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
                if data is not None:
                    return data
        except (OSError, yaml.YAMLError):
            logger.debug("failed to load YAML store from %s", self.path, exc_info=True)
        return self._default()

    def save_raw(self, data: dict | list, *, sort_keys: bool = False) -> None:
        """Write *data* as block-style YAML, creating parents as needed."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(
            yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=sort_keys,
            ),
            encoding="utf-8",
        )
        tmp.replace(self.path)

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
