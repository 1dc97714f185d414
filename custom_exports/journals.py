"""Journal abbreviation lists.

Formats never look inside the abbreviation data themselves; the loader is
handed through to the layout engine as part of the layout preferences.
List files hold one journal per line, either ``Full Name = Abbrev`` or
``Full Name;Abbrev``.  Lines starting with ``#`` are comments.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_abbreviation_line(line: str) -> tuple[str, str] | None:
    """Split one list line into ``(full_name, abbreviation)``."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    for sep in ("=", ";"):
        if sep in line:
            full, abbrev = line.split(sep, 1)
            full, abbrev = full.strip(), abbrev.strip()
            if full and abbrev:
                return full, abbrev
            return None
    return None


class JournalAbbreviationLoader:
    """Lazily reads abbreviation files into one ``{full name: abbrev}`` dict."""

    def __init__(self, paths: list[Path] | None = None) -> None:
        self.paths = list(paths or [])
        self._repository: dict[str, str] | None = None

    def repository(self) -> dict[str, str]:
        if self._repository is None:
            self._repository = self._read_all()
        return self._repository

    def update(self, paths: list[Path]) -> None:
        """Replace the list files and drop the cached repository."""
        self.paths = list(paths)
        self._repository = None

    def abbreviate(self, full_name: str) -> str | None:
        return self.repository().get(full_name)

    def _read_all(self) -> dict[str, str]:
        repository: dict[str, str] = {}
        for path in self.paths:
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                logger.warning("could not read journal list %s", path, exc_info=True)
                continue
            for line in text.splitlines():
                parsed = parse_abbreviation_line(line)
                if parsed is not None:
                    full, abbrev = parsed
                    repository[full] = abbrev
        logger.debug("loaded %d journal abbreviations", len(repository))
        return repository
