"""Export format definitions.

An :class:`ExportFormat` names a layout file and the extension of the files
it produces.  Built-in formats ship their layouts in the ``layout`` resource
directory; custom formats point at a user-supplied layout file instead and
carry ``directory=None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..constants import BUILTIN_LAYOUT_DIRECTORY, LAYOUT_SUFFIX
from ..preferences import LayoutFormatterPreferences, SavePreferences


@dataclass
class ExportFormat:
    """A layout-driven export format."""

    display_name: str
    console_name: str
    layout_file_name: str
    directory: str | None
    extension: str
    layout_preferences: LayoutFormatterPreferences = field(
        default_factory=LayoutFormatterPreferences, repr=False
    )
    save_preferences: SavePreferences = field(
        default_factory=SavePreferences, repr=False
    )
    custom_export: bool = False

    @property
    def encoding(self) -> str:
        return self.save_preferences.encoding

    def layout_file(self) -> Path:
        """Return the layout file this format renders with."""
        name = self.layout_file_name + LAYOUT_SUFFIX
        if self.directory is None:
            return Path(name)
        return Path(self.directory) / name

    def description(self) -> str:
        """File-chooser label, e.g. ``"HTML (*.html)"``."""
        ext = self.extension if self.extension.startswith(".") else f".{self.extension}"
        return f"{self.display_name} (*{ext})"


# (display name, console name, layout base name, extension)
BUILTIN_FORMATS: list[tuple[str, str, str, str]] = [
    ("HTML", "html", "html", ".html"),
    ("Simple HTML", "simplehtml", "simplehtml", ".html"),
    ("DocBook 4.4", "docbook", "docbook4", ".xml"),
    ("DocBook 5.1", "docbook5", "docbook5", ".xml"),
    ("DIN 1505", "din1505", "din1505winword", ".rtf"),
    ("Harvard RTF", "harvard", "harvard", ".rtf"),
    ("ISO 690", "iso690rtf", "iso690RTF", ".rtf"),
    ("ISO 690", "iso690txt", "iso690", ".txt"),
    ("Endnote", "endnote", "EndNote", ".txt"),
    ("OpenOffice/LibreOffice CSV", "oocsv", "openoffice-csv", ".csv"),
    ("RIS", "ris", "ris", ".ris"),
    ("MIS Quarterly", "misq", "misq", ".rtf"),
    ("YAML", "yaml", "yaml", ".yaml"),
]


def builtin_formats(
    layout_prefs: LayoutFormatterPreferences,
    save_prefs: SavePreferences,
) -> dict[str, ExportFormat]:
    """Return the bundled formats keyed by console name."""
    return {
        console: ExportFormat(
            display_name=display,
            console_name=console,
            layout_file_name=layout,
            directory=BUILTIN_LAYOUT_DIRECTORY,
            extension=ext,
            layout_preferences=layout_prefs,
            save_preferences=save_prefs,
        )
        for display, console, layout, ext in BUILTIN_FORMATS
    }


def build_catalog(
    custom: dict[str, ExportFormat],
    layout_prefs: LayoutFormatterPreferences,
    save_prefs: SavePreferences,
) -> dict[str, ExportFormat]:
    """Merge *custom* over the built-ins; a custom format wins on a name clash."""
    catalog = builtin_formats(layout_prefs, save_prefs)
    catalog.update(custom)
    return dict(sorted(catalog.items()))
