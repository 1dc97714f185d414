"""Custom export format commands (/exports)."""

from __future__ import annotations

import shlex

from ..log import logger
from ..features.custom_export_list import Malformed
from ..features.export_formats import build_catalog
from ..preferences import load_layout_preferences, load_save_preferences

_USAGE = (
    "Usage:\n"
    "  /exports                                  list custom formats\n"
    "  /exports add <name> <layout-file> <ext>   add a format\n"
    "  /exports remove <name>                    remove a format\n"
    "  /exports show <name>                      show one format\n"
    "  /exports all                              list built-in and custom formats"
)


class ExportFormatCommandsMixin:
    """Custom export format commands.

    The host provides ``_prefs_store``, ``_export_registry``,
    ``_abbreviation_loader`` and ``_add_system_message``.
    """

    def _export_prefs(self):
        """Layout and save preferences as currently stored."""
        return (
            load_layout_preferences(self._prefs_store, self._abbreviation_loader),
            load_save_preferences(self._prefs_store),
        )

    def _cmd_exports(self, text: str) -> None:
        """Handle the /exports command family."""
        try:
            parts = shlex.split(text.strip())
        except ValueError as exc:
            self._add_system_message(f"Could not parse command: {exc}")
            return
        args = parts[1:]

        if not args or args[0] == "list":
            self._exports_list()
            return

        sub, rest = args[0], args[1:]
        if sub == "add":
            self._exports_add(rest)
        elif sub in ("remove", "rm"):
            self._exports_remove(rest)
        elif sub == "show":
            self._exports_show(rest)
        elif sub == "all":
            self._exports_all()
        else:
            self._add_system_message(f"Unknown subcommand: {sub}\n{_USAGE}")

    # -- subcommands ----------------------------------------------------------

    def _exports_list(self) -> None:
        view = self._export_registry.sorted_view()
        if not view:
            self._add_system_message(
                "No custom export formats.\n"
                "Add: /exports add <name> <layout-file> <extension>"
            )
            return
        lines = ["Custom export formats:"]
        for i, (name, layout, ext, *_extra) in enumerate(view, 1):
            lines.append(f"  {i}. {name}  [{layout}]  {ext}")
        self._add_system_message("\n".join(lines))

    def _exports_all(self) -> None:
        layout_prefs, save_prefs = self._export_prefs()
        catalog = build_catalog(self._export_registry.formats(), layout_prefs, save_prefs)
        lines = ["Export formats:"]
        for console, fmt in catalog.items():
            marker = "*" if fmt.custom_export else " "
            lines.append(f" {marker} {console:<20} {fmt.description()}")
        lines.append("")
        lines.append("  * custom format")
        self._add_system_message("\n".join(lines))

    def _exports_add(self, rest: list[str]) -> None:
        layout_prefs, save_prefs = self._export_prefs()
        replacing = bool(rest) and self._export_registry.get(rest[0]) is not None
        result = self._export_registry.add(rest, layout_prefs, save_prefs)
        if isinstance(result, Malformed):
            self._add_system_message(
                "Usage: /exports add <name> <layout-file> <extension>"
            )
            return
        if replacing:
            logger.debug("replaced custom export format %s", result.format.console_name)
        self._store_exports()
        self._add_system_message(f"Added export format: {result.format.description()}")

    def _exports_remove(self, rest: list[str]) -> None:
        if len(rest) != 1:
            self._add_system_message("Usage: /exports remove <name>")
            return
        name = rest[0]
        layout_prefs, save_prefs = self._export_prefs()
        matches = [d for d in self._export_registry.sorted_view() if d[0] == name]
        if not matches:
            self._add_system_message(f"No custom export format named '{name}'")
            return
        for descriptor in matches:
            self._export_registry.remove(descriptor, layout_prefs, save_prefs)
        self._store_exports()
        self._add_system_message(f"Removed export format: {name}")

    def _exports_show(self, rest: list[str]) -> None:
        if len(rest) != 1:
            self._add_system_message("Usage: /exports show <name>")
            return
        fmt = self._export_registry.get(rest[0])
        if fmt is None:
            self._add_system_message(f"No custom export format named '{rest[0]}'")
            return
        self._add_system_message(
            f"{fmt.display_name}\n"
            f"  Layout:    {fmt.layout_file()}\n"
            f"  Extension: {fmt.extension}\n"
            f"  Encoding:  {fmt.encoding}"
        )

    def _store_exports(self) -> None:
        """Write the registry back and flush the preference file."""
        self._export_registry.store(self._prefs_store)
        try:
            self._prefs_store.flush()
        except OSError as exc:
            logger.debug("failed to save preferences", exc_info=True)
            self._add_system_message(f"Could not save preferences: {exc}")
