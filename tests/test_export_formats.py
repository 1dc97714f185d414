"""Tests for export format definitions and the built-in catalog."""

from __future__ import annotations

from pathlib import Path

from custom_exports.features.custom_export_list import build_format
from custom_exports.features.export_formats import (
    BUILTIN_FORMATS,
    ExportFormat,
    build_catalog,
    builtin_formats,
)
from custom_exports.preferences import SavePreferences


class TestExportFormat:
    def test_custom_layout_file(self, layout_prefs, save_prefs):
        fmt = build_format(["MyFormat", "myformat.layout", "txt"], layout_prefs, save_prefs).format
        assert fmt.layout_file() == Path("myformat.layout")

    def test_builtin_layout_file(self):
        fmt = ExportFormat("HTML", "html", "html", "layout", ".html")
        assert fmt.layout_file() == Path("layout") / "html.layout"

    def test_description(self):
        assert ExportFormat("HTML", "html", "html", None, ".html").description() == "HTML (*.html)"
        assert ExportFormat("Text", "t", "t", None, "txt").description() == "Text (*.txt)"

    def test_encoding_from_save_preferences(self):
        fmt = ExportFormat(
            "T", "t", "t", None, "txt", save_preferences=SavePreferences(encoding="UTF-16")
        )
        assert fmt.encoding == "UTF-16"

    def test_defaults(self):
        fmt = ExportFormat("T", "t", "t", None, "txt")
        assert fmt.custom_export is False
        assert fmt.encoding == "UTF-8"


class TestCatalog:
    def test_builtins_complete(self, layout_prefs, save_prefs):
        formats = builtin_formats(layout_prefs, save_prefs)
        assert len(formats) == len(BUILTIN_FORMATS)
        assert all(not f.custom_export for f in formats.values())
        assert all(f.directory == "layout" for f in formats.values())
        assert formats["html"].layout_preferences is layout_prefs

    def test_custom_formats_added(self, layout_prefs, save_prefs):
        custom = build_format(["mine", "mine.layout", "txt"], layout_prefs, save_prefs).format
        catalog = build_catalog({"mine": custom}, layout_prefs, save_prefs)
        assert catalog["mine"] is custom
        assert "html" in catalog

    def test_custom_overrides_builtin(self, layout_prefs, save_prefs):
        custom = build_format(["html", "myhtml", "htm"], layout_prefs, save_prefs).format
        catalog = build_catalog({"html": custom}, layout_prefs, save_prefs)
        assert catalog["html"].custom_export is True
        assert catalog["html"].extension == "htm"

    def test_sorted_by_console_name(self, layout_prefs, save_prefs):
        catalog = build_catalog({}, layout_prefs, save_prefs)
        assert list(catalog) == sorted(catalog)
