"""Tests for journal abbreviation list loading."""

from __future__ import annotations

import logging

from custom_exports.journals import JournalAbbreviationLoader, parse_abbreviation_line


class TestParseLine:
    def test_equals_separator(self):
        assert parse_abbreviation_line("Physical Review = Phys. Rev.") == (
            "Physical Review",
            "Phys. Rev.",
        )

    def test_semicolon_separator(self):
        assert parse_abbreviation_line("Nature Physics;Nat. Phys.") == (
            "Nature Physics",
            "Nat. Phys.",
        )

    def test_comments_and_blanks(self):
        assert parse_abbreviation_line("# comment") is None
        assert parse_abbreviation_line("   ") is None

    def test_incomplete(self):
        assert parse_abbreviation_line("Only a name") is None
        assert parse_abbreviation_line("Name =") is None


class TestJournalAbbreviationLoader:
    def test_empty(self):
        assert JournalAbbreviationLoader().repository() == {}

    def test_reads_files_in_order(self, tmp_path):
        first = tmp_path / "a.txt"
        first.write_text("Journal A = J. A.\nJournal B = J. B.\n")
        second = tmp_path / "b.txt"
        second.write_text("# user list\nJournal B;JB\n")
        loader = JournalAbbreviationLoader([first, second])
        assert loader.repository() == {"Journal A": "J. A.", "Journal B": "JB"}
        assert loader.abbreviate("Journal A") == "J. A."
        assert loader.abbreviate("Unknown") is None

    def test_missing_file_skipped(self, tmp_path, caplog):
        good = tmp_path / "good.txt"
        good.write_text("Journal A = J. A.\n")
        loader = JournalAbbreviationLoader([tmp_path / "missing.txt", good])
        with caplog.at_level(logging.WARNING):
            assert loader.repository() == {"Journal A": "J. A."}
        assert "missing.txt" in caplog.text

    def test_repository_cached_until_update(self, tmp_path):
        path = tmp_path / "list.txt"
        path.write_text("Journal A = J. A.\n")
        loader = JournalAbbreviationLoader([path])
        assert loader.repository() == {"Journal A": "J. A."}
        path.write_text("Journal C = J. C.\n")
        assert loader.repository() == {"Journal A": "J. A."}
        loader.update([path])
        assert loader.repository() == {"Journal C": "J. C."}
