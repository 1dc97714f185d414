"""Entry point for the custom-exports CLI."""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path

from . import __version__
from .commands import ExportFormatCommandsMixin
from .constants import prefs_path
from .features.custom_export_list import ExportFormatRegistry
from .journals import JournalAbbreviationLoader
from .log import configure_logging, logger
from .persistence import PreferenceStore


class ExportConsole(ExportFormatCommandsMixin):
    """Runs /exports commands against a preference file, printing replies."""

    def __init__(
        self,
        store: PreferenceStore,
        loader: JournalAbbreviationLoader | None = None,
        out=None,
    ) -> None:
        self._prefs_store = store
        self._abbreviation_loader = loader
        self._export_registry = ExportFormatRegistry()
        self._export_registry.load(store, loader)
        self._out = out or sys.stdout

    def _add_system_message(self, text: str) -> None:
        print(text, file=self._out)

    def run(self, words: list[str]) -> None:
        self._cmd_exports(" ".join(["/exports", *(shlex.quote(w) for w in words)]))


def main(argv: list[str] | None = None) -> None:
    """Run the custom-exports CLI."""
    parser = argparse.ArgumentParser(
        prog="custom-exports",
        description="Manage user-defined export formats",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"custom-exports {__version__}",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=None,
        help="Preference file (default: $CUSTOM_EXPORTS_PREFS or ~/.custom-exports/preferences.yaml)",
    )
    parser.add_argument(
        "--journal-list",
        type=Path,
        action="append",
        default=[],
        help="Journal abbreviation list file (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="list | all | add NAME LAYOUT EXT | remove NAME | show NAME",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    path = args.prefs or prefs_path()
    logger.debug("using preference file %s", path)
    store = PreferenceStore(path)
    loader = JournalAbbreviationLoader(args.journal_list)

    try:
        ExportConsole(store, loader).run(args.command)
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in custom-exports", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
