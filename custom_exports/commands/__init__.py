"""Command handler mixins."""

from .export_cmds import ExportFormatCommandsMixin  # noqa: F401

__all__ = [
    "ExportFormatCommandsMixin",
]
