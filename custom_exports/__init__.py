"""User-defined export formats, persisted to a flat preference store."""

__version__ = "0.1.0"
