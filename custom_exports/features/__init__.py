"""Feature modules: export format definitions and the custom format registry."""
