"""mdreader - Markdown reader core: outline, search and persisted settings."""

__version__ = "0.1.0"
