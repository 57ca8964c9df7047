"""Remove files older than a given age from a directory, with dry-run and run logs."""

__version__ = "0.1.0"