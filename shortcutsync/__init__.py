"""Steam shortcuts, collections, artwork naming and downloads, backups and process control."""

__version__ = "0.1.0"