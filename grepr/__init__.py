"""grepr: a small grep-like utility (regex search) for files, folders and stdin."""

__version__ = "0.1.0"
