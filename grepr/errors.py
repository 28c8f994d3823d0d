"""Error taxonomy for grepr.

Every error carries the text that ends up on stderr as its ``str()``, so the
runner never has to format messages itself.
"""

from __future__ import annotations


class GrepError(Exception):
    """Base error for grepr."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ConfigError(GrepError):
    """Raised when the search pattern does not compile. Fatal."""

    @classmethod
    def invalid_pattern(cls, pattern: str) -> ConfigError:
        return cls(f'Invalid pattern "{pattern}"')


class PathError(GrepError):
    """A requested path could not be resolved to readable files."""

    @classmethod
    def from_os_error(cls, path: str, ex: OSError) -> PathError:
        return cls(f"{path}: {ex.strerror or ex}", path)

    @classmethod
    def is_directory(cls, path: str) -> PathError:
        return cls(f"{path} is a directory", path)


class OpenError(GrepError):
    """A resolved path could not be opened for reading."""

    @classmethod
    def from_os_error(cls, path: str, ex: OSError) -> OpenError:
        return cls(f"{path}: {ex.strerror or ex}", path)


class ScanError(GrepError):
    """Reading an opened input failed part way through."""

    @classmethod
    def from_exception(cls, path: str, ex: Exception) -> ScanError:
        detail = ex.strerror if isinstance(ex, OSError) and ex.strerror else str(ex)
        return cls(f"{path}: {detail}", path)


class NoMatchError(GrepError):
    """A line handed to the highlighter does not match the pattern."""
