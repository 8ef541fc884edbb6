"""Error taxonomy for component scaffolding.

Every error raised by the package derives from :class:`ScaffoldError` so the
CLI can report any failure with a single ``except`` clause.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidArgumentError(ScaffoldError, ValueError):
    """Raised for an empty or illegal component name or component type."""


class TemplateSourceUnavailableError(ScaffoldError):
    """Raised when a custom template root is missing or unreadable."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Template source unavailable: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PathUnavailableError(ScaffoldError):
    """Raised when a directory to list does not exist or is not a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Not a readable directory: {self.path}")


class FileSystemError(ScaffoldError):
    """Raised when reading or writing a single file fails.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: str | Path, operation: str, message: str = "") -> None:
        self.path = Path(path)
        self.operation = operation
        detail = f": {message}" if message else ""
        super().__init__(f"Failed to {operation} {self.path}{detail}")


class ConfigError(ScaffoldError):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: str | Path | None, message: str) -> None:
        self.path = Path(path) if path is not None else None
        where = f" ({self.path})" if self.path is not None else ""
        super().__init__(f"Invalid configuration{where}: {message}")
