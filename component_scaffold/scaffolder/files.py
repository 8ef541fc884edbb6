"""File-system primitives shared by both generation paths.

Blocking I/O is pushed to a worker thread with :func:`asyncio.to_thread` so
that many files can be read and written concurrently from one event loop.
Every ``OSError`` is wrapped in :class:`FileSystemError`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from component_scaffold.errors import (
    FileSystemError,
    PathUnavailableError,
    TemplateSourceUnavailableError,
)


# ---------------------------------------------------------------------------
# Writing / reading
# ---------------------------------------------------------------------------


async def write_file(path: str | Path, content: str) -> Path:
    """Create parent directories and write *content* to *path*.

    An existing file is overwritten without warning.

    Returns:
        The written path.

    Raises:
        FileSystemError: If the directory or file cannot be written.
    """
    out = Path(path)
    await asyncio.to_thread(_write_file, out, content)
    return out


async def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileSystemError: If the file cannot be read or decoded.
    """
    src = Path(path)
    return await asyncio.to_thread(_read_file, src)


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------


def list_subdirectories(path: str | Path) -> list[Path]:
    """Return the absolute paths of the immediate subdirectories of *path*.

    Entries keep the file system's enumeration order.  Symbolic links are
    not followed, so a link pointing at a directory is not listed.

    Raises:
        PathUnavailableError: If *path* does not exist or is not a directory.
    """
    root = Path(path).absolute()
    try:
        entries = list(root.iterdir())
    except (FileNotFoundError, NotADirectoryError, PermissionError) as exc:
        raise PathUnavailableError(root) from exc
    return [entry for entry in entries if not entry.is_symlink() and entry.is_dir()]


def iter_template_files(templates_root: str | Path) -> list[str]:
    """Return every non-directory entry below *templates_root*.

    Paths are POSIX-style and relative to the root.  Hidden files and
    anything inside hidden directories are skipped.

    Raises:
        TemplateSourceUnavailableError: If the root is missing, is not a
            directory, or cannot be listed.
    """
    root = Path(templates_root)
    if not root.exists():
        raise TemplateSourceUnavailableError(root, "does not exist")
    if not root.is_dir():
        raise TemplateSourceUnavailableError(root, "not a directory")

    try:
        next(root.iterdir(), None)
        candidates = sorted(root.rglob("*"))
    except OSError as exc:
        raise TemplateSourceUnavailableError(root, str(exc)) from exc

    files: list[str] = []
    for candidate in candidates:
        rel = candidate.relative_to(root)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if candidate.is_dir():
            continue
        files.append(rel.as_posix())
    return files


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(path, "write", exc.strerror or str(exc)) from exc


def _read_file(path: Path) -> str:
    """Synchronous helper: read UTF-8 content."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(path, "read", exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileSystemError(path, "read", f"not valid UTF-8 ({exc.reason})") from exc
