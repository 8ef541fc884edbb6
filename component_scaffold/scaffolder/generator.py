"""Built-in component generation.

Takes a :class:`GenerationRequest` and writes the component folder using the
packaged templates:

- ``<componentFileName>.<jsExtension>`` (always)
- ``<styleFileName>.<cssExtension>`` (when a style extension is set)
- ``index.js`` (when an index file or a connected wrapper is requested)
- ``<testFileName>.<jsExtension>`` (when tests are included)
- ``<name>.stories.<jsExtension>`` (when stories are included)

Every file is rendered in memory before the first write, so a template or
naming error never leaves a half-written component behind.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from component_scaffold.config import ScaffoldConfig
from component_scaffold.errors import FileSystemError, InvalidArgumentError
from component_scaffold.utils import print_warning

from .files import write_file
from .keys import replace_keys, validate_name
from .templates import (
    generate_component_template,
    generate_index_file,
    generate_storybook_template,
    generate_style_file,
    generate_test_template,
)

FILE_NAME_KEYS: tuple[str, ...] = ("testFileName", "componentFileName", "styleFileName")
INDEX_FILE_NAME = "index.js"


# ---------------------------------------------------------------------------
# Request / output models
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """Options controlling one built-in generation call."""

    name: str = Field(..., description="Component name, substituted into files and file names")
    path: Path = Field(default=Path("."), description="Directory receiving the component")
    type: str = Field(default="stateless", description="stateless, class or pure")
    file_names: dict[str, str] = Field(
        default_factory=dict,
        description="Overrides for testFileName, componentFileName and styleFileName",
    )
    css_extension: str | None = Field(default="css", description="None disables the style file")
    js_extension: str = Field(default="js")
    component_methods: list[str] = Field(default_factory=list)
    index_file: bool = Field(default=False)
    connected: bool = Field(default=False)
    include_stories: bool = Field(default=False)
    include_tests: bool = Field(default=True)
    no_mkdir: bool = Field(default=False, description="Write into path instead of path/name")

    @classmethod
    def from_config(
        cls,
        name: str,
        config: ScaffoldConfig,
        path: str | Path | None = None,
        **overrides: Any,
    ) -> "GenerationRequest":
        """Build a request from configuration defaults plus keyword overrides."""
        values: dict[str, Any] = {
            "name": name,
            "path": Path(path) if path is not None else config.output,
            "type": config.type,
            "file_names": dict(config.file_names),
            "css_extension": config.css_extension,
            "js_extension": config.js_extension,
            "component_methods": list(config.component_methods),
            "index_file": config.index_file,
            "connected": config.connected,
            "include_stories": config.stories,
            "include_tests": not config.no_test,
            "no_mkdir": config.no_mkdir,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def destination(self) -> Path:
        """Directory the component files are written to."""
        return self.path if self.no_mkdir else self.path / self.name


@dataclass(frozen=True)
class OutputFile:
    """A rendered file waiting to be written."""

    path: Path
    content: str


# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------


def resolve_file_names(
    overrides: dict[str, str] | None,
    name: str,
    config: ScaffoldConfig | None = None,
) -> dict[str, str]:
    """Return the final test, component and style file names for *name*.

    Defaults are ``<testFileName prefix>.<name>``, ``<name>`` and ``<name>``.
    Each override has its placeholder keys substituted with *name*; keys
    other than the three known ones are ignored.

    Raises:
        InvalidArgumentError: If *name* is empty.
    """
    validate_name(name)
    prefix = (config or ScaffoldConfig()).test_file_name
    resolved = {
        "testFileName": f"{prefix}.{name}",
        "componentFileName": name,
        "styleFileName": name,
    }
    for key, value in (overrides or {}).items():
        if key in resolved:
            resolved[key] = replace_keys(value, name)
    return resolved


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def build_output_files(
    request: GenerationRequest,
    config: ScaffoldConfig | None = None,
) -> list[OutputFile]:
    """Render every file requested by *request* without writing anything."""
    name = validate_name(request.name)
    destination = request.destination
    names = resolve_file_names(request.file_names, name, config)
    component_file = names["componentFileName"]
    js_ext = request.js_extension

    files: list[OutputFile] = []

    if request.index_file or request.connected:
        files.append(OutputFile(
            destination / INDEX_FILE_NAME,
            generate_index_file(component_file, request.connected, name=name),
        ))

    if request.include_stories:
        files.append(OutputFile(
            destination / f"{name}.stories.{js_ext}",
            generate_storybook_template(name, component_file),
        ))

    if request.include_tests:
        files.append(OutputFile(
            destination / f"{names['testFileName']}.{js_ext}",
            generate_test_template(name, component_file),
        ))

    files.append(OutputFile(
        destination / f"{component_file}.{js_ext}",
        generate_component_template(
            request.type,
            name,
            css_extension=request.css_extension,
            component_methods=request.component_methods,
            style_file_name=names["styleFileName"],
        ),
    ))

    if request.css_extension:
        files.append(OutputFile(
            destination / f"{names['styleFileName']}.{request.css_extension}",
            generate_style_file(name),
        ))

    return files


async def generate_files(
    request: GenerationRequest,
    *,
    config: ScaffoldConfig | None = None,
    atomic: bool = False,
) -> list[Path]:
    """Generate a component from the built-in templates.

    Args:
        request: What to generate and where.
        config: Settings supplying the test file prefix.  Defaults to
            :class:`ScaffoldConfig` defaults.
        atomic: Stage the files in a temporary sibling directory and rename
            it into place.  Only possible when the destination directory does
            not exist yet; otherwise files are written in place.

    Returns:
        The written file paths.

    Raises:
        InvalidArgumentError: On an empty name or unknown component type.
        FileSystemError: If any write fails.
    """
    files = build_output_files(request, config)
    if atomic:
        return await _commit_atomic(files, request.destination)
    return await _write_all(files)


async def _write_all(files: list[OutputFile]) -> list[Path]:
    return list(await asyncio.gather(*(write_file(f.path, f.content) for f in files)))


async def _commit_atomic(files: list[OutputFile], destination: Path) -> list[Path]:
    """Write *files* to a staging directory, then rename it to *destination*."""
    if destination.exists():
        print_warning(f"{destination} already exists; writing files in place")
        return await _write_all(files)

    staged: list[OutputFile] = []
    for f in files:
        try:
            rel = f.path.relative_to(destination)
        except ValueError:
            raise InvalidArgumentError(f"{f.path} is outside {destination}") from None
        staged.append(OutputFile(rel, f.content))

    staging_root = await asyncio.to_thread(_make_staging_dir, destination)
    staging = staging_root / destination.name
    try:
        await _write_all([OutputFile(staging / f.path, f.content) for f in staged])
        await asyncio.to_thread(_rename, staging, destination)
    finally:
        await asyncio.to_thread(shutil.rmtree, staging_root, True)
    return [f.path for f in files]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_staging_dir(destination: Path) -> Path:
    """Create a private temporary directory next to *destination*.

    The component folder is staged as a plain ``mkdir`` child of it so that
    its mode follows the umask like a non-atomic run.
    """
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        staging_root = Path(tempfile.mkdtemp(prefix=f".{destination.name}-", dir=destination.parent))
        (staging_root / destination.name).mkdir()
        return staging_root
    except OSError as exc:
        raise FileSystemError(destination.parent, "create staging directory in", str(exc)) from exc


def _rename(source: Path, target: Path) -> None:
    try:
        os.rename(source, target)
    except OSError as exc:
        raise FileSystemError(target, "move staged files to", exc.strerror or str(exc)) from exc
