"""Custom template materialization.

A custom template set is a plain directory tree.  Every file in it is copied
to the output directory with the placeholder keys substituted in both its
content and its relative path, e.g. ``COMPONENT_NAME.css`` becomes
``Button.css``.

Files are processed concurrently.  A failure on one file is reported and
recorded but never stops the others, and the call itself does not raise for
per-file failures: inspect :attr:`MaterializationResult.failed` instead.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from component_scaffold.config import ScaffoldConfig, load_config
from component_scaffold.errors import FileSystemError
from component_scaffold.utils import print_error

from .files import iter_template_files, read_text, write_file
from .keys import replace_keys, validate_name


@dataclass
class MaterializationResult:
    """Outcome of one custom-template generation."""

    output_path: Path
    written: list[Path] = field(default_factory=list)
    failed: dict[str, FileSystemError] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """``True`` when every template file was written."""
        return not self.failed


async def generate_files_from_template(
    name: str,
    path: str | Path,
    templates_path: str | Path,
    *,
    config: ScaffoldConfig | None = None,
) -> MaterializationResult:
    """Materialize the template tree at *templates_path* for component *name*.

    Args:
        name: Component name substituted into contents and paths.
        path: Destination root.
        templates_path: Root of the custom template tree.
        config: Settings to use.  Defaults to the configuration scoped to
            *templates_path* (its ``.componentrc``), which decides whether a
            ``name`` folder is created under *path*.

    Returns:
        The written paths and the per-file failures.

    Raises:
        InvalidArgumentError: If *name* is empty.
        TemplateSourceUnavailableError: If *templates_path* is missing or
            unreadable.  Nothing is written in that case.
    """
    validate_name(name)
    templates_root = Path(templates_path)
    template_files = iter_template_files(templates_root)
    if config is None:
        config = load_config(base_path=templates_root, cascading_path=templates_root)

    output_path = Path(path) if config.no_mkdir else Path(path) / name
    result = MaterializationResult(output_path=output_path)

    outcomes = await asyncio.gather(
        *(
            _materialize_file(name, templates_root / rel, output_path / replace_keys(rel, name))
            for rel in template_files
        ),
        return_exceptions=True,
    )

    for rel, outcome in zip(template_files, outcomes):
        if isinstance(outcome, FileSystemError):
            result.failed[rel] = outcome
            print_error(f"Could not generate {rel}: {outcome}")
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            result.written.append(outcome)

    return result


generate_files_from_custom = generate_files_from_template


async def _materialize_file(name: str, source: Path, target: Path) -> Path:
    """Read one template, substitute its keys and write it to *target*."""
    content = await read_text(source)
    return await write_file(target, replace_keys(content, name))
