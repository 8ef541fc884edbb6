"""Shared pytest fixtures for the component-scaffold test suite.

Provides reusable fixtures for:
- Temporary output directories
- Custom template trees written to disk
- Default configuration values
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from component_scaffold.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Destination root for generated components (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    yield out


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[str, dict[str, str]], Path]:
    """Factory writing a ``{relative_path: content}`` mapping under *tmp_path*."""

    def _write(root_name: str, files: dict[str, str]) -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def template_tree(write_tree) -> Path:
    """Two-file custom template: ``index.js`` and ``COMPONENT_NAME.css``."""
    return write_tree(
        "templates",
        {
            "index.js": (
                "import styles from './COMPONENT_NAME.css'\n"
                "\n"
                "export default function COMPONENT_NAME() {}\n"
            ),
            "COMPONENT_NAME.css": ".cOMPONENT_NAME {}\n",
        },
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> ScaffoldConfig:
    """Configuration with every setting at its default."""
    return ScaffoldConfig()
