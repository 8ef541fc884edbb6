"""Component scaffolding configuration.

Typed, read-only settings shared by the CLI and both generation paths.  The
model uses camelCase aliases so ``.componentrc`` files keep the keys users
already know (``cssExtension``, ``noMkdir``, ...), while Python code uses the
snake_case field names.

Settings cascade: built-in defaults, then every ``.componentrc`` from the
base path down to the cascading path (deeper files win), then an explicit
config file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from component_scaffold.errors import ConfigError

RC_FILE_NAME = ".componentrc"


class ScaffoldConfig(BaseModel):
    """Default generation settings.

    Instances are frozen: build a new one with :meth:`merged` rather than
    mutating an existing value.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    type: str = Field(default="stateless", description="stateless, class or pure")
    css_extension: str | None = Field(default="css")
    js_extension: str = Field(default="js")
    index_file: bool = Field(default=False)
    connected: bool = Field(default=False)
    component_methods: list[str] = Field(default_factory=list)
    file_names: dict[str, str] = Field(default_factory=dict)
    stories: bool = Field(default=False)
    no_test: bool = Field(default=False)
    no_mkdir: bool = Field(default=False)
    test_file_name: str = Field(default="test", description="Test file prefix")
    templates_path: Path | None = Field(default=None)
    output: Path = Field(default=Path("."))

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def merged(self, overrides: dict[str, Any], source: Path | None = None) -> "ScaffoldConfig":
        """Return a copy with *overrides* (alias or field names) applied.

        Raises:
            ConfigError: If the merged values fail validation.
        """
        fields = self.__class__.model_fields
        data = self.model_dump(by_alias=True)
        for key, value in overrides.items():
            field = fields.get(key)
            data[field.alias if field is not None and field.alias else key] = value
        try:
            return self.__class__.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(source, str(exc)) from exc

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as camelCase JSON."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.model_dump_json(by_alias=True, indent=2, exclude_none=True),
            encoding="utf-8",
        )
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a single JSON configuration file on top of the defaults."""
        return cls().merged(_read_json(Path(path)), Path(path))

    @classmethod
    def from_env(cls, base: "ScaffoldConfig | None" = None) -> "ScaffoldConfig":
        """Apply ``COMPONENT_SCAFFOLD_*`` environment variables.

        Recognised variables (all optional):
            COMPONENT_SCAFFOLD_OUTPUT, COMPONENT_SCAFFOLD_TEMPLATES_PATH,
            COMPONENT_SCAFFOLD_TYPE, COMPONENT_SCAFFOLD_CSS_EXTENSION,
            COMPONENT_SCAFFOLD_JS_EXTENSION.
        """
        overrides: dict[str, Any] = {}
        for field_name in ("output", "templates_path", "type", "css_extension", "js_extension"):
            value = os.environ.get(f"COMPONENT_SCAFFOLD_{field_name.upper()}")
            if value:
                overrides[field_name] = value
        return (base or cls()).merged(overrides)


# ---------------------------------------------------------------------------
# Cascading loader
# ---------------------------------------------------------------------------


def load_config(
    config_file: str | Path | None = None,
    base_path: str | Path | None = None,
    cascading_path: str | Path | None = None,
) -> ScaffoldConfig:
    """Resolve the effective configuration.

    Args:
        config_file: Explicit JSON file applied last.
        base_path: Directory whose ``.componentrc`` is applied first.
        cascading_path: Directory at or below *base_path*; the rc file of
            every directory between the two is applied in order.  When it is
            not inside *base_path* only its own rc file is used.

    Raises:
        ConfigError: If any configuration file is unreadable or invalid.
    """
    config = ScaffoldConfig()
    for rc_file in _rc_files(base_path, cascading_path):
        config = config.merged(_read_json(rc_file), rc_file)
    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(path, "file not found")
        config = config.merged(_read_json(path), path)
    return config


def _rc_files(base_path: str | Path | None, cascading_path: str | Path | None) -> list[Path]:
    """Return existing rc files from *base_path* down to *cascading_path*."""
    directories: list[Path] = []
    base = Path(base_path).absolute() if base_path is not None else None
    leaf = Path(cascading_path).absolute() if cascading_path is not None else None

    if base is not None:
        directories.append(base)
    if leaf is not None:
        if base is not None and leaf != base and leaf.is_relative_to(base):
            current = base
            for part in leaf.relative_to(base).parts:
                current = current / part
                directories.append(current)
        elif leaf not in directories:
            directories.append(leaf)

    return [d / RC_FILE_NAME for d in directories if (d / RC_FILE_NAME).is_file()]


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(path, exc.strerror or str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(path, f"not valid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise ConfigError(path, "top-level value must be an object")
    return data
