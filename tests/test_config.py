"""Unit tests for ScaffoldConfig and the cascading loader (component_scaffold.config).

Tests cover:
- ScaffoldConfig defaults, aliases, immutability
- merged / save / load / from_env
- load_config cascade order and error handling
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from component_scaffold.config import RC_FILE_NAME, ScaffoldConfig, load_config
from component_scaffold.errors import ConfigError


def _write_rc(directory: Path, data: dict) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    rc = directory / RC_FILE_NAME
    rc.write_text(json.dumps(data), encoding="utf-8")
    return rc


# ---------------------------------------------------------------------------
# ScaffoldConfig
# ---------------------------------------------------------------------------


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.type == "stateless"
        assert config.css_extension == "css"
        assert config.js_extension == "js"
        assert config.test_file_name == "test"
        assert config.no_mkdir is False
        assert config.no_test is False
        assert config.file_names == {}
        assert config.templates_path is None

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        config = ScaffoldConfig.model_validate({"noMkdir": True, "cssExtension": "scss"})
        assert config.no_mkdir is True
        assert config.css_extension == "scss"

    @pytest.mark.unit
    def test_field_names_accepted(self):
        assert ScaffoldConfig(no_mkdir=True).no_mkdir is True

    @pytest.mark.unit
    def test_unknown_keys_ignored(self):
        config = ScaffoldConfig.model_validate({"reactNative": True})
        assert not hasattr(config, "reactNative")

    @pytest.mark.unit
    def test_frozen(self):
        config = ScaffoldConfig()
        with pytest.raises(ValidationError):
            config.no_mkdir = True

    @pytest.mark.unit
    def test_merged_returns_new_instance(self):
        base = ScaffoldConfig()
        merged = base.merged({"noMkdir": True, "js_extension": "tsx"})
        assert merged.no_mkdir is True
        assert merged.js_extension == "tsx"
        assert base.no_mkdir is False

    @pytest.mark.unit
    def test_merged_alias_overrides_existing_value(self):
        merged = ScaffoldConfig(css_extension="less").merged({"cssExtension": "scss"})
        assert merged.css_extension == "scss"

    @pytest.mark.unit
    def test_merged_invalid_value(self):
        with pytest.raises(ConfigError):
            ScaffoldConfig().merged({"noMkdir": "not-a-bool"})

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = ScaffoldConfig(type="class", no_mkdir=True, file_names={"styleFileName": "x"})
        path = config.save(tmp_path / "nested" / "config.json")
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["noMkdir"] is True
        assert raw["fileNames"] == {"styleFileName": "x"}
        assert ScaffoldConfig.load(path) == config

    @pytest.mark.unit
    def test_from_env(self, tmp_path: Path):
        env = {
            "COMPONENT_SCAFFOLD_OUTPUT": str(tmp_path),
            "COMPONENT_SCAFFOLD_TYPE": "pure",
            "COMPONENT_SCAFFOLD_CSS_EXTENSION": "scss",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.output == tmp_path
        assert config.type == "pure"
        assert config.css_extension == "scss"
        assert config.js_extension == "js"

    @pytest.mark.unit
    def test_from_env_keeps_base(self):
        base = ScaffoldConfig(no_mkdir=True)
        with patch.dict("os.environ", {}, clear=True):
            assert ScaffoldConfig.from_env(base) == base


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    @pytest.mark.unit
    def test_defaults_without_files(self, tmp_path: Path):
        assert load_config(base_path=tmp_path, cascading_path=tmp_path) == ScaffoldConfig()

    @pytest.mark.unit
    def test_no_arguments(self):
        assert load_config() == ScaffoldConfig()

    @pytest.mark.unit
    def test_base_rc(self, tmp_path: Path):
        _write_rc(tmp_path, {"testFileName": "spec"})
        assert load_config(base_path=tmp_path).test_file_name == "spec"

    @pytest.mark.unit
    def test_cascade_deeper_wins(self, tmp_path: Path):
        _write_rc(tmp_path, {"cssExtension": "less", "jsExtension": "jsx"})
        _write_rc(tmp_path / "src", {"cssExtension": "scss"})
        _write_rc(tmp_path / "src" / "components", {"noMkdir": True})
        config = load_config(base_path=tmp_path, cascading_path=tmp_path / "src" / "components")
        assert config.css_extension == "scss"
        assert config.js_extension == "jsx"
        assert config.no_mkdir is True

    @pytest.mark.unit
    def test_cascade_outside_base(self, tmp_path: Path):
        _write_rc(tmp_path / "a", {"cssExtension": "less"})
        _write_rc(tmp_path / "b", {"jsExtension": "tsx"})
        config = load_config(base_path=tmp_path / "a", cascading_path=tmp_path / "b")
        assert config.css_extension == "less"
        assert config.js_extension == "tsx"

    @pytest.mark.unit
    def test_missing_cascading_directory(self, tmp_path: Path):
        _write_rc(tmp_path, {"type": "class"})
        config = load_config(base_path=tmp_path, cascading_path=tmp_path / "not" / "yet")
        assert config.type == "class"

    @pytest.mark.unit
    def test_explicit_file_applied_last(self, tmp_path: Path):
        _write_rc(tmp_path, {"type": "class", "stories": True})
        explicit = tmp_path / "custom.json"
        explicit.write_text(json.dumps({"type": "pure"}), encoding="utf-8")
        config = load_config(explicit, base_path=tmp_path)
        assert config.type == "pure"
        assert config.stories is True

    @pytest.mark.unit
    def test_explicit_file_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="file not found"):
            load_config(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        (tmp_path / RC_FILE_NAME).write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(base_path=tmp_path)

    @pytest.mark.unit
    def test_non_object_json(self, tmp_path: Path):
        (tmp_path / RC_FILE_NAME).write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be an object"):
            load_config(base_path=tmp_path)

    @pytest.mark.unit
    def test_error_names_the_file(self, tmp_path: Path):
        rc = _write_rc(tmp_path, {"noMkdir": "sometimes"})
        with pytest.raises(ConfigError) as exc_info:
            load_config(base_path=tmp_path)
        assert exc_info.value.path == rc
