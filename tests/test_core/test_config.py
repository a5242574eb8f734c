"""Tests for rncreate.core.config."""

import json

import pytest

from rncreate.core.config import (
    ScaffoldConfig,
    get_config_path,
    load_config,
    save_config,
)


class TestScaffoldConfig:

    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.step_delay_ms == 420
        assert config.welcome_delay_ms == 600
        assert config.source_root == "src"

    def test_from_dict_ignores_unknown_keys(self):
        config = ScaffoldConfig.from_dict({"step_delay_ms": 0, "colour": "red"})
        assert config.step_delay_ms == 0
        assert config.source_root == "src"


class TestLoadConfig:

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path) == ScaffoldConfig()

    def test_reads_file(self, tmp_path):
        path = get_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text(json.dumps({"source_root": "app", "step_delay_ms": 5}))

        config = load_config(tmp_path)

        assert config.source_root == "app"
        assert config.step_delay_ms == 5

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path, caplog):
        path = get_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text("{not json")

        assert load_config(tmp_path) == ScaffoldConfig()
        assert "invalid" in caplog.text

    def test_non_object_falls_back_to_defaults(self, tmp_path):
        path = get_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text("[1, 2]")

        assert load_config(tmp_path) == ScaffoldConfig()

    def test_defaults_to_cwd(self, workspace):
        save_config(ScaffoldConfig(source_root="lib"))
        assert (workspace / ".rncreate" / "config.json").exists()
        assert load_config().source_root == "lib"


class TestSaveConfig:

    def test_roundtrip(self, tmp_path):
        path = save_config(ScaffoldConfig(step_delay_ms=1), tmp_path)
        assert path == tmp_path / ".rncreate" / "config.json"
        assert load_config(tmp_path).step_delay_ms == 1


class TestInvalidConfig:

    @pytest.mark.parametrize("data", [
        {"step_delay_ms": "fast"},
        {"welcome_delay_ms": 1.5},
        {"step_delay_ms": True},
        {"source_root": None},
        {"source_root": 3},
    ])
    def test_from_dict_rejects_wrong_types(self, data):
        with pytest.raises(TypeError):
            ScaffoldConfig.from_dict(data)

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(TypeError):
            ScaffoldConfig.from_dict([1, 2])

    @pytest.mark.parametrize("data", [
        {"step_delay_ms": "fast"},
        {"source_root": None},
    ])
    def test_wrong_types_fall_back_to_defaults(self, tmp_path, caplog, data):
        path = get_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text(json.dumps(data))

        assert load_config(tmp_path) == ScaffoldConfig()
        assert "invalid" in caplog.text

    def test_undecodable_file_falls_back_to_defaults(self, tmp_path, caplog):
        path = get_config_path(tmp_path)
        path.parent.mkdir()
        path.write_bytes(b"\xff\xfe{")

        assert load_config(tmp_path) == ScaffoldConfig()
        assert "invalid" in caplog.text
