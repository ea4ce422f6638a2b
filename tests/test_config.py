"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from orgs_transform.core.config import Config, OutputConfig, TransformConfig, load_config


class TestConfig:
    """Test suite for Config."""

    def test_defaults(self):
        config = Config()

        assert config.transform.transform_type == "text"
        assert config.transform.description is False
        assert config.output.indent_width == 3
        assert config.output.json_pretty is False

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        config = Config(
            transform=TransformConfig(transform_type="html", description=True),
            output=OutputConfig(indent_width=2),
        )

        config.to_yaml(path)

        assert Config.from_yaml(path) == config

    def test_missing_file_gives_defaults(self, tmp_path):
        assert Config.from_yaml(tmp_path / "absent.yaml") == Config()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.from_yaml(path) == Config()

    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            OutputConfig(indent_width=-1)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ORGS_TRANSFORM_FORMAT", "markdown")
        monkeypatch.setenv("ORGS_TRANSFORM_DESCRIPTION", "yes")

        config = Config.from_env()

        assert config.transform.transform_type == "markdown"
        assert config.transform.description is True


class TestLoadConfig:
    """Test suite for load_config."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("transform:\n  transform_type: json\n")

        assert load_config(path).transform.transform_type == "json"

    def test_default_location(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config.yaml").write_text("output:\n  indent_width: 4\n")

        assert load_config().output.indent_width == 4

    def test_falls_back_to_env(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ORGS_TRANSFORM_FORMAT", "html")
        monkeypatch.delenv("ORGS_TRANSFORM_DESCRIPTION", raising=False)

        assert load_config().transform.transform_type == "html"
