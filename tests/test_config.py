"""Tests for checkpoint configuration."""

import json

import pytest
from pydantic import ValidationError

from agentcheckpoint import CheckpointConfig, load_config


class TestCheckpointConfig:

    def test_defaults(self):
        config = CheckpointConfig(default_provider="memory")
        assert config.providers == {}
        assert config.auto_checkpoint is True

    def test_default_provider_required(self):
        with pytest.raises(ValidationError):
            CheckpointConfig()

    def test_from_dict_unwraps_section(self):
        config = CheckpointConfig.from_dict({
            "checkpoint": {
                "default_provider": "sqlite",
                "providers": {"sqlite": {"path": "cp.db"}},
            },
            "other": {"ignored": True},
        })

        assert config.default_provider == "sqlite"
        assert config.providers["sqlite"] == {"path": "cp.db"}

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "checkpoint.yaml"
        path.write_text(
            "checkpoint:\n"
            "  default_provider: memory\n"
            "  auto_checkpoint: false\n"
            "  providers:\n"
            "    memory:\n"
            "      type: memory\n"
        )

        config = load_config(path)

        assert config.default_provider == "memory"
        assert config.auto_checkpoint is False
        assert config.providers == {"memory": {"type": "memory"}}

    def test_from_json(self, tmp_path):
        path = tmp_path / "checkpoint.json"
        path.write_text(json.dumps({"default_provider": "memory"}))

        assert CheckpointConfig.from_file(path).default_provider == "memory"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "checkpoint.toml"
        path.write_text("")

        with pytest.raises(ValueError, match="Unsupported config file format"):
            CheckpointConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_provider_without_options(self, tmp_path):
        """A provider listed with no options loads as an empty entry."""
        path = tmp_path / "checkpoint.yaml"
        path.write_text(
            "default_provider: memory\n"
            "providers:\n"
            "  memory:\n"
        )

        config = load_config(path)

        assert config.providers == {"memory": None}
