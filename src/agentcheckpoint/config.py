"""
Configuration for the checkpoint plugin.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from pydantic import BaseModel


class CheckpointConfig(BaseModel):
    """Checkpoint settings.

    Files may hold these keys at the top level or nested under a
    ``checkpoint:`` section.
    """
    default_provider: str
    providers: dict[str, dict[str, Any] | None] = {}
    auto_checkpoint: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckpointConfig":
        """Build a config from a mapping, unwrapping a ``checkpoint`` section."""
        if "checkpoint" in data and isinstance(data["checkpoint"], dict):
            data = data["checkpoint"]
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "CheckpointConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "CheckpointConfig":
        """Load configuration from file (YAML or JSON)."""
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        elif path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
            return cls.from_dict(data)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def load_config(path: str | Path = "checkpoint.yaml") -> CheckpointConfig:
    """
    Load checkpoint configuration from file.

    Args:
        path: Path to config file

    Returns:
        CheckpointConfig instance

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Checkpoint config not found: {path}")

    return CheckpointConfig.from_file(path)
