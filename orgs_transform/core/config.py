"""Configuration management with strict typing and validation."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class TransformConfig(BaseModel):
    """Transform selection defaults."""

    transform_type: str = "text"
    description: bool = False  # Include descriptions / urls where available


class OutputConfig(BaseModel):
    """Rendering layout settings."""

    indent_width: int = Field(3, ge=0)
    json_pretty: bool = False
    json_indent: int = Field(2, gt=0)


class Config(BaseModel):
    """Root configuration."""

    transform: TransformConfig = Field(default_factory=TransformConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration with environment variable overrides."""
        import os

        config = cls()

        if transform_type := os.getenv("ORGS_TRANSFORM_FORMAT"):
            config.transform.transform_type = transform_type
        if description := os.getenv("ORGS_TRANSFORM_DESCRIPTION"):
            config.transform.description = description.strip().lower() in ("1", "true", "yes", "on")

        return config

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from file or defaults."""
    if path:
        return Config.from_yaml(path)

    # Check default locations
    default_paths = [
        Path("config.yaml"),
        Path("config.yml"),
        Path(".orgs_transform/config.yaml"),
    ]

    for p in default_paths:
        if p.exists():
            return Config.from_yaml(p)

    return Config.from_env()
