"""Configuration management for dsforest."""

from pathlib import Path
import json

from pydantic import BaseModel, Field


class ForestConfig(BaseModel):
    """Configuration for building a forest from an edge list."""

    source_column: str = Field(default="source", description="Column holding the first endpoint")
    target_column: str = Field(default="target", description="Column holding the second endpoint")
    size: int | None = Field(
        default=None, ge=0, description="Number of elements (None: max index + 1)"
    )


class ReportConfig(BaseModel):
    """Configuration for component reports."""

    top: int = Field(default=10, ge=1, description="Rows shown in the components table")
    verbose: bool = Field(default=False, description="Enable verbose logging")


class Config(BaseModel):
    """Main configuration for the dsforest tool."""

    forest: ForestConfig = Field(default_factory=ForestConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are searched and the defaults used when none exists.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "dsforest" / "config.json",
            Path.cwd() / "dsforest.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
