"""Configuration management for graphqlviz using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".graphqlviz.json"


class RankDir(str, Enum):
    """Graphviz rank directions."""
    LR = "LR"
    TB = "TB"
    RL = "RL"
    BT = "BT"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class LabelConfig(BaseModel):
    """Edge label verbosity."""
    expand_args: bool = Field(alias="expandArgs", default=False)
    expand_arg_types: bool = Field(alias="expandArgTypes", default=False)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FetchConfig(BaseModel):
    """Introspection fetch configuration section."""
    timeout: float = 30.0
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout must be > 0")
        return v

    model_config = ConfigDict(populate_by_name=True)


class RenderConfig(BaseModel):
    """Diagram layout and styling section."""
    rankdir: RankDir = RankDir.LR
    header_color: str = Field(alias="headerColor", default="#E535AB")
    header_font_color: str = Field(alias="headerFontColor", default="white")

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True, validate_default=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class GraphqlvizConfig(BaseModel):
    """Complete graphqlviz configuration model."""
    labels: LabelConfig = Field(default_factory=LabelConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def with_label_overrides(self, expand_args: bool | None = None,
                             expand_arg_types: bool | None = None) -> "GraphqlvizConfig":
        """Return a copy with command-line label options applied."""
        updates = {}
        if expand_args is not None:
            updates["expand_args"] = expand_args
        if expand_arg_types is not None:
            updates["expand_arg_types"] = expand_arg_types
        if not updates:
            return self
        return self.model_copy(update={"labels": self.labels.model_copy(update=updates)})


def load_config(config_path: str | Path | None = None) -> GraphqlvizConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .graphqlviz.json

    Returns:
        GraphqlvizConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid or an explicit path does not exist
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ValueError(f"Config file not found: {config_path}")

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return GraphqlvizConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .graphqlviz.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> GraphqlvizConfig:
    """Create default configuration: collapsed arguments, left-to-right layout."""
    return GraphqlvizConfig()
