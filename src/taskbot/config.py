"""Configuration management for taskbot."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .messages import BORDER, FAREWELL, GREETING
from .task_list import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _same_type(value: Any, default: Any) -> bool:
    # bool is a subclass of int, so compare exact types.
    return type(value) is type(default)


@dataclass
class ConfigModel:
    """Global configuration model for taskbot."""

    # Task list
    max_tasks: int = DEFAULT_CAPACITY
    case_sensitive_search: bool = True

    # Presentation
    border: str = BORDER
    indent: str = "\t"
    greeting: str = GREETING
    farewell: str = FAREWELL
    exit_command: str = "bye"

    # Diagnostics
    log_level: str = "WARNING"

    # File paths
    data_dir: str = "~/.taskbot"

    def __post_init__(self):
        """Normalize values loaded from YAML or passed by callers.

        A value of the wrong type is logged and replaced by the field's
        default.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not _same_type(value, f.default):
                logger.warning(f"Invalid {f.name} {value!r}, using {f.default!r}")
                setattr(self, f.name, f.default)

        self.data_dir = os.path.expanduser(self.data_dir)

        if self.max_tasks < 1:
            logger.warning(f"Invalid max_tasks {self.max_tasks!r}, using {DEFAULT_CAPACITY}")
            self.max_tasks = DEFAULT_CAPACITY

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            logger.warning(f"Unknown log_level {self.log_level!r}, using WARNING")
            self.log_level = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(self.to_dict(), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{k: v for k, v in data.items() if k in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for taskbot."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults."""
        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                config = ConfigModel.from_yaml(config_path.read_text(encoding="utf-8"))
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
                logger.warning("Using default configuration.")
                config = ConfigModel()
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load()


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
