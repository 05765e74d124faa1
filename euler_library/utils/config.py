"""Configuration loading and management."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
import yaml

from .logging import setup_logging


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    console: bool = True
    json_file: bool = False


@dataclass
class PathsConfig:
    logs: str = "./logs"


@dataclass
class Config:
    """Main configuration container."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    # Root path for resolving relative paths
    root_path: Path = field(default_factory=lambda: Path.cwd())

    def resolve_path(self, path: str) -> Path:
        """Resolve a relative path to absolute."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root_path / p

    @property
    def logs_path(self) -> Path:
        return self.resolve_path(self.paths.logs)


def _dict_to_dataclass(cls, data: Dict[str, Any]):
    """Convert a dictionary to a dataclass instance, ignoring unknown keys."""
    if data is None:
        return cls()
    known = cls.__dataclass_fields__
    return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, looks for configs/config.yaml

    Returns:
        Config object with all settings
    """
    if config_path is None:
        candidates = [
            Path.cwd() / "configs" / "config.yaml",
            Path.cwd() / "config.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break
        else:
            return Config()

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        data = yaml.safe_load(f) or {}

    root = config_file.parent
    if root.name == "configs":
        root = root.parent
    config = Config(root_path=root)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(LoggingConfig, data['logging'])
    if 'paths' in data:
        config.paths = _dict_to_dataclass(PathsConfig, data['paths'])

    return config


def configure(config: Optional[Config] = None):
    """Apply the logging section of a config.

    Args:
        config: Config to apply, loaded with ``load_config`` when None

    Returns:
        The configured package logger
    """
    if config is None:
        config = load_config()
    return setup_logging(
        log_dir=config.logs_path,
        level=config.logging.level,
        console=config.logging.console,
        json_file=config.logging.json_file,
    )
