"""Configuration and logging helpers."""

from .config import load_config, configure, Config
from .logging import setup_logging, get_logger

__all__ = [
    "load_config", "configure", "Config",
    "setup_logging", "get_logger",
]
