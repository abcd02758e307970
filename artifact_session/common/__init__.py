"""Common utilities for artifact-session."""

from .logger import setup_logger, get_logger
from .config import load_config
from .settings import Settings, get_settings

__all__ = [
    "get_logger",
    "get_settings",
    "load_config",
    "setup_logger",
    "Settings",
]
