"""Config package facade."""

from config.loader import config_from_dict, load_config
from config.models import Config, LogConfig

__all__ = [
    "Config",
    "LogConfig",
    "config_from_dict",
    "load_config",
]
