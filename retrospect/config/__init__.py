from .loader import load_config
from .types import ConfigError, RetrospectConfig, Settings, UnsupportedConfigFormatError

__all__ = [
    "load_config",
    "RetrospectConfig",
    "Settings",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
