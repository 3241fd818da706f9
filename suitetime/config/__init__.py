from .loader import load_config
from .types import AggregatorConfig, ConfigError, UnsupportedConfigFormatError

__all__ = ["load_config", "AggregatorConfig", "ConfigError", "UnsupportedConfigFormatError"]
