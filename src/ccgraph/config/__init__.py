"""Configuration management for ccgraph."""

from ccgraph.config.paths import (
    config_dir,
    config_file,
)
from ccgraph.config.settings import (
    ChartConfig,
    Config,
    InputConfig,
    ThresholdConfig,
    get_config,
    load_config,
    reload_config,
    save_config,
    validate_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    # settings
    "Config",
    "ChartConfig",
    "ThresholdConfig",
    "InputConfig",
    "get_config",
    "load_config",
    "reload_config",
    "save_config",
    "validate_config",
]
