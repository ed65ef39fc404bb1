from __future__ import annotations

"""Public configuration API for VipFinder."""

from VipFinder.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from VipFinder.config.data import DataConfig
from VipFinder.config.output import OutputConfig
from VipFinder.config.runtime import RuntimeConfig
from VipFinder.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "DataConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
