"""
Config package for hr_browser.

Responsible for:
- config models (GlobalConfig, ClickSourceConfig)
- config I/O helpers (load_global_config / load_configured_dataset)
"""

from .model import ClickSourceConfig, GlobalConfig
from .loader import load_configured_dataset, load_global_config, parse_global_config

__all__ = [
    "ClickSourceConfig",
    "GlobalConfig",
    "load_configured_dataset",
    "load_global_config",
    "parse_global_config",
]
