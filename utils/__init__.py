"""
Missing Data Simulator Utils Module - Initialization
====================================================

Utility functions and helpers for the Missing Data Simulator.

Submodules:
-----------
1. config.py   - Settings parsing, YAML loading and validation
2. logging.py  - Logging setup and diagnostics

Functions:
----------
1. Configuration Management
   - DropConfig.from_settings() - Build config from host settings
   - parse_connection_string()  - Parse "key=value; ..." strings
   - load_config()              - Load YAML config
   - load_drop_config()         - Load DropConfig from YAML
   - merge_configs()            - Override defaults

2. Logging & Diagnostics
   - setup_logging()      - Configure logging
   - get_logger()         - Get module logger
   - log_statistics()     - Log a statistics summary

Usage:
------
from utils import load_drop_config, setup_logging, get_logger

setup_logging("logs/", level="INFO")
config = load_drop_config("config/drop.yaml")

adapter = MissingDataAdapter(config)
adapter.initialize()

Version: 1.0.0
Author: Missing Data Sim Team
Date: October 19, 2026
"""

from .config import (
    DropConfig,
    ConfigError,
    parse_connection_string,
    parse_channel_list,
    parse_seed,
    validate_probability,
    load_config,
    load_drop_config,
    merge_configs,
)

from .logging import (
    setup_logging,
    get_logger,
    log_statistics,
    format_statistics,
)

__all__ = [
    # Config
    "DropConfig",
    "ConfigError",
    "parse_connection_string",
    "parse_channel_list",
    "parse_seed",
    "validate_probability",
    "load_config",
    "load_drop_config",
    "merge_configs",
    # Logging
    "setup_logging",
    "get_logger",
    "log_statistics",
    "format_statistics",
]

__version__ = "1.0.0"
__author__ = "Missing Data Sim Team"
__date__ = "2026-10-19"
