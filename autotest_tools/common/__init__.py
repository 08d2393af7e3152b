"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration management and logging setup for the UI suite.

Exports:
    - get_config / set_config: Dot-path configuration access
    - get_bool / get_float: Typed access for values that may come from env vars
    - init_logger / get_logger: Loguru setup with standard settings

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

from .global_config import (
    get_bool,
    get_config,
    get_float,
    get_logger,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

__all__ = [
    "get_bool",
    "get_config",
    "get_float",
    "get_logger",
    "init_logger",
    "reload_config",
    "reset_config",
    "set_config",
]
