# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Style guide configuration: defaults, loading, validation and storage.
"""

from styleguide.config.defaults import DEFAULT_CONFIG
from styleguide.config.loader import (
    ConfigError,
    export_config,
    import_config,
    load_config,
    merge_config_data,
    validate_config,
)
from styleguide.config.store import ConfigStore

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigStore",
    "load_config",
    "merge_config_data",
    "validate_config",
    "export_config",
    "import_config",
]
