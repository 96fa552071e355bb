"""
mindsheet.config - Configuration loading and defaults
"""

from mindsheet.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG
from mindsheet.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)
from mindsheet.config.settings import MindmapConfig, ShapeDefaults, TextDefaults

__all__ = [
    "load_config",
    "get_config",
    "find_config_file",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "DEFAULT_CONFIG",
    "CONFIG_FILE_NAME",
    "MindmapConfig",
    "ShapeDefaults",
    "TextDefaults",
]
