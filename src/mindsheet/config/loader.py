"""
mindsheet.config.loader - Locate, parse and merge configuration files.

Configuration is read from ``.mindsheet.toml`` with tomlkit, deep merged
over DEFAULT_CONFIG, then overridden from ``MINDSHEET_*`` environment
variables.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Iterator, Mapping

import tomlkit
from tomlkit.exceptions import TOMLKitError

from mindsheet.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG, ENV_PREFIX
from mindsheet.errors import ConfigError

logger = logging.getLogger(__name__)


def parse_toml_document(text: str) -> tomlkit.TOMLDocument:
    """Parse TOML text, raising ConfigError on malformed input."""
    try:
        return tomlkit.parse(text)
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def parse_toml(text: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return parse_toml_document(text).unwrap()


def find_config_file(start: Path) -> Path | None:
    """Search ``start`` and its parents for a configuration file.

    Args:
        start: Directory (or file) to begin the search from.

    Returns:
        Path to the first ``.mindsheet.toml`` found, or None.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep merge ``override`` into a copy of ``base``.

    Nested tables are merged key by key; any other value in ``override``
    replaces the one in ``base`` (lists are replaced, not concatenated).
    """
    result = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(raw: str) -> Any:
    """Convert an environment string into a typed value.

    JSON arrays and objects are decoded, ``true``/``false`` become booleans
    and integer literals become ints. Anything else, including malformed
    JSON, is returned unchanged.
    """
    stripped = raw.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        return raw


def _leaf_paths(mapping: Mapping[str, Any], prefix: tuple[str, ...] = ()) -> Iterator[tuple[str, ...]]:
    for key, value in mapping.items():
        path = (*prefix, key)
        if isinstance(value, Mapping):
            yield from _leaf_paths(value, path)
        else:
            yield path


def _env_name(path: tuple[str, ...]) -> str:
    return ENV_PREFIX + "_".join(path).upper()


def _default_value(path: tuple[str, ...]) -> Any:
    value: Any = DEFAULT_CONFIG
    for key in path:
        value = value[key]
    return value


def _apply_env_overrides(
    config: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Apply ``MINDSHEET_<SECTION>_<KEY>`` overrides in place.

    Only keys known from DEFAULT_CONFIG can be overridden, e.g.
    ``MINDSHEET_TOPIC_DEFAULT_SHAPE_FILL_COLOR`` sets
    ``config["topic"]["default_shape"]["fill_color"]``.

    Keys whose default is a string take the raw value, so
    ``MINDSHEET_ROOT_TOPIC_NAME=2024`` stays the text "2024". Other keys go
    through ``_try_parse_env_value``.

    Returns:
        The same config dict, for chaining.
    """
    env = os.environ if environ is None else environ
    for path in _leaf_paths(DEFAULT_CONFIG):
        name = _env_name(path)
        if name not in env:
            continue
        table = config
        for key in path[:-1]:
            table = table.setdefault(key, {})
        raw = env[name]
        table[path[-1]] = raw if isinstance(_default_value(path), str) else _try_parse_env_value(raw)
        logger.debug("Config %s overridden from %s", ".".join(path), name)
    return config


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Load a configuration file merged over the defaults.

    Args:
        path: Path to a ``.mindsheet.toml`` file.
        environ: Environment mapping for overrides (defaults to os.environ).

    Returns:
        The merged configuration mapping.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ConfigError: If the file is not valid TOML.
    """
    text = Path(path).read_text(encoding="utf-8")
    user = parse_toml(text)
    config = merge_configs(DEFAULT_CONFIG, user)
    logger.info("Loaded configuration from %s", path)
    return _apply_env_overrides(config, environ)


def get_config(start: Path | None = None, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Find and load the nearest configuration, falling back to defaults."""
    config_path = find_config_file(start if start is not None else Path.cwd())
    if config_path is None:
        return _apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG), environ)
    return load_config(config_path, environ)
