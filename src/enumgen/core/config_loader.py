"""
Global default configuration loading.

Reads the ``[defaults]`` table from ``enumgen.toml`` or the
``[tool.enumgen.defaults]`` table from ``pyproject.toml``::

    [defaults]
    marshal = true
    nocase = true
    prefix = "My"

Keys may be directive keys (``noprefix``) or slot names (``no_prefix``).
Values go through the same setters as annotations, so ``nocase = true``
also enables the lowercase lookup table.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import ConfigurationError, UnknownDirectiveError
from .ir import BOOL_DIRECTIVES, STRING_DIRECTIVES, EnumConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "enumgen.toml"

# Slot name -> directive key
_SLOT_TO_DIRECTIVE = {
    slot: key for key, slot in {**BOOL_DIRECTIVES, **STRING_DIRECTIVES}.items()
}


def _directive_key(key: str) -> str:
    return _SLOT_TO_DIRECTIVE.get(key, key)


def config_from_mapping(options: Mapping[str, Any], source: str = "<defaults>") -> EnumConfig:
    """
    Build a configuration from a ``{key: value}`` mapping.

    Raises:
        ConfigurationError: On unknown keys or values that are neither
            bool nor str
    """
    config = EnumConfig()
    for key, value in options.items():
        directive = _directive_key(key)
        try:
            if isinstance(value, bool):
                config.set_bool_option(directive, value)
            elif isinstance(value, str):
                config.set_string_option(directive, value)
            else:
                raise ConfigurationError(
                    f"{source}: default {key!r} must be a boolean or a string, "
                    f"got {type(value).__name__}"
                )
        except UnknownDirectiveError as e:
            raise ConfigurationError(f"{source}: invalid default {key!r}: {e.message}") from e
    return config


def load_global_config(toml_path: Path) -> EnumConfig:
    """
    Load global defaults from a TOML file.

    Args:
        toml_path: Path to enumgen.toml or pyproject.toml

    Returns:
        EnumConfig with the file's defaults; all slots unset if the file or
        table is missing
    """
    if not toml_path.exists():
        logger.debug("No defaults file at %s", toml_path)
        return EnumConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"{toml_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"{toml_path}: cannot read defaults file: {e}") from e

    if toml_path.name == "pyproject.toml":
        defaults = data.get("tool", {}).get("enumgen", {}).get("defaults", {})
    else:
        defaults = data.get("defaults", {})

    if not isinstance(defaults, dict):
        raise ConfigurationError(f"{toml_path}: defaults must be a table")

    config = config_from_mapping(defaults, source=str(toml_path))
    logger.info("Loaded %d default(s) from %s", len(config.explicit_options()), toml_path)
    return config


def find_config_file(project_dir: Path) -> Path | None:
    """
    Locate the defaults file for a project.

    ``enumgen.toml`` takes priority over a ``pyproject.toml`` that has a
    ``[tool.enumgen]`` table.
    """
    candidate = project_dir / CONFIG_FILENAME
    if candidate.exists():
        return candidate

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError):
            logger.warning("Ignoring unreadable %s", pyproject)
            return None
        if "enumgen" in data.get("tool", {}):
            return pyproject
    return None
