"""
Configuration resolver.

Merges per-type configuration over global defaults. For each slot the
per-type value wins when set, otherwise the global value when set,
otherwise the slot stays unset and the planner falls back to its built-in
default. Neither input is mutated.
"""

from __future__ import annotations

import logging
from typing import Any

from .ir import ConfigSlot, EnumConfig, slot_names

logger = logging.getLogger(__name__)


def resolve(global_config: EnumConfig, local_config: EnumConfig) -> EnumConfig:
    """
    Merge ``local_config`` over ``global_config``.

    Args:
        global_config: Defaults shared by every enum in the run
        local_config: Options parsed from one type's annotations

    Returns:
        A new EnumConfig
    """
    merged: dict[str, ConfigSlot[Any]] = {}
    for name in slot_names():
        local_slot = local_config.slot(name)
        merged[name] = local_slot if local_slot.is_set else global_config.slot(name)

    resolved = EnumConfig(**merged)

    # Standing side effect: case-insensitive lookup needs the lowercase table
    if resolved.is_enabled("case_insensitive") and not resolved.is_enabled("lowercase_lookup"):
        resolved.lowercase_lookup = ConfigSlot[bool](value=True, is_set=True)

    logger.debug("Resolved options: %s", resolved.explicit_options())
    return resolved
