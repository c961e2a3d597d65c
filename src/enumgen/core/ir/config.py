"""
Per-enum configuration model.

Every option is held in a :class:`ConfigSlot` that records whether it was
explicitly set, so "unset" and "explicitly false" stay distinguishable
through the global/local merge.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors import UnknownDirectiveError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigSlot(BaseModel, Generic[T]):
    """
    A configuration value together with its presence flag.

    Examples:
        - never set: ConfigSlot[bool]()
        - @marshal:false: ConfigSlot[bool](value=False, is_set=True)
    """

    value: T | None = None
    is_set: bool = False

    model_config = ConfigDict(frozen=True)

    def get(self, default: T) -> T:
        """Return the value if set, otherwise the caller-supplied default."""
        if self.is_set and self.value is not None:
            return self.value
        return default


# Directive key -> EnumConfig slot name
BOOL_DIRECTIVES: dict[str, str] = {
    "noprefix": "no_prefix",
    "noiota": "no_iota",
    "lower": "lowercase_lookup",
    "nocase": "case_insensitive",
    "marshal": "marshal",
    "sql": "sql",
    "sqlint": "sql_int",
    "flag": "flag",
    "names": "names",
    "values": "values",
    "nocamel": "leave_snake_case",
    "ptr": "ptr",
    "sqlnullint": "sql_null_int",
    "sqlnullstr": "sql_null_str",
    "mustparse": "must_parse",
    "forcelower": "force_lower",
    "forceupper": "force_upper",
    "nocomments": "no_comments",
    "noparse": "no_parse",
}

STRING_DIRECTIVES: dict[str, str] = {
    "prefix": "prefix",
}


def _bool_slot() -> ConfigSlot[bool]:
    return ConfigSlot[bool]()


def _str_slot() -> ConfigSlot[str]:
    return ConfigSlot[str]()


class EnumConfig(BaseModel):
    """
    Configuration options for a single enum type.

    The same model holds both the global defaults and the per-type options
    parsed from annotations; :func:`enumgen.core.resolver.resolve` merges
    the two.
    """

    # Bool options
    no_prefix: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    no_iota: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    lowercase_lookup: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    case_insensitive: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    marshal: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    sql: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    sql_int: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    flag: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    names: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    values: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    leave_snake_case: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    ptr: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    sql_null_int: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    sql_null_str: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    must_parse: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    force_lower: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    force_upper: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    no_comments: ConfigSlot[bool] = Field(default_factory=_bool_slot)
    no_parse: ConfigSlot[bool] = Field(default_factory=_bool_slot)

    # String options
    prefix: ConfigSlot[str] = Field(default_factory=_str_slot)

    def set_bool_option(self, key: str, value: bool) -> None:
        """
        Set a boolean option by directive key.

        Raises:
            UnknownDirectiveError: If ``key`` is not a boolean directive
        """
        field_name = BOOL_DIRECTIVES.get(key)
        if field_name is None:
            raise UnknownDirectiveError(key)

        setattr(self, field_name, ConfigSlot[bool](value=value, is_set=True))
        # nocase forces lower; disabling nocase leaves lower alone
        if field_name == "case_insensitive" and value:
            self.lowercase_lookup = ConfigSlot[bool](value=True, is_set=True)
        logger.debug("Set %s=%s", field_name, value)

    def set_string_option(self, key: str, value: str) -> None:
        """
        Set a string option by directive key.

        Raises:
            UnknownDirectiveError: If ``key`` is not a string directive
        """
        field_name = STRING_DIRECTIVES.get(key)
        if field_name is None:
            raise UnknownDirectiveError(key, value)

        setattr(self, field_name, ConfigSlot[str](value=value, is_set=True))
        logger.debug("Set %s=%r", field_name, value)

    def slot(self, field_name: str) -> ConfigSlot[Any]:
        """Return the slot stored under ``field_name``."""
        if field_name not in type(self).model_fields:
            raise KeyError(field_name)
        slot: ConfigSlot[Any] = getattr(self, field_name)
        return slot

    def is_enabled(self, field_name: str, default: bool = False) -> bool:
        """Read a boolean slot, falling back to ``default`` when unset."""
        return bool(self.slot(field_name).get(default))

    def get_string(self, field_name: str, default: str = "") -> str:
        """Read a string slot, falling back to ``default`` when unset."""
        return str(self.slot(field_name).get(default))

    def explicit_options(self) -> dict[str, Any]:
        """Return ``{slot name: value}`` for every explicitly set slot."""
        return {
            name: slot.value
            for name in slot_names()
            if (slot := self.slot(name)).is_set
        }


def slot_names() -> list[str]:
    """All slot names in declaration order."""
    return list(EnumConfig.model_fields)


class FrozenEnumConfig(EnumConfig):
    """
    Read-only snapshot of a resolved configuration, as carried by a plan.

    Assignments and the option setters raise ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def snapshot(cls, config: EnumConfig) -> FrozenEnumConfig:
        return cls(**{name: config.slot(name) for name in slot_names()})
