"""
Naming transformer.

Derives the generated constant name for each enum literal::

    <prefix><TypeName><CamelLiteral>     default
    <prefix><TypeName><snake_literal>    with @nocamel
    <CamelLiteral>                       with @noprefix

``@forcelower`` / ``@forceupper`` change the case of the literal-derived
part only; the prefix and type name are left as declared.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ArtifactConflictError, IdentifierCollisionError, InvalidIdentifierError
from .ir import EnumConfig
from .strings import to_camel, to_snake_identifier


def _check_forced_case(config: EnumConfig) -> None:
    if config.is_enabled("force_lower") and config.is_enabled("force_upper"):
        raise ArtifactConflictError("@forcelower and @forceupper cannot be combined")


def derive_identifier(type_name: str, literal: str, config: EnumConfig) -> str:
    """
    Derive the generated identifier for one literal.

    Args:
        type_name: Enum type name
        literal: Declared value name
        config: Resolved configuration

    Returns:
        Generated identifier

    Raises:
        ArtifactConflictError: If both forced-case options are enabled
        InvalidIdentifierError: If the literal yields no usable name
    """
    _check_forced_case(config)

    if config.is_enabled("leave_snake_case"):
        suffix = to_snake_identifier(literal)
    else:
        suffix = to_camel(literal)

    if config.is_enabled("force_lower"):
        suffix = suffix.lower()
    elif config.is_enabled("force_upper"):
        suffix = suffix.upper()

    if config.is_enabled("no_prefix"):
        identifier = suffix
    else:
        identifier = config.get_string("prefix", "") + type_name + suffix

    if identifier[:1].isdigit():
        identifier = "_" + identifier

    # The literal must contribute a name of its own
    if not suffix.strip("_") or not identifier.isidentifier():
        raise InvalidIdentifierError(identifier, literal)
    return identifier


def derive_value_names(
    type_name: str,
    values: Sequence[str],
    config: EnumConfig,
) -> dict[str, str]:
    """
    Derive identifiers for all literals of one enum.

    Returns:
        Mapping literal -> identifier in declaration order

    Raises:
        IdentifierCollisionError: If two literals (including duplicates)
            derive the same identifier
    """
    names: dict[str, str] = {}
    owners: dict[str, str] = {}
    for literal in values:
        identifier = derive_identifier(type_name, literal, config)
        if identifier in owners:
            raise IdentifierCollisionError(identifier, (owners[identifier], literal))
        owners[identifier] = literal
        names[literal] = identifier
    return names
