"""
Artifact planner.

Turns a resolved configuration into the explicit set of artifacts the
renderer must emit for one enum type, together with the parameters that
shape each artifact.
"""

from __future__ import annotations

import logging

from .errors import ArtifactConflictError, DirectiveContext, EnumGenError
from .ir import (
    ArtifactKind,
    EnumConfig,
    EnumSpec,
    EnumValue,
    FrozenEnumConfig,
    GenerationPlan,
    MarshalOptions,
    NullWrapper,
    ParseOptions,
    SqlOptions,
    UnderlyingKind,
    WireKind,
)
from .naming import derive_value_names

logger = logging.getLogger(__name__)

# Options whose artifacts call Parse (unmarshal, Scan, flag Set, MustParse)
_NEEDS_PARSE: dict[str, str] = {
    "marshal": "@marshal",
    "sql": "@sql",
    "sql_null_int": "@sqlnullint",
    "sql_null_str": "@sqlnullstr",
    "flag": "@flag",
    "must_parse": "@mustparse",
}

_ALWAYS = (ArtifactKind.CONSTANTS, ArtifactKind.STRING, ArtifactKind.NAME_TABLE)


def check_conflicts(spec: EnumSpec, resolved: EnumConfig) -> None:
    """
    Reject option combinations that cannot be generated.

    Raises:
        ArtifactConflictError: On the first conflict found
    """
    context = DirectiveContext(type_name=spec.type_name)

    if resolved.is_enabled("force_lower") and resolved.is_enabled("force_upper"):
        raise ArtifactConflictError("@forcelower and @forceupper cannot be combined", context)

    if resolved.is_enabled("no_parse"):
        requested = [d for name, d in _NEEDS_PARSE.items() if resolved.is_enabled(name)]
        if requested:
            raise ArtifactConflictError(
                f"@noparse conflicts with {', '.join(requested)}, which require Parse",
                context,
            )

    if spec.underlying == UnderlyingKind.STRING:
        if resolved.is_enabled("sql_int") and _wants_sql(resolved):
            raise ArtifactConflictError(
                "@sqlint requires an integer-backed enum; string values have no ordinal",
                context,
            )
        if resolved.is_enabled("sql_null_int"):
            raise ArtifactConflictError(
                "@sqlnullint requires an integer-backed enum; use @sqlnullstr",
                context,
            )


def _wants_sql(resolved: EnumConfig) -> bool:
    return (
        resolved.is_enabled("sql")
        or resolved.is_enabled("sql_null_int")
        or resolved.is_enabled("sql_null_str")
    )


def _plan_sql(spec: EnumSpec, resolved: EnumConfig) -> SqlOptions:
    value_kind = WireKind.ORDINAL if resolved.is_enabled("sql_int") else WireKind.STRING
    if spec.underlying == UnderlyingKind.INT:
        accepts = frozenset({WireKind.STRING, WireKind.ORDINAL})
    else:
        accepts = frozenset({WireKind.STRING})
    return SqlOptions(value_kind=value_kind, scan_accepts=accepts)


def _plan_null_wrappers(spec: EnumSpec, resolved: EnumConfig) -> list[NullWrapper]:
    wrappers = []
    if resolved.is_enabled("sql_null_int"):
        wrappers.append(NullWrapper(type_name=f"Null{spec.type_name}", backing=WireKind.ORDINAL))
    if resolved.is_enabled("sql_null_str"):
        wrappers.append(
            NullWrapper(type_name=f"Null{spec.type_name}Str", backing=WireKind.STRING)
        )
    return wrappers


def plan(spec: EnumSpec, resolved: EnumConfig) -> GenerationPlan:
    """
    Decide what to generate for one enum type.

    Args:
        spec: Enum declaration
        resolved: Configuration already merged with global defaults

    Returns:
        A fresh GenerationPlan

    Raises:
        ArtifactConflictError: If the options cannot be satisfied together
        IdentifierCollisionError: If two values derive the same identifier
    """
    check_conflicts(spec, resolved)

    try:
        value_names = derive_value_names(spec.type_name, spec.values, resolved)
    except EnumGenError as e:
        raise e.with_context(DirectiveContext(type_name=spec.type_name)) from None

    values = [
        EnumValue(literal=literal, identifier=identifier, ordinal=ordinal)
        for ordinal, (literal, identifier) in enumerate(value_names.items())
    ]

    artifacts: set[ArtifactKind] = set(_ALWAYS)
    parse_options: ParseOptions | None = None
    marshal_options: MarshalOptions | None = None
    sql_options: SqlOptions | None = None

    if not resolved.is_enabled("no_parse"):
        artifacts.update({ArtifactKind.PARSE, ArtifactKind.IS_VALID, ArtifactKind.VALUE_TABLE})
        parse_options = ParseOptions(
            case_insensitive=resolved.is_enabled("case_insensitive"),
            lowercase_lookup=resolved.is_enabled("lowercase_lookup"),
        )
        if resolved.is_enabled("must_parse"):
            artifacts.add(ArtifactKind.MUST_PARSE)

    if resolved.is_enabled("marshal"):
        artifacts.update(
            {ArtifactKind.MARSHAL_TEXT, ArtifactKind.UNMARSHAL_TEXT, ArtifactKind.APPEND_TEXT}
        )
        marshal_options = MarshalOptions(wire_kind=WireKind.STRING)

    if _wants_sql(resolved):
        artifacts.update({ArtifactKind.SQL_SCAN, ArtifactKind.SQL_VALUE})
        sql_options = _plan_sql(spec, resolved)

    null_wrappers = _plan_null_wrappers(spec, resolved)
    for wrapper in null_wrappers:
        artifacts.add(
            ArtifactKind.SQL_NULL_INT
            if wrapper.backing == WireKind.ORDINAL
            else ArtifactKind.SQL_NULL_STR
        )

    for option, artifact in (
        ("flag", ArtifactKind.FLAG),
        ("names", ArtifactKind.NAMES),
        ("values", ArtifactKind.VALUES),
        ("ptr", ArtifactKind.PTR),
    ):
        if resolved.is_enabled(option):
            artifacts.add(artifact)

    generation_plan = GenerationPlan(
        type_name=spec.type_name,
        underlying=spec.underlying,
        resolved=FrozenEnumConfig.snapshot(resolved),
        values=values,
        artifacts=frozenset(artifacts),
        parse=parse_options,
        marshal=marshal_options,
        sql=sql_options,
        null_wrappers=null_wrappers,
        doc_comments=not resolved.is_enabled("no_comments"),
        ordinal_comments=not resolved.is_enabled("no_iota"),
    )
    logger.debug(
        "Planned %s: %s",
        spec.type_name,
        ", ".join(sorted(a.value for a in generation_plan.artifacts)),
    )
    return generation_plan
