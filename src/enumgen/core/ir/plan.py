"""
Generation plan types.

A :class:`GenerationPlan` is the complete, renderer-ready description of
what to emit for one enum type. Renderers read ``artifacts`` and the option
records; they never look at raw annotations.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .config import FrozenEnumConfig
from .enum_spec import UnderlyingKind


class ArtifactKind(str, Enum):
    """Generated capabilities attachable to an enum type."""

    CONSTANTS = "constants"  # one named constant per value
    STRING = "string"  # value -> literal name
    NAME_TABLE = "name_table"  # lookup table backing STRING
    VALUE_TABLE = "value_table"  # name -> value lookup backing PARSE
    PARSE = "parse"
    IS_VALID = "is_valid"
    MUST_PARSE = "must_parse"
    MARSHAL_TEXT = "marshal_text"
    UNMARSHAL_TEXT = "unmarshal_text"
    APPEND_TEXT = "append_text"
    SQL_SCAN = "sql_scan"
    SQL_VALUE = "sql_value"
    SQL_NULL_INT = "sql_null_int"
    SQL_NULL_STR = "sql_null_str"
    FLAG = "flag"
    NAMES = "names"
    VALUES = "values"
    PTR = "ptr"


class WireKind(str, Enum):
    """Representation used on a serialization boundary."""

    STRING = "string"
    ORDINAL = "ordinal"


class EnumValue(BaseModel):
    """A single enum value with its generated identifier."""

    literal: str
    identifier: str
    ordinal: int

    model_config = ConfigDict(frozen=True)


class ParseOptions(BaseModel):
    """How the Parse artifact matches input against literals."""

    case_insensitive: bool = False
    lowercase_lookup: bool = False
    error_format: str = "{input} is not a valid {type_name}"

    model_config = ConfigDict(frozen=True)

    def error_message(self, value: str, type_name: str) -> str:
        return self.error_format.format(input=value, type_name=type_name)


class MarshalOptions(BaseModel):
    """Text/JSON adapter parameters. The wire value is always the literal."""

    wire_kind: WireKind = WireKind.STRING

    model_config = ConfigDict(frozen=True)


class SqlOptions(BaseModel):
    """Database adapter parameters."""

    value_kind: WireKind = WireKind.STRING
    scan_accepts: frozenset[WireKind] = frozenset({WireKind.STRING})

    model_config = ConfigDict(frozen=True)


class NullWrapper(BaseModel):
    """Nullable wrapper type used for SQL NULL round-tripping."""

    type_name: str
    backing: WireKind

    model_config = ConfigDict(frozen=True)


class GenerationPlan(BaseModel):
    """
    What to render for one enum type.

    Attributes:
        type_name: Enum type name
        underlying: Backing representation of the enum type
        resolved: Configuration after merging with global defaults
        values: Values in declaration order
        artifacts: Authoritative set of artifacts to render
        parse: Parse parameters, present when PARSE is planned
        marshal: Text adapter parameters, present when MARSHAL_TEXT is planned
        sql: Database adapter parameters, present when SQL_VALUE is planned
        null_wrappers: Nullable wrapper types to emit
        doc_comments: Emit doc comments on generated symbols
        ordinal_comments: Emit auto-numbering comments on the value table
    """

    type_name: str
    underlying: UnderlyingKind
    resolved: FrozenEnumConfig
    values: list[EnumValue]
    artifacts: frozenset[ArtifactKind]
    parse: ParseOptions | None = None
    marshal: MarshalOptions | None = None
    sql: SqlOptions | None = None
    null_wrappers: list[NullWrapper] = Field(default_factory=list)
    doc_comments: bool = True
    ordinal_comments: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def value_names(self) -> dict[str, str]:
        """Mapping literal -> generated identifier, in declaration order."""
        return {v.literal: v.identifier for v in self.values}

    def has(self, artifact: ArtifactKind) -> bool:
        """Check whether an artifact is planned."""
        return artifact in self.artifacts
