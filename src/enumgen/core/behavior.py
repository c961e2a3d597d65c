"""
Reference behavior of planned artifacts.

:class:`EnumBehavior` executes the semantics a renderer must reproduce for
each artifact in a :class:`~enumgen.core.ir.GenerationPlan`. Renderer test
suites compare generated code against it, and it lets the planner's
decisions be checked without any template backend.
"""

from __future__ import annotations

from .errors import ArtifactNotPlannedError, DirectiveContext
from .ir import ArtifactKind, EnumValue, GenerationPlan, UnderlyingKind, WireKind


class InvalidEnumValueError(ValueError):
    """Raised by Parse when input matches no literal."""


class EnumPanic(RuntimeError):
    """Raised by MustParse; generated code aborts the process instead."""


class EnumBehavior:
    """Executable model of the artifacts planned for one enum type."""

    def __init__(self, plan: GenerationPlan):
        self.plan = plan
        self._by_ordinal = {v.ordinal: v for v in plan.values}

    def _require(self, *artifacts: ArtifactKind) -> None:
        missing = [a.value for a in artifacts if not self.plan.has(a)]
        if missing:
            raise ArtifactNotPlannedError(
                f"artifact not planned: {', '.join(missing)}",
                DirectiveContext(type_name=self.plan.type_name),
            )

    def _decode(self, data: bytes | str) -> str:
        if isinstance(data, str):
            return data
        try:
            return data.decode()
        except UnicodeDecodeError as e:
            raise InvalidEnumValueError(
                f"invalid UTF-8 for {self.plan.type_name}: {data!r}"
            ) from e

    def underlying_value(self, value: EnumValue) -> int | str:
        """The stored value: the ordinal, or the literal for string-backed enums."""
        if self.plan.underlying == UnderlyingKind.STRING:
            return value.literal
        return value.ordinal

    def stringify(self, value: EnumValue | int | str) -> str:
        """String(): literal name, or ``Type(n)`` for an unknown ordinal."""
        self._require(ArtifactKind.STRING)
        if isinstance(value, EnumValue):
            return value.literal
        if isinstance(value, int):
            known = self._by_ordinal.get(value)
            return known.literal if known else f"{self.plan.type_name}({value})"
        return value

    def parse(self, text: str) -> EnumValue:
        """
        Parse a literal name.

        Exact matches win; then the lowercase lookup table; then, when
        case-insensitive, folded input against folded literals. Values are
        scanned in declaration order.

        Raises:
            InvalidEnumValueError: ``"<input> is not a valid <TypeName>"``
        """
        self._require(ArtifactKind.PARSE)
        options = self.plan.parse
        assert options is not None

        for value in self.plan.values:
            if value.literal == text:
                return value
        if options.lowercase_lookup:
            for value in self.plan.values:
                if value.literal.lower() == text:
                    return value
        if options.case_insensitive:
            folded = text.lower()
            for value in self.plan.values:
                if value.literal.lower() == folded:
                    return value
        raise InvalidEnumValueError(options.error_message(text, self.plan.type_name))

    def is_valid(self, text: str) -> bool:
        """Whether Parse would succeed."""
        self._require(ArtifactKind.IS_VALID)
        try:
            self.parse(text)
        except InvalidEnumValueError:
            return False
        return True

    def must_parse(self, text: str) -> EnumValue:
        self._require(ArtifactKind.MUST_PARSE)
        try:
            return self.parse(text)
        except InvalidEnumValueError as e:
            raise EnumPanic(str(e)) from e

    # Text / JSON

    def marshal_text(self, value: EnumValue) -> bytes:
        self._require(ArtifactKind.MARSHAL_TEXT)
        return value.literal.encode()

    def append_text(self, buffer: bytes, value: EnumValue) -> bytes:
        self._require(ArtifactKind.APPEND_TEXT)
        return buffer + value.literal.encode()

    def unmarshal_text(self, data: bytes | str) -> EnumValue:
        self._require(ArtifactKind.UNMARSHAL_TEXT)
        return self.parse(self._decode(data))

    # SQL

    def sql_value(self, value: EnumValue) -> int | str:
        """Value(): the literal, or the ordinal when planned with ``@sqlint``."""
        self._require(ArtifactKind.SQL_VALUE)
        assert self.plan.sql is not None
        if self.plan.sql.value_kind == WireKind.ORDINAL:
            return value.ordinal
        return value.literal

    def sql_scan(self, raw: str | bytes | int) -> EnumValue:
        """
        Scan(): accepts the literal, or the ordinal for integer-backed enums
        (as a number or a numeric string).
        """
        self._require(ArtifactKind.SQL_SCAN)
        assert self.plan.sql is not None
        accepts_ordinal = WireKind.ORDINAL in self.plan.sql.scan_accepts

        if isinstance(raw, bool):
            raise InvalidEnumValueError(f"invalid value for {self.plan.type_name}: {raw!r}")
        if isinstance(raw, int):
            if accepts_ordinal and raw in self._by_ordinal:
                return self._by_ordinal[raw]
            raise InvalidEnumValueError(f"{raw} is not a valid {self.plan.type_name}")

        text = self._decode(raw)
        try:
            return self.parse(text)
        except InvalidEnumValueError:
            if (
                accepts_ordinal
                and text.isascii()
                and text.isdigit()
                and int(text) in self._by_ordinal
            ):
                return self._by_ordinal[int(text)]
            raise

    def sql_null_scan(self, raw: str | bytes | int | None, backing: WireKind) -> EnumValue | None:
        """Scan() on a nullable wrapper: SQL NULL becomes ``None``."""
        self._require(_null_artifact(backing))
        if raw is None:
            return None
        return self.sql_scan(raw)

    def sql_null_value(self, value: EnumValue | None, backing: WireKind) -> int | str | None:
        """Value() on a nullable wrapper, in the wrapper's backing kind."""
        self._require(_null_artifact(backing))
        if value is None:
            return None
        if backing == WireKind.ORDINAL:
            return value.ordinal
        return value.literal

    # Flag / tables

    def flag_set(self, text: str) -> EnumValue:
        self._require(ArtifactKind.FLAG)
        return self.parse(text)

    def names(self) -> list[str]:
        self._require(ArtifactKind.NAMES)
        return [v.literal for v in self.plan.values]

    def values(self) -> list[int | str]:
        self._require(ArtifactKind.VALUES)
        return [self.underlying_value(v) for v in self.plan.values]


def _null_artifact(backing: WireKind) -> ArtifactKind:
    if backing == WireKind.ORDINAL:
        return ArtifactKind.SQL_NULL_INT
    return ArtifactKind.SQL_NULL_STR
