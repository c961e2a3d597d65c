"""Tests for the reference behavior of planned artifacts."""

import pytest

from enumgen.core.behavior import EnumBehavior, EnumPanic, InvalidEnumValueError
from enumgen.core.errors import ArtifactNotPlannedError
from enumgen.core.ir import EnumSpec, UnderlyingKind, WireKind
from enumgen.core.pipeline import plan_enum


def _behavior(spec: EnumSpec) -> EnumBehavior:
    return EnumBehavior(plan_enum(spec))


class TestAnnotationStatus:
    """@marshal:true @sql:false @prefix:"My" on a string enum."""

    def test_identifiers(self, status_spec):
        behavior = _behavior(status_spec)
        assert behavior.plan.value_names == {
            "pending": "MyAnnotationStatusPending",
            "running": "MyAnnotationStatusRunning",
            "completed": "MyAnnotationStatusCompleted",
            "failed": "MyAnnotationStatusFailed",
        }

    def test_stringify_and_validity(self, status_spec):
        behavior = _behavior(status_spec)
        pending = behavior.parse("pending")
        assert behavior.stringify(pending) == "pending"
        assert behavior.is_valid("running")
        assert not behavior.is_valid("invalid")

    def test_parse_error_message(self, status_spec):
        behavior = _behavior(status_spec)
        with pytest.raises(InvalidEnumValueError) as exc_info:
            behavior.parse("invalid")
        assert str(exc_info.value) == "invalid is not a valid AnnotationStatus"

    def test_parse_is_case_sensitive(self, status_spec):
        assert not _behavior(status_spec).is_valid("PENDING")

    def test_text_round_trip(self, status_spec):
        behavior = _behavior(status_spec)
        pending = behavior.parse("pending")
        assert behavior.marshal_text(pending) == b"pending"
        assert behavior.unmarshal_text(b"pending") == pending
        assert behavior.append_text(b"", pending) == b"pending"
        assert behavior.append_text(b"x=", pending) == b"x=pending"

    def test_sql_disabled(self, status_spec):
        behavior = _behavior(status_spec)
        with pytest.raises(ArtifactNotPlannedError):
            behavior.sql_value(behavior.parse("pending"))

    def test_string_backed_values(self, status_spec):
        behavior = _behavior(status_spec)
        assert behavior.underlying_value(behavior.parse("failed")) == "failed"


class TestAnnotationColor:
    """@noprefix @nocase on a string enum."""

    def test_identifiers(self, color_spec):
        assert _behavior(color_spec).plan.value_names == {
            "annotation_red": "AnnotationRed",
            "annotation_green": "AnnotationGreen",
            "annotation_blue": "AnnotationBlue",
        }

    @pytest.mark.parametrize("text", ["ANNOTATION_RED", "annotation_red", "AnNoTaTiOn_ReD"])
    def test_case_insensitive_parse(self, color_spec, text):
        assert _behavior(color_spec).parse(text).literal == "annotation_red"

    def test_stringify_keeps_declared_literal(self, color_spec):
        behavior = _behavior(color_spec)
        assert behavior.stringify(behavior.parse("ANNOTATION_BLUE")) == "annotation_blue"

    def test_invalid(self, color_spec):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            _behavior(color_spec).parse("purple")
        assert str(exc_info.value) == "purple is not a valid AnnotationColor"


class TestAnnotationNumber:
    """@marshal @sql @marshal on an int enum."""

    def test_identifiers(self, number_spec):
        assert list(_behavior(number_spec).plan.value_names.values()) == [
            "AnnotationNumberOne",
            "AnnotationNumberTwo",
            "AnnotationNumberThree",
        ]

    def test_marshal_uses_name_not_ordinal(self, number_spec):
        behavior = _behavior(number_spec)
        assert behavior.marshal_text(behavior.parse("two")) == b"two"

    def test_stringify_ordinal(self, number_spec):
        behavior = _behavior(number_spec)
        assert behavior.stringify(2) == "three"
        assert behavior.stringify(7) == "AnnotationNumber(7)"

    def test_sql_value_is_string(self, number_spec):
        behavior = _behavior(number_spec)
        assert behavior.sql_value(behavior.parse("two")) == "two"

    @pytest.mark.parametrize("raw", ["two", b"two", 1, "1"])
    def test_sql_scan_accepts_both_kinds(self, number_spec, raw):
        assert _behavior(number_spec).sql_scan(raw).literal == "two"

    def test_sql_scan_rejects_out_of_range(self, number_spec):
        behavior = _behavior(number_spec)
        with pytest.raises(InvalidEnumValueError):
            behavior.sql_scan(9)
        with pytest.raises(InvalidEnumValueError):
            behavior.sql_scan("9")

    def test_int_backed_values(self, number_spec):
        behavior = _behavior(number_spec)
        assert behavior.underlying_value(behavior.parse("three")) == 2


class TestRoundTrip:
    @pytest.mark.parametrize(
        "annotations",
        [[], ["@nocase"], ["@lower"], ["@noprefix", "@nocamel"], ["@forceupper"]],
    )
    def test_parse_of_stringify(self, annotations):
        spec = EnumSpec(
            type_name="Mixed",
            values=["Alpha", "beta_two", "GAMMA"],
            raw_annotations=annotations,
        )
        behavior = _behavior(spec)
        for value in behavior.plan.values:
            assert behavior.parse(behavior.stringify(value)) == value


class TestLowercaseLookup:
    def test_lower_accepts_lowercase_input(self):
        behavior = _behavior(EnumSpec(type_name="T", values=["Alpha"], raw_annotations=["@lower"]))
        assert behavior.parse("alpha").literal == "Alpha"
        assert not behavior.is_valid("ALPHA")

    def test_declaration_order_decides(self):
        spec = EnumSpec(
            type_name="T", values=["Alpha", "ALPHA"], raw_annotations=["@nocase", "@nocamel"]
        )
        behavior = _behavior(spec)
        assert behavior.parse("ALPHA").literal == "ALPHA"
        assert behavior.parse("alpha").literal == "Alpha"


class TestSqlVariants:
    def test_sqlint_value_is_ordinal(self):
        spec = EnumSpec(type_name="T", values=["a", "b"], raw_annotations=["@sql", "@sqlint"])
        behavior = _behavior(spec)
        assert behavior.sql_value(behavior.parse("b")) == 1
        assert behavior.sql_scan("b").ordinal == 1
        assert behavior.sql_scan(1).literal == "b"

    def test_string_enum_scan_rejects_ordinal(self):
        spec = EnumSpec(
            type_name="T",
            values=["a", "b"],
            raw_annotations=["@sql"],
            underlying=UnderlyingKind.STRING,
        )
        behavior = _behavior(spec)
        with pytest.raises(InvalidEnumValueError):
            behavior.sql_scan(1)
        with pytest.raises(InvalidEnumValueError):
            behavior.sql_scan("1")

    def test_null_wrappers(self):
        spec = EnumSpec(
            type_name="T", values=["a", "b"], raw_annotations=["@sqlnullint", "@sqlnullstr"]
        )
        behavior = _behavior(spec)
        b = behavior.parse("b")
        assert behavior.sql_null_scan(None, WireKind.ORDINAL) is None
        assert behavior.sql_null_scan("b", WireKind.STRING) == b
        assert behavior.sql_null_value(b, WireKind.ORDINAL) == 1
        assert behavior.sql_null_value(b, WireKind.STRING) == "b"
        assert behavior.sql_null_value(None, WireKind.STRING) is None

    def test_null_wrapper_not_planned(self):
        spec = EnumSpec(type_name="T", values=["a"], raw_annotations=["@sqlnullstr"])
        with pytest.raises(ArtifactNotPlannedError):
            _behavior(spec).sql_null_scan(None, WireKind.ORDINAL)


class TestOtherArtifacts:
    def test_must_parse(self):
        spec = EnumSpec(type_name="T", values=["a"], raw_annotations=["@mustparse"])
        behavior = _behavior(spec)
        assert behavior.must_parse("a").literal == "a"
        with pytest.raises(EnumPanic, match="b is not a valid T"):
            behavior.must_parse("b")

    def test_must_parse_not_planned(self):
        spec = EnumSpec(type_name="T", values=["a"])
        with pytest.raises(ArtifactNotPlannedError):
            _behavior(spec).must_parse("a")

    def test_flag(self):
        spec = EnumSpec(type_name="T", values=["a", "b"], raw_annotations=["@flag"])
        assert _behavior(spec).flag_set("b").ordinal == 1

    def test_names_and_values(self):
        spec = EnumSpec(
            type_name="T", values=["z", "a", "m"], raw_annotations=["@names", "@values"]
        )
        behavior = _behavior(spec)
        assert behavior.names() == ["z", "a", "m"]
        assert behavior.values() == [0, 1, 2]

    def test_noparse_has_no_parse(self):
        spec = EnumSpec(type_name="T", values=["a"], raw_annotations=["@noparse"])
        behavior = _behavior(spec)
        assert behavior.stringify(0) == "a"
        with pytest.raises(ArtifactNotPlannedError):
            behavior.parse("a")


class TestMalformedInput:
    """Bad wire input is rejected as an invalid value, never a raw decode error."""

    def test_sql_scan_non_ascii_digit(self, number_spec):
        with pytest.raises(InvalidEnumValueError):
            _behavior(number_spec).sql_scan("²")

    def test_sql_scan_invalid_utf8(self, number_spec):
        with pytest.raises(InvalidEnumValueError, match="invalid UTF-8"):
            _behavior(number_spec).sql_scan(b"\xff")

    def test_unmarshal_invalid_utf8(self, number_spec):
        with pytest.raises(InvalidEnumValueError, match="AnnotationNumber"):
            _behavior(number_spec).unmarshal_text(b"\xff\xfe")
