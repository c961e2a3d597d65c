"""Shared pytest fixtures for enumgen tests."""

import pytest

from enumgen.core.ir import EnumConfig, EnumSpec, UnderlyingKind


@pytest.fixture
def status_spec() -> EnumSpec:
    """String-backed enum with a custom prefix."""
    return EnumSpec(
        type_name="AnnotationStatus",
        values=["pending", "running", "completed", "failed"],
        raw_annotations=["@marshal:true", "@sql:false", '@prefix:"My"'],
        underlying=UnderlyingKind.STRING,
    )


@pytest.fixture
def color_spec() -> EnumSpec:
    """String-backed enum without prefix, parsed case-insensitively."""
    return EnumSpec(
        type_name="AnnotationColor",
        values=["annotation_red", "annotation_green", "annotation_blue"],
        raw_annotations=["@noprefix", "@nocase"],
        underlying=UnderlyingKind.STRING,
    )


@pytest.fixture
def number_spec() -> EnumSpec:
    """Integer-backed enum with repeated directives."""
    return EnumSpec(
        type_name="AnnotationNumber",
        values=["one", "two", "three"],
        raw_annotations=["@marshal", "@sql", "@marshal"],
        underlying=UnderlyingKind.INT,
    )


@pytest.fixture
def empty_config() -> EnumConfig:
    return EnumConfig()
