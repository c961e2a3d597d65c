"""
Enum declarations as handed over by the source scanner.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnderlyingKind(str, Enum):
    """Representation the generated enum type is backed by."""

    INT = "int"
    STRING = "string"


class EnumSpec(BaseModel):
    """
    One enum declaration found in source.

    Examples:
        - // @noprefix @nocase
          // ENUM(annotation_red, annotation_green)
          type AnnotationColor string

          EnumSpec(
              type_name="AnnotationColor",
              values=["annotation_red", "annotation_green"],
              raw_annotations=["@noprefix", "@nocase"],
              underlying=UnderlyingKind.STRING,
          )
    """

    type_name: str
    values: list[str]
    raw_annotations: list[str] = Field(default_factory=list)
    underlying: UnderlyingKind = UnderlyingKind.INT

    model_config = ConfigDict(frozen=True)

    @field_validator("type_name")
    @classmethod
    def validate_type_name(cls, v: str) -> str:
        """Ensure the type name is a usable identifier."""
        if not v.isidentifier():
            raise ValueError(f"Type name '{v}' is not a valid identifier")
        return v

    @field_validator("values")
    @classmethod
    def validate_values(cls, v: list[str]) -> list[str]:
        """Ensure there is at least one value and no blank literal."""
        if not v:
            raise ValueError("Enum must declare at least one value")
        for val in v:
            if not val.strip():
                raise ValueError("Enum values must not be blank")
        return v
