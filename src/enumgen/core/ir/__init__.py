"""
enumgen Intermediate Representation (IR) types.

All types are re-exported from this package for convenience.
"""

from .config import (
    BOOL_DIRECTIVES,
    STRING_DIRECTIVES,
    ConfigSlot,
    EnumConfig,
    FrozenEnumConfig,
    slot_names,
)
from .enum_spec import (
    EnumSpec,
    UnderlyingKind,
)
from .plan import (
    ArtifactKind,
    EnumValue,
    GenerationPlan,
    MarshalOptions,
    NullWrapper,
    ParseOptions,
    SqlOptions,
    WireKind,
)

__all__ = [
    # Configuration
    "BOOL_DIRECTIVES",
    "STRING_DIRECTIVES",
    "ConfigSlot",
    "EnumConfig",
    "FrozenEnumConfig",
    "slot_names",
    # Enum declarations
    "EnumSpec",
    "UnderlyingKind",
    # Plans
    "ArtifactKind",
    "EnumValue",
    "GenerationPlan",
    "MarshalOptions",
    "NullWrapper",
    "ParseOptions",
    "SqlOptions",
    "WireKind",
]
