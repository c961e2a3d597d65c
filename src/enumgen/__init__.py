"""
enumgen - annotation-driven companion code planning for enum types.

Parses ``@key`` directives attached to enum declarations, merges them over
global defaults, and decides which artifacts (String, Parse, text and SQL
adapters, lookup tables) a renderer must emit for each type.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ArtifactConflictError,
    ConfigurationError,
    EnumGenError,
    IdentifierCollisionError,
    InvalidIdentifierError,
    MalformedDirectiveError,
    UnknownDirectiveError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "EnumGenError",
    "MalformedDirectiveError",
    "UnknownDirectiveError",
    "IdentifierCollisionError",
    "InvalidIdentifierError",
    "ArtifactConflictError",
    "ConfigurationError",
]
