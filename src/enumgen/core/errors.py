"""
Error types for enumgen directive parsing, resolution, and planning.
"""

from dataclasses import dataclass

DIRECTIVE_GRAMMAR = '@<key> | @<key>:true|false | @<key>:"<value>" | @<key>="<value>"'


class EnumGenError(Exception):
    """Base exception for all enumgen errors."""

    def __init__(self, message: str, context: "DirectiveContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message

    def with_context(self, context: "DirectiveContext") -> "EnumGenError":
        """Attach context in place and return self for re-raising."""
        self.context = context
        self.args = (self._format_message(),)
        return self


class MalformedDirectiveError(EnumGenError):
    """
    Raised when directive text is structurally invalid.

    Examples:
    - Missing ``@`` marker
    - Comment text mistaken for a directive
    """

    def __init__(
        self,
        directive: str,
        context: "DirectiveContext | None" = None,
    ):
        self.directive = directive
        super().__init__(
            f"annotation must start with @: {directive} (expected {DIRECTIVE_GRAMMAR})",
            context,
        )


class UnknownDirectiveError(EnumGenError):
    """
    Raised when a well-formed directive names no known option.

    Also covers key/form mismatches such as ``@prefix`` used as a boolean
    or ``@marshal="yes"`` used as a string.
    """

    def __init__(
        self,
        key: str,
        value: str | None = None,
        context: "DirectiveContext | None" = None,
    ):
        self.key = key
        self.value = value
        if value is None:
            message = f"unknown annotation: @{key}"
        else:
            message = f"unknown annotation with value: @{key}={value}"
        super().__init__(f"{message} (expected {DIRECTIVE_GRAMMAR})", context)


class IdentifierCollisionError(EnumGenError):
    """Raised when two literals derive the same generated identifier."""

    def __init__(
        self,
        identifier: str,
        literals: tuple[str, str],
        context: "DirectiveContext | None" = None,
    ):
        self.identifier = identifier
        self.literals = literals
        super().__init__(
            f"values {literals[0]!r} and {literals[1]!r} both map to identifier {identifier}",
            context,
        )


class InvalidIdentifierError(IdentifierCollisionError):
    """
    Raised when a literal derives no usable identifier.

    Examples:
    - A literal made only of separators (``_``, ``-``) leaves an empty name
      under ``@noprefix``, or just the type name otherwise
    - Characters that cannot appear in an identifier
    """

    def __init__(
        self,
        identifier: str,
        literal: str,
        context: "DirectiveContext | None" = None,
    ):
        self.identifier = identifier
        self.literals = (literal, literal)
        EnumGenError.__init__(
            self,
            f"value {literal!r} derives unusable identifier {identifier!r}",
            context,
        )


class ArtifactConflictError(EnumGenError):
    """
    Raised when the requested artifact combination cannot be satisfied.

    Examples:
    - ``@noparse`` together with ``@marshal`` or ``@sql``
    - ``@sqlint`` on a string-backed enum
    - ``@forcelower`` together with ``@forceupper``
    """

    pass


class ConfigurationError(EnumGenError):
    """Raised when the global defaults file cannot be read or is invalid."""

    pass


class ArtifactNotPlannedError(EnumGenError):
    """Raised when reference behavior is requested for an artifact outside the plan."""

    pass


@dataclass
class DirectiveContext:
    """
    Where an error occurred.

    Attributes:
        type_name: Enum type being processed
        directive: Optional raw directive text that triggered the error
    """

    type_name: str
    directive: str | None = None

    def format(self) -> str:
        """
        Format context as a human-readable string.

        Returns:
            Formatted string like: "AnnotationColor (@bogus)"
        """
        if self.directive:
            return f"{self.type_name} ({self.directive})"
        return self.type_name
