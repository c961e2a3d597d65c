"""
Annotation parser for enum directives.

Applies ``@key`` style directives found above an enum declaration onto an
:class:`~enumgen.core.ir.EnumConfig`.

Directive syntax::

    @marshal                 boolean true
    @marshal:false           explicit boolean
    @prefix:"My"             string (quotes optional unless it has spaces)
    @prefix="My"             string, legacy form

Several directives may share one comment line::

    // @marshal:true @sql:false @prefix:"My"

Entry points:
    ``parse_annotation(raw, config)`` for a single directive,
    ``parse_annotations(directives, config)`` for an ordered sequence.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .errors import DirectiveContext, EnumGenError, MalformedDirectiveError
from .ir import EnumConfig

logger = logging.getLogger(__name__)

MARKER = "@"

# One directive: marker (at the start or after whitespace), key, then an optional
# separator and a value that may be quoted (quoted values can contain whitespace).
_DIRECTIVE = re.compile(r"""(?<!\S)@[\w-]+(?:\s*[:=]\s*(?:"[^"]*"|'[^']*'|[^\s@]*))?""")
_COMMENT_LEAD = re.compile(r"^\s*(?://+|#+|--|/\*+|\*+)\s*")


def _unquote(value: str) -> str:
    """Strip one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_annotation(raw: str, config: EnumConfig) -> None:
    """Parse one directive string and apply it onto ``config``.

    Args:
        raw: Directive text, e.g. ``"@marshal"`` or ``'@prefix="My"'``.
        config: Configuration to update in place.

    Raises:
        MalformedDirectiveError: If the directive does not start with ``@``.
        UnknownDirectiveError: If the key does not name an option accepting
            the given form.
    """
    annotation = raw.strip()
    if not annotation:
        return

    if not annotation.startswith(MARKER):
        raise MalformedDirectiveError(annotation)
    body = annotation[len(MARKER) :]

    # key:value (checked first, so "@a:b=c" is a key:value directive)
    if ":" in body:
        key, _, value = body.partition(":")
        key = key.strip()
        value = value.strip()
        if value in ("true", "false"):
            config.set_bool_option(key, value == "true")
            return
        config.set_string_option(key, _unquote(value))
        return

    # key=value (legacy)
    if "=" in body:
        key, _, value = body.partition("=")
        config.set_string_option(key.strip(), _unquote(value.strip()))
        return

    # Bare key
    config.set_bool_option(body.strip(), True)


def parse_annotations(
    directives: Iterable[str],
    config: EnumConfig,
    type_name: str | None = None,
) -> EnumConfig:
    """Apply an ordered sequence of directives; the last one for a key wins.

    The first failing directive aborts the sequence. When ``type_name`` is
    given, the raised error carries it along with the offending directive.

    Returns:
        The same ``config`` object, for chaining.
    """
    for directive in directives:
        try:
            parse_annotation(directive, config)
        except EnumGenError as e:
            if type_name is not None:
                raise e.with_context(
                    DirectiveContext(type_name=type_name, directive=directive.strip())
                ) from None
            raise
        logger.debug("Applied directive %s", directive.strip())
    return config


def build_enum_config(
    directives: Iterable[str],
    type_name: str | None = None,
) -> EnumConfig:
    """Build a fresh configuration from a sequence of directives."""
    return parse_annotations(directives, EnumConfig(), type_name=type_name)


def split_directive_line(line: str) -> list[str]:
    """Split one comment line into individual directive strings.

    A leading comment marker (``//``, ``#``, ``--``, ``/*``, ``*``) is
    ignored, as is any text that is not part of a directive.

    Examples:
        >>> split_directive_line('// @marshal:true @sql:false @prefix:"My"')
        ['@marshal:true', '@sql:false', '@prefix:"My"']
        >>> split_directive_line("@noprefix @nocase")
        ['@noprefix', '@nocase']
    """
    text = _COMMENT_LEAD.sub("", line, count=1)
    return [m.group(0).strip() for m in _DIRECTIVE.finditer(text)]
