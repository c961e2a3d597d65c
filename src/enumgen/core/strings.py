"""
String utility functions for enumgen.

Provides the word-casing transformations used when deriving generated
identifiers from enum literals.
"""

from __future__ import annotations

import re

# Word separators inside an enum literal
_WORD_SEPARATORS = re.compile(r"[_\-\s]+")
_NON_SNAKE = re.compile(r"[\-\s]+")


def split_words(literal: str) -> list[str]:
    """
    Split a literal into its words.

    Examples:
        >>> split_words("annotation_red")
        ['annotation', 'red']
        >>> split_words("in-progress")
        ['in', 'progress']
        >>> split_words("_leading__double_")
        ['leading', 'double']
    """
    return [word for word in _WORD_SEPARATORS.split(literal) if word]


def capitalize_first(word: str) -> str:
    """
    Uppercase the first character only, leaving the rest untouched.

    Unlike ``str.capitalize`` this keeps existing inner capitals.

    Examples:
        >>> capitalize_first("red")
        'Red'
        >>> capitalize_first("iPhone")
        'IPhone'
    """
    if not word:
        return word
    return word[0].upper() + word[1:]


def to_camel(literal: str) -> str:
    """
    Convert an underscore (or dash) delimited literal to CamelCase.

    Args:
        literal: Enum literal

    Returns:
        Concatenation of the capitalised words

    Examples:
        >>> to_camel("annotation_red")
        'AnnotationRed'
        >>> to_camel("pending")
        'Pending'
        >>> to_camel("HTTP_status")
        'HTTPStatus'
    """
    return "".join(capitalize_first(word) for word in split_words(literal))


def to_snake_identifier(literal: str) -> str:
    """
    Keep a literal's casing and underscores, replacing characters that
    cannot appear in an identifier.

    Examples:
        >>> to_snake_identifier("annotation_red")
        'annotation_red'
        >>> to_snake_identifier("in progress")
        'in_progress'
    """
    return _NON_SNAKE.sub("_", literal.strip())
