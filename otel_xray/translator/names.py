"""Segment name sanitizing."""

from __future__ import annotations

import re
from typing import Pattern, Union

# X-Ray accepts Unicode letters, numbers and whitespace plus _ . : / % & # = + \ - @
INVALID_NAME_CHARACTERS = r"[^\w\s.:/%&#=+\\\-@]"
MAX_NAME_LENGTH = 200
DEFAULT_NAME = "span"

_DEFAULT_PATTERN = re.compile(INVALID_NAME_CHARACTERS)


def sanitize(
    raw_name: str,
    pattern: Union[str, Pattern[str], None] = None,
    max_length: int = MAX_NAME_LENGTH,
    default_name: str = DEFAULT_NAME,
) -> str:
    """
    Make a span name acceptable as an X-Ray segment name.

    Characters matched by ``pattern`` are removed, the result is cut to
    ``max_length`` characters, and an empty result becomes ``default_name``.

    Args:
        raw_name: Span name, any length or charset
        pattern: Regex matching the characters to remove
        max_length: Longest allowed name
        default_name: Name used when nothing valid is left

    Returns:
        A non-empty name of at most ``max_length`` characters
    """
    if pattern is None:
        compiled = _DEFAULT_PATTERN
    elif isinstance(pattern, str):
        compiled = re.compile(pattern)
    else:
        compiled = pattern

    name = compiled.sub("", raw_name or "")
    if len(name) > max_length:
        name = name[:max_length]
    if not name:
        name = default_name[:max_length]
    return name
