# =============================================================================
# File: type_checker.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import re
from enum import Enum
from typing import Optional, Union
from urllib.parse import urlparse

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class ValueKind(str, Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    URL = "url"
    EMAIL = "email"
    STRING = "string"


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the integer prefix of a string, ignoring leading whitespace.

    "3000" and "3000abc" both give 3000; "abc", "" and None give None.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def _is_absolute_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def check_type(value: Optional[str], kind: Union[ValueKind, str] = ValueKind.STRING) -> bool:
    """
    Check that a single configuration value has the declared primitive kind.

    Args:
        value: Raw value, usually read from the environment
        kind: One of number, boolean, url, email or string. Unknown kinds
            are checked as plain strings.

    Returns:
        bool: True when the value is non-empty and matches the kind
    """
    if not value:
        return False

    try:
        kind = ValueKind(kind)
    except ValueError:
        kind = ValueKind.STRING

    if kind is ValueKind.NUMBER:
        return parse_leading_int(value) is not None
    if kind is ValueKind.BOOLEAN:
        return value in ("true", "false")
    if kind is ValueKind.URL:
        return _is_absolute_url(value)
    if kind is ValueKind.EMAIL:
        return _EMAIL.fullmatch(value) is not None
    return isinstance(value, str) and len(value) > 0


def validate_env_value(
    name: str, value: Optional[str], kind: Union[ValueKind, str] = ValueKind.STRING
) -> bool:
    """Named form of :func:`check_type`; ``name`` only labels the call site."""
    return check_type(value, kind)
