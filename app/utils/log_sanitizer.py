# =============================================================================
# File: log_sanitizer.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import re
from typing import Any, Optional

_CONTROL_CHARS = re.compile(r"[\r\n\t\x00-\x1f\x7f-\x9f]")


def sanitize_for_log(value: Any, max_length: int = 200) -> str:
    """
    Sanitize a configuration value for safe logging.

    Control characters are replaced so an operator-supplied value cannot
    forge extra log lines, and long values are truncated.

    Args:
        value: Input value to sanitize
        max_length: Maximum length of the returned text

    Returns:
        str: Sanitized string safe for logging
    """
    if value is None:
        return "None"

    sanitized = _CONTROL_CHARS.sub("_", str(value))

    if len(sanitized) > max_length:
        sanitized = sanitized[: max_length - 3] + "..."

    return sanitized


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """
    Render a secret as its length plus a short suffix, e.g. ``****(40)...abcd``.
    Values no longer than twice ``visible`` are fully masked.
    """
    if not value:
        return "<unset>"
    if len(value) <= visible * 2:
        return f"****({len(value)})"
    return f"****({len(value)})...{sanitize_for_log(value[-visible:])}"
