"""
Text utilities shared by the HTML/XML extractors.
"""
from __future__ import annotations

import re
from typing import Any, List, Optional, Pattern, Union

__all__ = [
    "WHITESPACE_RE",
    "normalize_str",
    "normalize_list",
]

# Any run of whitespace, including non-breaking spaces
WHITESPACE_RE: Pattern[str] = re.compile(r"\s+", re.UNICODE)


def normalize_str(value: Optional[Union[str, bytes]]) -> str:
    """
    Collapses whitespace runs into a single space and strips the result.

    Examples:
        >>> normalize_str("  Episodes \\n  0 / 37 ")
        'Episodes 0 / 37'
        >>> normalize_str(None)
        ''
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    if not isinstance(value, str) or not value:
        return ""
    return WHITESPACE_RE.sub(" ", value).strip()


def normalize_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]
