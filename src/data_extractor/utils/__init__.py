from __future__ import annotations

from .text import WHITESPACE_RE, normalize_list, normalize_str

__all__ = (
    "WHITESPACE_RE",
    "normalize_list",
    "normalize_str",
)
