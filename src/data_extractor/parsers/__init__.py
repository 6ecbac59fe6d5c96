from __future__ import annotations

from .descendant import Descendant
from .filters import filter_to_css, parse_filter, transform_filter
from .tokenizer import split_segments, split_steps, tokenize_selector, tokenize_step

__all__ = (
    "Descendant",
    "filter_to_css",
    "parse_filter",
    "split_segments",
    "split_steps",
    "tokenize_selector",
    "tokenize_step",
    "transform_filter",
)
