from __future__ import annotations

import re
from typing import Pattern

from ..exceptions import SelectorGrammarError
from ..models.selector import FilterKind, StepFilter

__all__ = (
    "parse_filter",
    "filter_to_css",
    "transform_filter",
    "quote_css_value",
)

FILTER_ATTRIBUTE_EQUALS_VALUE: Pattern[str] = re.compile(r"^\[@(?P<attr>[\w-]+) *= *'(?P<value>.*?)'\]$")
FILTER_ATTRIBUTE_CONTAINS: Pattern[str] = re.compile(r"^\[contains\(@(?P<attr>[\w-]+) *, *'(?P<value>.*?)'\)\]$")
FILTER_TEXT_CONTAINS: Pattern[str] = re.compile(r"^\[contains\(text\(\) *, *'(?P<value>.*?)'\)\]$")
FILTER_SELECT_SIBLING: Pattern[str] = re.compile(r"^\[(?P<number>\d+)\]$")
FILTER_ATTRIBUTE_EXISTS: Pattern[str] = re.compile(r"^\[@(?P<attr>[\w-]+)\]$")


def parse_filter(raw: str) -> StepFilter:
    """
    Classifies a bracket filter like "[@class='title']".

    The patterns are checked in a fixed order. Anything else is rejected,
    an unsupported filter is never ignored.

    Raises:
        SelectorGrammarError: If the filter matches none of the supported forms.
    """
    match = FILTER_ATTRIBUTE_EQUALS_VALUE.match(raw)
    if match:
        return StepFilter(kind=FilterKind.ATTRIBUTE_EQUALS, raw=raw, attribute=match["attr"], value=match["value"])

    match = FILTER_ATTRIBUTE_CONTAINS.match(raw)
    if match:
        return StepFilter(kind=FilterKind.ATTRIBUTE_CONTAINS, raw=raw, attribute=match["attr"], value=match["value"])

    match = FILTER_TEXT_CONTAINS.match(raw)
    if match:
        return StepFilter(kind=FilterKind.TEXT_CONTAINS, raw=raw, value=match["value"])

    match = FILTER_SELECT_SIBLING.match(raw)
    if match:
        return StepFilter(kind=FilterKind.INDEX, raw=raw, index=int(match["number"]))

    match = FILTER_ATTRIBUTE_EXISTS.match(raw)
    if match:
        return StepFilter(kind=FilterKind.ATTRIBUTE_EXISTS, raw=raw, attribute=match["attr"])

    raise SelectorGrammarError(f"No transformation for [{raw}]")


def quote_css_value(value: str) -> str:
    """Wraps a literal in double quotes for use in a CSS selector."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def filter_to_css(step_filter: StepFilter) -> str:
    """
    Renders a filter in the CSS dialect understood by soupsieve.

    Examples:
        [@class='a']                -> [class="a"]
        [contains(@class, 'a')]     -> [class*="a"]
        [contains(text(), 'a')]     -> :-soup-contains-own("a")
        [1]                         -> :nth-child(2)
        [@class]                    -> [class]
    """
    kind = step_filter.kind
    if kind is FilterKind.ATTRIBUTE_EQUALS:
        return f"[{step_filter.attribute}={quote_css_value(step_filter.value)}]"
    if kind is FilterKind.ATTRIBUTE_CONTAINS:
        return f"[{step_filter.attribute}*={quote_css_value(step_filter.value)}]"
    if kind is FilterKind.TEXT_CONTAINS:
        return f":-soup-contains-own({quote_css_value(step_filter.value)})"
    if kind is FilterKind.INDEX:
        # sibling index is zero-based, nth-child is one-based
        return f":nth-child({step_filter.index + 1})"
    return f"[{step_filter.attribute}]"


def transform_filter(raw: str) -> str:
    return filter_to_css(parse_filter(raw))
