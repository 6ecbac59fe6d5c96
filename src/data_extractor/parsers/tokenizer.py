"""
Splits selectors into steps and steps into typed segments.

Both functions scan the selector once, character by character, and keep
track of single-quoted string literals so that '/', '[' and ']' inside a
literal are never treated as syntax.
"""
from __future__ import annotations

from typing import List, Tuple

from ..exceptions import SelectorGrammarError
from ..models.selector import FOLLOWING_SIBLING_PREFIX, Axis, Segment
from .filters import parse_filter

__all__ = (
    "split_steps",
    "split_segments",
    "tokenize_segment",
    "tokenize_step",
    "tokenize_selector",
)

QUOTE = "'"


def split_steps(selector: str) -> List[str]:
    """
    Splits a selector into its descendant steps.

    A '//' outside of a string literal starts a new step. A single '/' is the
    child separator and stays part of the step. Leading slashes are dropped.

    Examples:
        >>> split_steps("//div[@id='title']/text()")
        ["div[@id='title']/text()"]
        >>> split_steps("//ul//li")
        ['ul', 'li']
        >>> split_steps("//a[@href='http://example.org']//span")
        ["a[@href='http://example.org']", 'span']
    """
    steps: List[str] = []
    current: List[str] = []
    pending_child = False
    in_literal = False

    for char in selector:
        if char == "/":
            if not current:
                continue
            if pending_child:
                steps.append("".join(current))
                current = []
                pending_child = False
                continue
            if in_literal:
                current.append(char)
                continue
            pending_child = True
            continue

        if pending_child:
            current.append("/")
            pending_child = False

        if char == QUOTE:
            in_literal = not in_literal
        current.append(char)

    if current:
        steps.append("".join(current))

    return steps


def split_segments(step: str) -> List[str]:
    """Splits a step at each '/' which is neither inside a literal nor inside a filter."""
    segments: List[str] = []
    current: List[str] = []
    in_literal = False
    depth = 0

    for char in step:
        if char == QUOTE:
            in_literal = not in_literal
        elif not in_literal and char == "[":
            depth += 1
        elif not in_literal and char == "]":
            depth -= 1
        elif char == "/" and not in_literal and depth == 0:
            if current:
                segments.append("".join(current))
            current = []
            continue
        current.append(char)

    if current:
        segments.append("".join(current))

    return segments


def _split_filters(raw: str) -> Tuple[str, List[str]]:
    """Separates "span[@a='x'][1]" into the name "span" and ["[@a='x']", "[1]"]."""
    name: List[str] = []
    filters: List[str] = []
    current: List[str] = []
    in_literal = False
    depth = 0

    for char in raw:
        if depth == 0:
            if char == "[":
                depth = 1
                current = [char]
            elif filters:
                raise SelectorGrammarError(f"Unexpected [{char}] after filter in [{raw}]")
            else:
                name.append(char)
            continue

        current.append(char)
        if char == QUOTE:
            in_literal = not in_literal
        elif in_literal:
            continue
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                filters.append("".join(current))
                current = []

    if depth != 0:
        raise SelectorGrammarError(f"No transformation for [{''.join(current)}]")

    return "".join(name), filters


def tokenize_segment(raw: str) -> Segment:
    axis = Axis.CHILD
    text = raw.strip()
    if text.startswith(FOLLOWING_SIBLING_PREFIX):
        axis = Axis.FOLLOWING_SIBLING
        text = text[len(FOLLOWING_SIBLING_PREFIX):]

    name, filters = _split_filters(text)
    return Segment(
        name=name.strip(),
        raw=raw,
        axis=axis,
        filters=tuple(parse_filter(f) for f in filters),
    )


def tokenize_step(step: str) -> List[Segment]:
    """
    Turns a single step into typed segments.

    Example:
        >>> [s.name for s in tokenize_step("div[@class='a/b']/following-sibling::*/text()")]
        ['div', '*', 'text()']

    Raises:
        SelectorGrammarError: If a filter of any segment is not supported.
    """
    return [tokenize_segment(segment) for segment in split_segments(step)]


def tokenize_selector(selector: str) -> List[List[Segment]]:
    """
    Tokenizes every step of a selector.

    Raises:
        SelectorGrammarError: If any step uses unsupported syntax.
    """
    return [tokenize_step(step) for step in split_steps(selector)]
