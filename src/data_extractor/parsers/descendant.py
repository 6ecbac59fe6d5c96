from __future__ import annotations

from functools import cached_property
from typing import List, Optional

from ..models.selector import FOLLOWING_SIBLING_PREFIX, PARENT, Axis, Segment
from .filters import filter_to_css
from .tokenizer import tokenize_step

__all__ = ("Descendant",)


def _render(segment: Segment) -> str:
    if segment.is_terminal:
        return segment.raw.strip()
    return segment.name + "".join(filter_to_css(f) for f in segment.filters)


class Descendant:
    """
    A single descendant step of a selector and its CSS equivalent.

    Examples:
        >>> Descendant("//div/span[@attr='test']/@attr").to_css()
        'div > span[attr="test"]'
        >>> Descendant("//div/span[@attr='test']/@attr").terminating_child
        '@attr'
        >>> Descendant("//div/following-sibling::td/text()").to_css()
        'div ~ td'
    """

    def __init__(self, initial: str):
        self.initial = initial
        self.segments: List[Segment] = tokenize_step(initial.lstrip("/"))

    def __repr__(self) -> str:
        return f"Descendant({self.initial!r})"

    @property
    def self_segment(self) -> Optional[Segment]:
        """First segment, up to the first child separator."""
        return self.segments[0] if self.segments else None

    @cached_property
    def terminating_child(self) -> str:
        """The last segment after the self segment, empty if there is none."""
        if len(self.segments) < 2:
            return ""
        return self.segments[-1].raw.strip()

    def has_terminating_child(self) -> bool:
        return len(self.segments) > 1 and self.segments[-1].is_terminal

    def is_terminating_child(self) -> bool:
        return self.self_segment is not None and self.self_segment.is_terminal

    @cached_property
    def _element_segments(self) -> List[Segment]:
        if self.has_terminating_child():
            return self.segments[:-1]
        return self.segments

    def parts(self) -> List[str]:
        """
        CSS fragments separated by parent markers.

        Fragments which follow a parent marker start with their combinator,
        because they are evaluated relative to the parent elements.

        Example:
            >>> Descendant("div[contains(text(), 'Season')]/../a/text()").parts()
            ['div:-soup-contains-own("Season")', '..', ' > a']
        """
        parts: List[str] = []
        fragment = ""

        for segment in self._element_segments:
            if segment.is_parent:
                if fragment:
                    parts.append(fragment)
                parts.append(PARENT)
                fragment = ""
                continue

            css = _render(segment)
            if not fragment and not parts:
                if segment.axis is Axis.FOLLOWING_SIBLING:
                    # a sibling axis needs a context element, leave it for the engine to reject
                    css = FOLLOWING_SIBLING_PREFIX + css
                fragment = css
            elif segment.axis is Axis.FOLLOWING_SIBLING:
                fragment += f" ~ {css}"
            else:
                fragment += f" > {css}"

        if fragment:
            parts.append(fragment)

        return parts

    def has_parent(self) -> bool:
        return PARENT in self.parts()

    def to_css(self) -> str:
        converted = ""
        for part in self.parts():
            if part == PARENT:
                converted += f" > {PARENT}" if converted else PARENT
            else:
                converted += part
        return converted
