"""
Selector Models
===============

This module defines the token models a selector is broken into before it is
translated into a CSS selector.

Selector Grammar:
=================

    selector := '/'? '/'? step ('//' step)*
    step     := segment ('/' segment)*
    segment  := ['following-sibling::'] name filter* | 'text()' | 'node()' | '@' name | '..'
    filter   := '[' filter-body ']'

Supported filter bodies:

    [@attr='value']              -> FilterKind.ATTRIBUTE_EQUALS
    [contains(@attr, 'value')]   -> FilterKind.ATTRIBUTE_CONTAINS
    [contains(text(), 'value')]  -> FilterKind.TEXT_CONTAINS
    [2]                          -> FilterKind.INDEX
    [@attr]                      -> FilterKind.ATTRIBUTE_EXISTS

String literals are delimited by single quotes and may contain '/', '[' and ']'.


Example:
========

    //table[@id='eplist']/tbody/tr//td[contains(@class, 'duration')]/text()

is split into two steps (one per '//'):

    Step 1: table[@id='eplist'] / tbody / tr
    Step 2: td[contains(@class, 'duration')] / text()

Step 2 consists of the segments:

    Segment(name="td", filters=(StepFilter(kind=ATTRIBUTE_CONTAINS, attribute="class", value="duration"),))
    Segment(name="text()")   # terminal accessor
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = (
    "PARENT",
    "TEXT",
    "NODE",
    "FOLLOWING_SIBLING_PREFIX",
    "Axis",
    "FilterKind",
    "StepFilter",
    "Segment",
)

PARENT = ".."
TEXT = "text()"
NODE = "node()"
FOLLOWING_SIBLING_PREFIX = "following-sibling::"


class Axis(str, Enum):
    """
    Relation of a segment to the segment before it.

    - CHILD: "div/span" selects span elements which are direct children of div
    - FOLLOWING_SIBLING: "div/following-sibling::span" selects span elements after div
    """
    CHILD = "child"
    FOLLOWING_SIBLING = "following-sibling"


class FilterKind(str, Enum):
    """The five filter forms which can be expressed as CSS."""
    ATTRIBUTE_EQUALS = "attribute_equals"
    ATTRIBUTE_CONTAINS = "attribute_contains"
    TEXT_CONTAINS = "text_contains"
    INDEX = "index"
    ATTRIBUTE_EXISTS = "attribute_exists"


class StepFilter(BaseModel):
    """A single bracket filter of a segment, e.g. [@class='title']."""

    model_config = ConfigDict(frozen=True)

    kind: FilterKind
    raw: str = Field(description="The filter as written in the selector, including brackets.")
    attribute: Optional[str] = Field(default=None, description="Attribute name without '@'.")
    value: Optional[str] = Field(default=None, description="String literal without quotes.")
    index: Optional[int] = Field(default=None, ge=0, description="Zero-based sibling index.")


class Segment(BaseModel):
    """
    One '/'-delimited part of a step.

    Examples:
        "span[@itemprop='genre']" -> Segment(name="span", filters=(...))
        "following-sibling::*"    -> Segment(name="*", axis=Axis.FOLLOWING_SIBLING)
        "@href"                   -> Segment(name="@href")   # terminal
        ".."                      -> Segment(name="..")      # parent
    """

    model_config = ConfigDict(frozen=True)

    name: str
    raw: str = Field(description="The segment as written in the selector.")
    axis: Axis = Axis.CHILD
    filters: Tuple[StepFilter, ...] = ()

    @property
    def is_parent(self) -> bool:
        return self.name == PARENT and not self.filters

    @property
    def is_terminal(self) -> bool:
        """True for value accessors: text(), node() and attributes."""
        return self.name in (TEXT, NODE) or self.name.startswith("@")
