from __future__ import annotations

from typing import Any, Iterable, List, Optional

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString, Script, Stylesheet

from ..exceptions import ExtractorError
from ..models.selector import PARENT
from ..parsers import Descendant, split_steps
from ..utils import normalize_str
from .base import DATA_NODE_TAGS, ElementDataExtractor, Selector

__all__ = ("CssSelectorDataExtractor",)

SCOPE = ":scope"


def _unique(elements: Iterable[Tag]) -> List[Tag]:
    """Drops duplicates by identity and keeps document order of first appearance."""
    seen = set()
    unique = []
    for element in elements:
        if id(element) not in seen:
            seen.add(id(element))
            unique.append(element)
    return unique


def _select(roots: Iterable[Tag], css: str) -> List[Tag]:
    compiled = soupsieve.compile(css)
    return _unique(match for root in roots for match in compiled.select(root))


def _parents(elements: Iterable[Tag]) -> List[Tag]:
    return _unique(
        element.parent
        for element in elements
        if element.parent is not None and not isinstance(element.parent, BeautifulSoup)
    )


class CssSelectorDataExtractor(ElementDataExtractor[BeautifulSoup, Tag]):
    """
    Translates XPath-like selectors into CSS selectors and evaluates them
    with BeautifulSoup and soupsieve.

    Each descendant step ('//') of a selector is translated on its own.
    The first step is selected against the whole document, every further
    step is selected below the elements found so far.

    Example:
        >>> extractor = CssSelectorDataExtractor()
        >>> result = extractor.extract('<div id="title">Hello</div>', {"title": "//div[@id='title']/text()"})
        >>> result["title"]
        'Hello'
    """

    def parse(self, raw_content: str) -> BeautifulSoup:
        return BeautifulSoup(raw_content, self.settings.HTML_PARSER, multi_valued_attributes=None)

    def _apply(self, roots: List[Tag], descendant: Descendant) -> List[Tag]:
        """Selects a step below `roots`, resolving parent markers on the way."""
        elements: Optional[List[Tag]] = None

        for part in descendant.parts():
            if part == PARENT:
                elements = _parents(roots if elements is None else elements)
            elif elements is None:
                elements = _select(roots, part)
            else:
                elements = _select(elements, f"{SCOPE}{part}")

        return roots if elements is None else elements

    def select(self, document: BeautifulSoup, selector: Selector) -> Any:
        descendants = [Descendant(step) for step in split_steps(selector)]
        if not descendants:
            raise ExtractorError(f"Selector [{selector}] doesn't contain any step")

        first = descendants.pop(0)
        elements = self._apply([document], first)

        last = descendants.pop() if descendants else first

        for descendant in descendants:
            elements = self._apply(elements, descendant)

        if last.has_terminating_child():
            if last is not first:
                elements = self._apply(elements, last)
            terminating_child = last.terminating_child
        elif last.is_terminating_child():
            terminating_child = last.to_css()
        else:
            if last is not first:
                elements = self._apply(elements, last)
            terminating_child = ""

        return self.element_selection(elements, terminating_child)

    def text_of(self, element: Tag) -> str:
        return normalize_str(element.get_text())

    def data_nodes_of(self, element: Tag) -> List[str]:
        if element.name not in DATA_NODE_TAGS:
            return []
        return [
            str(child).strip()
            for child in element.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        ]

    def text_nodes_of(self, element: Tag) -> List[str]:
        if element.name in DATA_NODE_TAGS:
            return []
        texts = []
        for child in element.children:
            if not isinstance(child, NavigableString):
                continue
            if isinstance(child, (PreformattedString, Script, Stylesheet)):
                continue
            text = normalize_str(child)
            if text:
                texts.append(text)
        return texts

    def attribute_of(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value
