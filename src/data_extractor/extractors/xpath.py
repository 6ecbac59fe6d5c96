from __future__ import annotations

from typing import Any, List, Optional, Tuple

from lxml import etree

from ..exceptions import SelectorGrammarError
from ..models.result import NotFound
from ..models.selector import NODE, TEXT
from ..utils import normalize_str
from .base import DATA_NODE_TAGS, ElementDataExtractor, Selector

__all__ = ("XPathDataExtractor", "split_terminal")

# Text nodes below an element, leaving out script and style content
VISIBLE_TEXT = "descendant-or-self::text()[not(parent::script or parent::style)]"


def split_terminal(selector: Selector) -> Tuple[str, str]:
    """
    Separates the element path from the value accessor of a selector.

    Examples:
        >>> split_terminal("//div/span/@class")
        ('//div/span', '@class')
        >>> split_terminal("//div//text()")
        ('//div', 'text()')
        >>> split_terminal("//ul/li")
        ('//ul/li', '')
    """
    selector = selector.strip()

    head, separator, tail = selector.rpartition("/")
    if separator and tail.startswith("@") and "]" not in tail:
        return head.rstrip("/"), tail
    if not separator and selector.startswith("@"):
        return "", selector

    for accessor in (TEXT, NODE):
        if selector.endswith(accessor):
            return selector[: -len(accessor)].rstrip("/"), accessor

    return selector, ""


class XPathDataExtractor(ElementDataExtractor[Optional[etree._Element], etree._Element]):
    """
    Evaluates selectors with the native XPath engine of lxml.

    Only the element path is handed to lxml. The accessor at the end of the
    selector (text(), node(), @attr) is applied afterwards with the same rules
    as the CSS strategy, so both strategies return the same values.
    """

    def parse(self, raw_content: str) -> Optional[etree._Element]:
        if not raw_content or not raw_content.strip():
            return None
        encoding = self.settings.ENCODING
        parser = etree.HTMLParser(encoding=encoding)
        return etree.HTML(raw_content.encode(encoding), parser=parser)

    def elements(self, document: etree._Element, path: str) -> List[etree._Element]:
        if not path:
            return list(document.iter(etree.Element))

        try:
            found = document.xpath(path)
        except etree.XPathError as error:
            raise SelectorGrammarError(f"Invalid XPath [{path}]: {error}") from error

        if not isinstance(found, list):
            return []
        return [item for item in found if isinstance(getattr(item, "tag", None), str)]

    def select(self, document: Optional[etree._Element], selector: Selector) -> Any:
        if document is None:
            return NotFound
        path, terminating_child = split_terminal(selector)
        return self.element_selection(self.elements(document, path), terminating_child)

    def text_of(self, element: etree._Element) -> str:
        if element.tag in DATA_NODE_TAGS:
            return normalize_str(element.text)
        return normalize_str("".join(element.xpath(VISIBLE_TEXT)))

    def data_nodes_of(self, element: etree._Element) -> List[str]:
        if element.tag not in DATA_NODE_TAGS or element.text is None:
            return []
        return [element.text.strip()]

    def text_nodes_of(self, element: etree._Element) -> List[str]:
        if element.tag in DATA_NODE_TAGS:
            return []
        candidates = [element.text] + [child.tail for child in element]
        return [text for text in (normalize_str(c) for c in candidates) if text]

    def attribute_of(self, element: etree._Element, name: str) -> Optional[str]:
        return element.get(name)
