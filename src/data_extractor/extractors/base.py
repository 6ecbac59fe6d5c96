from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from ..exceptions import ExtractorError
from ..models.result import ExtractionResult, NotFound
from ..models.selector import NODE, TEXT
from ..settings import Settings, settings
from ..utils import normalize_list

__all__ = (
    "OutputKey",
    "Selector",
    "DATA_NODE_TAGS",
    "DataExtractor",
    "ElementDataExtractor",
    "to_output",
)

log = logging.getLogger(__name__)

OutputKey = str
# XPath-like selector for HTML/XML, JsonPath for JSON
Selector = str

# Elements whose content is raw data instead of text
DATA_NODE_TAGS = ("script", "style")

D = TypeVar("D")
E = TypeVar("E")


def to_output(value: Any) -> Any:
    """
    Normalizes the values found for a single selector.

    Nothing found becomes NotFound, a single value is returned as-is and
    multiple values are returned as list.
    """
    if value is NotFound:
        return NotFound
    values = normalize_list(value)
    if not values:
        return NotFound
    return values[0] if len(values) == 1 else values


class DataExtractor(ABC):
    """Extracts specific data from raw content."""

    @abstractmethod
    def extract(self, raw_content: str, selection: Mapping[OutputKey, Selector]) -> ExtractionResult:
        """
        Selectively extracts data from raw content.

        Args:
            raw_content: The raw content, either HTML/XML or JSON.
            selection: Output key to selector. Each key of the selection is part of the result.

        Returns:
            An ExtractionResult with one entry per key of `selection`. Selectors
            which don't match anything are mapped to NotFound.
        """


class ElementDataExtractor(DataExtractor, Generic[D, E]):
    """
    Base for extractors which evaluate selectors against an element tree.

    Subclasses parse the document (type D) and select elements (type E).
    Turning elements into values follows the same rules for every subclass:

    - "text()"  -> the rendered text of each element, whitespace normalized
    - "node()"  -> the trimmed data content (script, style) of each element
    - ""        -> the direct text nodes of each element, trimmed, blanks dropped
    - "@attr"   -> the value of `attr` for each element which carries it
    """

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config if config is not None else settings

    @abstractmethod
    def parse(self, raw_content: str) -> D:
        """Parses raw content into a document."""

    @abstractmethod
    def select(self, document: D, selector: Selector) -> Any:
        """Evaluates a single selector against the document."""

    @abstractmethod
    def text_of(self, element: E) -> str:
        ...

    @abstractmethod
    def data_nodes_of(self, element: E) -> List[str]:
        ...

    @abstractmethod
    def text_nodes_of(self, element: E) -> List[str]:
        ...

    @abstractmethod
    def attribute_of(self, element: E, name: str) -> Optional[str]:
        ...

    def element_selection(self, elements: Iterable[E], terminating_child: str) -> Any:
        elements = list(elements)
        if not elements:
            return NotFound

        if terminating_child == TEXT:
            return [text for text in (self.text_of(e) for e in elements) if text]
        if terminating_child == NODE:
            return [data for e in elements for data in self.data_nodes_of(e)]
        if terminating_child == "":
            return [text for e in elements for text in self.text_nodes_of(e)]
        if terminating_child.startswith("@"):
            name = terminating_child[1:]
            return [value for value in (self.attribute_of(e, name) for e in elements) if value is not None]

        raise ExtractorError(f"Unmapped terminating child [{terminating_child}]")

    def extract(self, raw_content: str, selection: Mapping[OutputKey, Selector]) -> ExtractionResult:
        document = self.parse(raw_content)
        result: Dict[OutputKey, Any] = {}
        for key, selector in selection.items():
            log.debug(f"{self.__class__.__name__} evaluates [{key}] => [{selector}]")
            result[key] = to_output(self.select(document, selector))
        return ExtractionResult(result)
