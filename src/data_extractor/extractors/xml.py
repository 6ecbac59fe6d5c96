from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..exceptions import SelectorGrammarError
from ..models.result import ExtractionResult
from ..parsers import tokenize_selector
from ..settings import Settings
from .base import DataExtractor, OutputKey, Selector
from .css import CssSelectorDataExtractor
from .xpath import XPathDataExtractor

__all__ = ("XmlDataExtractor",)

log = logging.getLogger(__name__)


class XmlDataExtractor(DataExtractor):
    """
    Extracts data from HTML/XML content.

    The CSS strategy runs first. If it fails for any selector, the whole
    selection is extracted again with the XPath strategy. Every selector is
    tokenized before either strategy runs, so unsupported grammar is reported
    regardless of the order of keys and is never retried.

    The strategies read an index filter differently: "li[1]" is the second
    sibling for the CSS strategy (zero-based) and the first for the XPath
    strategy (one-based). A fallback therefore changes the result of every
    index filter in the selection.

    Example:
        >>> XmlDataExtractor().extract("<p>Hello</p>", {"greeting": "//p/text()"})
        ExtractionResult({'greeting': 'Hello'})
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        primary: Optional[DataExtractor] = None,
        fallback: Optional[DataExtractor] = None,
    ):
        self.primary = primary if primary is not None else CssSelectorDataExtractor(config)
        self.fallback = fallback if fallback is not None else XPathDataExtractor(config)

    def extract(self, raw_content: str, selection: Mapping[OutputKey, Selector]) -> ExtractionResult:
        for selector in selection.values():
            tokenize_selector(selector)

        try:
            return self.primary.extract(raw_content, selection)
        except SelectorGrammarError:
            raise
        except Exception as e:
            log.warning(
                f"{self.primary.__class__.__name__} failed ({e.__class__.__name__}: {e}), "
                f"retrying {len(selection)} selector(s) with {self.fallback.__class__.__name__}"
            )
        return self.fallback.extract(raw_content, selection)
