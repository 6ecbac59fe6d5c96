"""
Data Extractor
"""
__version__ = "0.0.1"

from typing import Mapping

from .exceptions import (
    DocumentParseError,
    ExtractorError,
    InvalidPathError,
    PathExtractionError,
    ResultAccessError,
    ResultTypeError,
    SelectorGrammarError,
)
from .extractors import (
    CssSelectorDataExtractor,
    DataExtractor,
    JsonDataExtractor,
    PathDataExtractor,
    XmlDataExtractor,
    XPathDataExtractor,
)
from .models.result import ExtractionResult, NotFound, ValueKind
from .settings import Settings, settings


def extract_html(raw_content: str, selection: Mapping[str, str]) -> ExtractionResult:
    """Shortcut for XmlDataExtractor().extract() with the default settings."""
    return XmlDataExtractor().extract(raw_content, selection)


def extract_json(raw_content: str, selection: Mapping[str, str]) -> ExtractionResult:
    """Shortcut for JsonDataExtractor().extract()."""
    return JsonDataExtractor().extract(raw_content, selection)


__all__ = [
    "CssSelectorDataExtractor",
    "DataExtractor",
    "DocumentParseError",
    "ExtractionResult",
    "ExtractorError",
    "InvalidPathError",
    "JsonDataExtractor",
    "NotFound",
    "PathDataExtractor",
    "PathExtractionError",
    "ResultAccessError",
    "ResultTypeError",
    "SelectorGrammarError",
    "Settings",
    "ValueKind",
    "XPathDataExtractor",
    "XmlDataExtractor",
    "extract_html",
    "extract_json",
    "settings",
]
