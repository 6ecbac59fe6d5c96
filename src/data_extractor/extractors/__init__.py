from __future__ import annotations

from .base import DataExtractor, ElementDataExtractor, OutputKey, Selector
from .css import CssSelectorDataExtractor
from .json import JsonDataExtractor
from .path import PathDataExtractor
from .xml import XmlDataExtractor
from .xpath import XPathDataExtractor

__all__ = (
    "CssSelectorDataExtractor",
    "DataExtractor",
    "ElementDataExtractor",
    "JsonDataExtractor",
    "OutputKey",
    "PathDataExtractor",
    "Selector",
    "XPathDataExtractor",
    "XmlDataExtractor",
)
