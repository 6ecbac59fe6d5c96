from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JSONPathError

from ..exceptions import DocumentParseError, SelectorGrammarError
from ..models.result import ExtractionResult, NotFound
from .base import DataExtractor, OutputKey, Selector

__all__ = ("JsonDataExtractor",)

log = logging.getLogger(__name__)


class JsonDataExtractor(DataExtractor):
    """
    Extracts data from JSON content using JsonPath expressions.

    A path without match is NotFound, a single match returns its value
    unchanged (lists stay lists, objects stay mappings) and several matches
    return the list of their values.

    Example:
        >>> JsonDataExtractor().extract('{"a": {"b": 5}}', {"value": "$.a.b"})
        ExtractionResult({'value': 5})
    """

    def parse(self, raw_content: str) -> Any:
        try:
            return json.loads(raw_content)
        except json.JSONDecodeError as e:
            raise DocumentParseError(f"Unable to parse content as JSON: {e}") from e

    def select(self, document: Any, selector: Selector) -> Any:
        try:
            expression = jsonpath_parse(selector)
        except JSONPathError as e:
            raise SelectorGrammarError(f"Invalid JsonPath [{selector}]: {e}") from e

        matches = expression.find(document)
        if not matches:
            return NotFound
        if len(matches) == 1:
            value = matches[0].value
            # null is no value
            return NotFound if value is None else value
        return [match.value for match in matches]

    def extract(self, raw_content: str, selection: Mapping[OutputKey, Selector]) -> ExtractionResult:
        if not raw_content or not raw_content.strip():
            return ExtractionResult({key: NotFound for key in selection})

        document = self.parse(raw_content)
        result: Dict[OutputKey, Any] = {}
        for key, selector in selection.items():
            log.debug(f"{self.__class__.__name__} evaluates [{key}] => [{selector}]")
            result[key] = self.select(document, selector)
        return ExtractionResult(result)
