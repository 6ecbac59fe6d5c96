from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

__all__ = (
    "ExtractorError",
    "SelectorGrammarError",
    "DocumentParseError",
    "ResultAccessError",
    "ResultTypeError",
    "InvalidPathError",
    "PathExtractionError",
)


class ExtractorError(Exception):
    """Base Extractor Error"""


class SelectorGrammarError(ExtractorError):
    """Selector uses syntax which cannot be transformed"""


class DocumentParseError(ExtractorError):
    """Raw content cannot be parsed"""


class ResultAccessError(ExtractorError, KeyError):
    """Requested key is not part of the extraction result"""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class ResultTypeError(ExtractorError, TypeError):
    """Value cannot be returned as the requested type"""


class InvalidPathError(ExtractorError, ValueError):
    """Path is neither an existing file nor an existing directory"""


class PathExtractionError(ExtractorError):
    """One or more files of a directory could not be extracted"""

    def __init__(self, failures: List[Tuple[Path, BaseException]]):
        self.failures = failures
        files = ", ".join(str(path) for path, _ in failures)
        super().__init__(f"Extraction failed for {len(failures)} file(s): {files}")
