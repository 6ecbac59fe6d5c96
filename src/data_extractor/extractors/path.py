from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidPathError, PathExtractionError
from ..models.result import ExtractionResult
from ..settings import Settings, settings
from .base import DataExtractor, OutputKey, Selector

__all__ = ("PathDataExtractor",)

log = logging.getLogger(__name__)


class PathDataExtractor:
    """
    Applies a DataExtractor to a single file or to every file of a directory.

    Files of a directory are read and extracted concurrently in worker threads,
    at most `MAX_WORKERS` at a time. Subdirectories are not visited.

    Example:
        >>> extractor = PathDataExtractor(XmlDataExtractor(), file_suffix=".html")
        >>> results = asyncio.run(extractor.extract("pages/", {"title": "//h1/text()"}))
    """

    def __init__(
        self,
        data_extractor: DataExtractor,
        file_suffix: Optional[str] = None,
        config: Optional[Settings] = None,
    ):
        self.data_extractor = data_extractor
        self.settings = config if config is not None else settings
        self.file_suffix = file_suffix if file_suffix is not None else self.settings.FILE_SUFFIX

    def files_of(self, directory: Path) -> List[Path]:
        return sorted(p for p in directory.glob(f"*{self.file_suffix}") if p.is_file())

    def extract_file(self, file: Path, selection: Mapping[OutputKey, Selector]) -> ExtractionResult:
        raw_content = file.read_text(encoding=self.settings.ENCODING)
        return self.data_extractor.extract(raw_content, selection)

    async def extract(
        self,
        path: Union[str, Path],
        selection: Mapping[OutputKey, Selector],
    ) -> List[ExtractionResult]:
        """
        Extracts data from a file or from all files with the configured suffix in a directory.

        Args:
            path: A file or a directory.
            selection: Output key to selector, passed to the DataExtractor for each file.

        Returns:
            One ExtractionResult per file. Order across files is not guaranteed.

        Raises:
            InvalidPathError: If `path` is neither an existing file nor an existing directory.
            PathExtractionError: If at least one file failed. Raised after all files have been processed.
        """
        path = Path(path)

        if path.is_file():
            return [await asyncio.to_thread(self.extract_file, path, selection)]

        if not path.is_dir():
            raise InvalidPathError(f"Given path [{path}] does not exist.")

        files = self.files_of(path)
        if not files:
            log.info(f"No [*{self.file_suffix}] files found in {path}")
            return []

        sem = asyncio.Semaphore(max(1, min(self.settings.MAX_WORKERS, len(files))))

        async def extract_one(file: Path) -> Tuple[Optional[ExtractionResult], Optional[BaseException]]:
            async with sem:
                try:
                    return await asyncio.to_thread(self.extract_file, file, selection), None
                except Exception as e:
                    log.warning(f"Extraction failed for {file}: {e}")
                    return None, e

        outcomes = await asyncio.gather(*(extract_one(f) for f in files))

        results: List[ExtractionResult] = []
        failures: List[Tuple[Path, BaseException]] = []
        for file, (result, error) in zip(files, outcomes):
            if error is not None:
                failures.append((file, error))
            else:
                results.append(result)

        if failures:
            raise PathExtractionError(failures)

        log.info(f"Extracted {len(results)} file(s) from {path}")
        return results
