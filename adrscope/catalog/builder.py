"""
Catalog builder for ADRScope.

Turns a batch of (locator, text) sources into Records, keeping decode
failures alongside the successes so the caller can report skipped files.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..errors import AdrScopeError, MetadataError, NoRecordsFound, SourceReadError
from ..fs import FileSystem
from .markdown_renderer import MarkdownRenderer
from .metadata_parser import StatusWarningTracker
from .record import Locator, Record, parse_record

logger = logging.getLogger(__name__)

Source = Tuple[Locator, str]


@dataclass
class BuildResult:
    """Records that decoded and (locator, error) pairs for those that did not."""
    records: List[Record] = field(default_factory=list)
    errors: List[Tuple[Locator, AdrScopeError]] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def sorted_records(self) -> List[Record]:
        """Records ordered by identifier."""
        return sorted(self.records, key=lambda record: record.id)


class CatalogBuilder:
    """Builds Records from raw ADR sources."""

    def __init__(
        self,
        renderer: Optional[MarkdownRenderer] = None,
        status_tracker: Optional[StatusWarningTracker] = None,
        workers: int = 1,
    ):
        """Initialize catalog builder.

        Args:
            renderer: Markdown renderer (default: a new MarkdownRenderer)
            status_tracker: Shared unknown-status tracker (default: process-wide)
            workers: Number of decoding threads (1 = sequential)
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.renderer = renderer or MarkdownRenderer()
        self.status_tracker = status_tracker
        self.workers = workers

    def build(self, sources: Iterable[Source]) -> BuildResult:
        """Decode every source.

        Output order follows input order for both records and errors.

        Example:
            >>> builder = CatalogBuilder()
            >>> result = builder.build([("adr_0001.md", "---\\ntitle: Test\\n---\\nBody")])
            >>> result.records[0].id
            'adr_0001'
        """
        sources = list(sources)
        logger.debug(f"Decoding {len(sources)} sources with {self.workers} worker(s)")

        if self.workers == 1 or len(sources) < 2:
            outcomes = [self._decode(source) for source in sources]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                outcomes = list(pool.map(self._decode, sources))

        result = BuildResult()
        for locator, outcome in outcomes:
            if isinstance(outcome, Record):
                result.records.append(outcome)
            else:
                result.errors.append((locator, outcome))

        logger.debug(f"Decoded {len(result.records)} records, {len(result.errors)} failed")
        return result

    def build_from_directory(
        self,
        input_dir: Union[str, Path],
        pattern: str = "**/*.md",
        fs: Optional[FileSystem] = None,
    ) -> BuildResult:
        """Discover, read and decode every matching file under input_dir.

        Raises:
            NoRecordsFound: If no file matches pattern
        """
        fs = fs or FileSystem()
        files = fs.glob(input_dir, pattern)
        if not files:
            raise NoRecordsFound(input_dir)

        sources: List[Source] = []
        read_errors: List[Tuple[Locator, AdrScopeError]] = []
        for path in files:
            try:
                sources.append((path, fs.read_text(path)))
            except SourceReadError as exc:
                logger.warning(f"Skipping unreadable file {path}: {exc}")
                read_errors.append((path, exc))

        result = self.build(sources)
        result.errors = read_errors + result.errors
        return result

    def _decode(self, source: Source) -> Tuple[Locator, Union[Record, MetadataError]]:
        locator, text = source
        try:
            return locator, parse_record(locator, text, self.renderer, self.status_tracker)
        except MetadataError as exc:
            logger.debug(f"Failed to decode {locator}: {exc}")
            return locator, exc
