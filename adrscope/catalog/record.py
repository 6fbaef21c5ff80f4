"""
Record assembly for ADR files.

A Record is one fully decoded and rendered document. Its identifier is the
filename stem of its source locator. Identifiers are not checked for
uniqueness: two sources with the same stem yield two records with the same id,
and downstream views count both under that id.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import PurePath
from typing import Dict, Optional, Tuple, Union

from .header import extract_header
from .markdown_renderer import MarkdownRenderer, default_renderer
from .metadata_parser import Metadata, Status, StatusWarningTracker, decode_metadata

Locator = Union[str, "os.PathLike[str]"]


def record_id_from_locator(locator: Locator) -> str:
    """Derive the record identifier from a locator's filename stem.

    Example:
        >>> record_id_from_locator("docs/decisions/adr_0001.md")
        'adr_0001'
    """
    return PurePath(locator).stem or "unknown"


def filename_from_locator(locator: Locator) -> str:
    return PurePath(locator).name or "unknown.md"


@dataclass(frozen=True)
class Record:
    """One decoded ADR."""
    id: str
    filename: str
    source: str  # Locator as given, for messages and copying the source
    metadata: Metadata
    body_markdown: str
    body_html: str
    body_text: str

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def description(self) -> str:
        return self.metadata.description

    @property
    def status(self) -> Status:
        return self.metadata.status

    @property
    def category(self) -> str:
        return self.metadata.category

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.metadata.tags

    @property
    def author(self) -> str:
        return self.metadata.author

    @property
    def project(self) -> str:
        return self.metadata.project

    @property
    def technologies(self) -> Tuple[str, ...]:
        return self.metadata.technologies

    @property
    def related(self) -> Tuple[str, ...]:
        return self.metadata.related

    @property
    def created(self) -> Optional[date]:
        return self.metadata.created

    @property
    def updated(self) -> Optional[date]:
        return self.metadata.updated

    def to_dict(self) -> Dict:
        """JSON-ready form used by the viewer."""
        return {
            "id": self.id,
            "filename": self.filename,
            "frontmatter": self.metadata.model_dump(mode="json", by_alias=True),
            "body_html": self.body_html,
            "body_text": self.body_text,
        }


def assemble_record(
    locator: Locator,
    metadata: Metadata,
    body_markdown: str,
    body_html: str,
    body_text: str,
) -> Record:
    """Combine decoded metadata and rendered body into a Record."""
    return Record(
        id=record_id_from_locator(locator),
        filename=filename_from_locator(locator),
        source=os.fspath(locator),
        metadata=metadata,
        body_markdown=body_markdown,
        body_html=body_html,
        body_text=body_text,
    )


def parse_record(
    locator: Locator,
    text: str,
    renderer: Optional[MarkdownRenderer] = None,
    tracker: Optional[StatusWarningTracker] = None,
) -> Record:
    """Extract, decode, render and assemble one document.

    Raises:
        MetadataError: Any of MalformedHeader, SchemaError, MissingField or
            DateParseError
    """
    renderer = renderer or default_renderer()

    block, body = extract_header(text)
    metadata = decode_metadata(block, tracker)

    return assemble_record(
        locator,
        metadata,
        body_markdown=body,
        body_html=renderer.to_html(body),
        body_text=renderer.to_plain_text(body),
    )
