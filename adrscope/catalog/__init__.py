"""
Catalog module for ADRScope record decoding.

This module provides functionality for:
- Splitting ADR files into frontmatter and body
- Decoding frontmatter into Metadata with lenient defaults
- Rendering markdown bodies to HTML and plain text
- Assembling Records and building whole batches

Frontmatter format (at the top of each .md file):
    ---
    title: Use PostgreSQL       # required
    status: accepted            # proposed, accepted, deprecated, superseded
    category: database
    created: 2025-01-15
    related:                    # optional related records
        - adr_0002.md
    ---

Usage:
    from adrscope.catalog import CatalogBuilder

    builder = CatalogBuilder()
    result = builder.build_from_directory("docs/decisions")
    for locator, error in result.errors:
        print(f"{locator}: {error}")
"""

from .header import extract_header, join_header
from .metadata_parser import (
    DEFAULT_STATUS_TRACKER,
    Metadata,
    Status,
    StatusWarningTracker,
    decode_metadata,
    decode_status,
    dump_metadata,
)
from .markdown_renderer import MarkdownRenderer, to_html, to_plain_text
from .record import Record, assemble_record, parse_record, record_id_from_locator
from .builder import BuildResult, CatalogBuilder

__all__ = [
    "extract_header",
    "join_header",
    "DEFAULT_STATUS_TRACKER",
    "Metadata",
    "Status",
    "StatusWarningTracker",
    "decode_metadata",
    "decode_status",
    "dump_metadata",
    "MarkdownRenderer",
    "to_html",
    "to_plain_text",
    "Record",
    "assemble_record",
    "parse_record",
    "record_id_from_locator",
    "BuildResult",
    "CatalogBuilder",
]
