"""
ADRScope: decode, validate and present Architecture Decision Records.

Each ADR is a markdown file with a YAML frontmatter header. The catalog
package turns files into Records; views derive the relationship graph,
facets and statistics; validation checks records against rules; output
renders an HTML viewer, wiki pages and statistics reports.
"""

__version__ = "1.0.0"

from .errors import (
    AdrScopeError,
    DateParseError,
    MalformedHeader,
    MetadataError,
    MissingField,
    NoRecordsFound,
    OutputWriteError,
    SchemaError,
    SourceReadError,
)
from .catalog import BuildResult, CatalogBuilder, Metadata, Record, Status, parse_record
from .views import Facets, Graph, RecordStatistics, build_facets, build_graph, compute_statistics
from .validation import Severity, ValidationIssue, ValidationReport, Validator, default_rules

__all__ = [
    "__version__",
    "AdrScopeError",
    "DateParseError",
    "MalformedHeader",
    "MetadataError",
    "MissingField",
    "NoRecordsFound",
    "OutputWriteError",
    "SchemaError",
    "SourceReadError",
    "BuildResult",
    "CatalogBuilder",
    "Metadata",
    "Record",
    "Status",
    "parse_record",
    "Facets",
    "Graph",
    "RecordStatistics",
    "build_facets",
    "build_graph",
    "compute_statistics",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "Validator",
    "default_rules",
]
