"""
Metadata parser for ADR files.

Decodes the YAML frontmatter block into a Metadata model.

Format:
---
title: Use PostgreSQL          # required
description: One-line summary
category: database
status: accepted               # proposed, accepted, deprecated, superseded
created: 2025-01-15            # YYYY-MM-DD
tags:
    - storage
    - sql
related:
    - adr_0002.md
---

Decoding is lenient: unknown keys are ignored, every field except title has a
default, and an unrecognized status falls back to 'proposed' with a warning
logged once per distinct value.
"""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import DateParseError, MissingField, SchemaError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATE_FIELDS = ("created", "updated")


class Status(str, Enum):
    """Lifecycle state of a decision record."""

    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    DEPRECATED = "deprecated"
    SUPERSEDED = "superseded"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def all(cls) -> Tuple["Status", ...]:
        """Return every status in lifecycle order."""
        return tuple(cls)

    @property
    def css_class(self) -> str:
        return f"status-{self.value}"

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]

    @property
    def emoji(self) -> str:
        return _STATUS_EMOJI[self]


_STATUS_COLORS = {
    Status.PROPOSED: "#f59e0b",
    Status.ACCEPTED: "#10b981",
    Status.DEPRECATED: "#ef4444",
    Status.SUPERSEDED: "#6b7280",
}

_STATUS_EMOJI = {
    Status.PROPOSED: "\U0001F7E1",
    Status.ACCEPTED: "✅",
    Status.DEPRECATED: "\U0001F534",
    Status.SUPERSEDED: "⚪",
}


class StatusWarningTracker:
    """Thread-safe set of unknown status values that were already reported.

    One tracker is shared by every decoder in a run so that each distinct
    unknown value is warned about once, even when decoding in parallel.
    """

    def __init__(self) -> None:
        self._seen: set = set()
        self._lock = threading.Lock()

    def first_sighting(self, value: str) -> bool:
        """Record value and return True if it had not been seen before."""
        with self._lock:
            if value in self._seen:
                return False
            self._seen.add(value)
            return True

    @property
    def seen(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._seen)

    def reset(self) -> None:
        with self._lock:
            self._seen.clear()


# Process-wide tracker used when the caller does not inject one
DEFAULT_STATUS_TRACKER = StatusWarningTracker()


class Metadata(BaseModel):
    """Decoded frontmatter of one record."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str = ""
    description: str = ""
    doc_type: str = Field("adr", alias="type")
    category: str = ""
    tags: Tuple[str, ...] = ()
    status: Status = Status.PROPOSED
    created: Optional[date] = None
    updated: Optional[date] = None
    author: str = ""
    project: str = ""
    technologies: Tuple[str, ...] = ()
    audience: Tuple[str, ...] = ()
    related: Tuple[str, ...] = ()

    @field_validator("title", "description", "doc_type", "category", "author", "project", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # YAML types bare numbers and booleans; keep them as written
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("tags", "technologies", "audience", "related", mode="before")
    @classmethod
    def _coerce_sequence(cls, value: Any) -> Any:
        if isinstance(value, (str, int, float)):
            value = [value]
        if isinstance(value, (list, tuple)):
            return tuple(str(item) if isinstance(item, (int, float)) else item for item in value)
        return value


class _MetadataLoader(yaml.SafeLoader):
    """SafeLoader that leaves ISO dates as plain strings."""
    pass


_MetadataLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def decode_status(value: Any, tracker: Optional[StatusWarningTracker] = None) -> Status:
    """Decode a status value leniently.

    Matching is case-insensitive against the four canonical names. Anything
    else decodes to Status.PROPOSED; unknown non-empty values are logged once
    per distinct lowercased value.

    Example:
        >>> decode_status("Accepted")
        <Status.ACCEPTED: 'accepted'>
        >>> decode_status("")
        <Status.PROPOSED: 'proposed'>
    """
    if value is None:
        return Status.PROPOSED

    text = str(value)
    if not text:
        return Status.PROPOSED

    lowered = text.lower()
    try:
        return Status(lowered)
    except ValueError:
        tracker = tracker or DEFAULT_STATUS_TRACKER
        if tracker.first_sighting(lowered):
            logger.warning(f"Unknown ADR status '{lowered}', defaulting to 'proposed'")
        return Status.PROPOSED


def decode_date(field: str, value: Any) -> Optional[date]:
    """Decode an optional YYYY-MM-DD date.

    Raises:
        DateParseError: If value is present, non-empty and malformed
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(field, value)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(field, value) from exc


def parse_yaml_block(block: str) -> Dict[str, Any]:
    """Parse the metadata block into a plain mapping.

    Raises:
        SchemaError: If the YAML is invalid or not a mapping
    """
    try:
        data = yaml.load(block, Loader=_MetadataLoader)
    except yaml.YAMLError as exc:
        raise SchemaError(f"YAML parsing failed: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SchemaError(f"metadata must be a mapping, got {type(data).__name__}")

    return data


def decode_metadata(block: str, tracker: Optional[StatusWarningTracker] = None) -> Metadata:
    """Decode a metadata block into Metadata.

    Args:
        block: YAML text between the frontmatter delimiters
        tracker: Collaborator deduplicating unknown-status warnings
            (default: the process-wide tracker)

    Returns:
        Metadata model

    Raises:
        SchemaError: If the YAML is invalid or a value has the wrong shape
        DateParseError: If created/updated is present but malformed
        MissingField: If title is absent or empty

    Example:
        >>> meta = decode_metadata("title: Use PostgreSQL\\nstatus: ACCEPTED")
        >>> meta.status
        <Status.ACCEPTED: 'accepted'>
    """
    raw = parse_yaml_block(block)

    # Null values fall back to field defaults; non-string keys are never fields
    data = {
        key: value for key, value in raw.items()
        if isinstance(key, str) and value is not None
    }

    data["status"] = decode_status(data.get("status"), tracker)
    for field in DATE_FIELDS:
        data[field] = decode_date(field, data.get(field))

    try:
        metadata = Metadata.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"'{'.'.join(str(part) for part in error['loc'])}': {error['msg']}"
            for error in exc.errors()
        )
        raise SchemaError(f"invalid metadata values: {problems}") from exc

    if not metadata.title:
        raise MissingField("title")

    return metadata


def dump_metadata(metadata: Metadata) -> str:
    """Serialize the explicitly set fields of metadata back to YAML."""
    data = metadata.model_dump(mode="json", by_alias=True, exclude_defaults=True)
    # Title is required even when empty so the block stays decodable
    data = {"title": metadata.title, **data}
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False).strip()
