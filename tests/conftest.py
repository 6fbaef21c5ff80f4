"""Shared pytest fixtures and document builders."""

from __future__ import annotations

from typing import Iterable, Optional

import pytest

from adrscope.catalog import Record, StatusWarningTracker, parse_record


def make_document(title: Optional[str] = "Use PostgreSQL", body: str = "# Context\n\nWe need a database.", **fields) -> str:
    """Build an ADR document. List values become YAML flow sequences."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    for key, value in fields.items():
        if isinstance(value, (list, tuple)):
            lines.append(f"{key}: [{', '.join(value)}]")
        else:
            lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body + "\n"


def make_record(locator: str = "adr_0001.md", tracker: Optional[StatusWarningTracker] = None, **kwargs) -> Record:
    return parse_record(locator, make_document(**kwargs), tracker=tracker or StatusWarningTracker())


def make_records(specs: Iterable[dict]) -> list:
    return [make_record(f"adr_{i:04d}.md", **spec) for i, spec in enumerate(specs, start=1)]


@pytest.fixture
def tracker():
    """Fresh unknown-status tracker so warn-once state never leaks between tests."""
    return StatusWarningTracker()


@pytest.fixture
def adr_dir(tmp_path):
    """Directory with three decodable ADRs and one without a header."""
    decisions = tmp_path / "docs" / "decisions"
    decisions.mkdir(parents=True)
    (decisions / "adr_0001.md").write_text(make_document(
        "Use PostgreSQL", status="accepted", category="database", created="2025-01-15",
        description="Primary datastore", author="alice", tags=["storage", "sql"],
    ))
    (decisions / "adr_0002.md").write_text(make_document(
        "Adopt Redis", status="proposed", category="cache", created="2025-03-02",
        description="Caching layer", author="bob", related=["adr_0001.md"],
    ))
    (decisions / "adr_0003.md").write_text(make_document(
        "Drop MongoDB", status="deprecated", related=["adr_0099.md"],
    ))
    (decisions / "notes.md").write_text("Just some notes without frontmatter\n")
    return decisions
