"""
GitHub Wiki page generation for ADRs.

Produces an index, listings grouped by status and by category, a timeline
and a statistics page. Pages link to the source files, which the wiki
command copies next to them.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ..catalog.metadata_parser import Status
from ..catalog.record import Record
from ..views.stats import RecordStatistics

UNCATEGORIZED = "Uncategorized"


def status_badge(status: Status) -> str:
    return f"`{status.value}`"


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[:max(max_len - 3, 0)] + "..."


class WikiRenderer:
    """Renders wiki markdown pages from records."""

    def render_index(self, records: Sequence[Record], pages_url: Optional[str] = None) -> str:
        lines = ["# ADR Index", ""]

        if pages_url:
            lines += [f"> [View Interactive ADRScope Viewer]({pages_url})", ""]

        lines += [
            "| ID | Title | Status | Category | Created |",
            "|:---|:------|:------:|:---------|:--------|",
        ]
        for record in records:
            created = record.created.isoformat() if record.created else "-"
            lines.append(
                f"| {record.id} | [{record.title}]({record.filename}) | "
                f"{status_badge(record.status)} | {record.category} | {created} |"
            )

        return "\n".join(lines) + "\n"

    def render_by_status(self, records: Sequence[Record]) -> str:
        lines = ["# ADRs by Status", ""]

        groups: Dict[Status, List[Record]] = defaultdict(list)
        for record in records:
            groups[record.status].append(record)

        for status in Status.all():
            group = groups.get(status)
            if not group:
                continue
            lines += [f"## {status.emoji} {status}", ""]
            lines += [f"- [{r.title}]({r.filename}) - {r.description}" for r in group]
            lines.append("")

        return "\n".join(lines) + "\n"

    def render_by_category(self, records: Sequence[Record]) -> str:
        lines = ["# ADRs by Category", ""]

        groups: Dict[str, List[Record]] = defaultdict(list)
        for record in records:
            groups[record.category or UNCATEGORIZED].append(record)

        for category in sorted(groups):
            lines += [f"## {category}", ""]
            lines += [
                f"- [{r.title}]({r.filename}) {status_badge(r.status)} - {truncate(r.description, 80)}"
                for r in groups[category]
            ]
            lines.append("")

        return "\n".join(lines) + "\n"

    def render_timeline(self, records: Sequence[Record]) -> str:
        """Dated records newest first, grouped by month, then undated ones."""
        lines = ["# ADR Timeline", ""]

        dated = sorted((r for r in records if r.created), key=lambda r: r.created, reverse=True)
        undated = [r for r in records if not r.created]

        current_month = None
        for record in dated:
            month = (record.created.year, record.created.month)
            if month != current_month:
                current_month = month
                lines += ["", f"## {calendar.month_name[month[1]]} {month[0]}", ""]
            lines.append(
                f"- **{record.created.isoformat()}** [{record.title}]({record.filename}) "
                f"{status_badge(record.status)}"
            )

        if undated:
            lines += ["", "## Undated", ""]
            lines += [f"- [{r.title}]({r.filename}) {status_badge(r.status)}" for r in undated]

        return "\n".join(lines) + "\n"

    def render_statistics(self, stats: RecordStatistics) -> str:
        lines = ["# ADR Statistics", "", f"**Total ADRs:** {stats.total_count}", ""]

        lines += ["## By Status", ""]
        for status in Status.all():
            lines.append(f"- {status.emoji} {status}: {stats.by_status.get(status.value, 0)}")
        lines.append("")

        if stats.by_category:
            lines += ["## By Category", ""]
            for category, count in RecordStatistics.top_n(stats.by_category, len(stats.by_category)):
                lines.append(f"- {category}: {count}")
            lines.append("")

        if stats.by_author:
            lines += ["## By Author", ""]
            for author, count in RecordStatistics.top_n(stats.by_author, 10):
                lines.append(f"- {author}: {count}")
            lines.append("")

        if stats.earliest_date and stats.latest_date:
            lines += [
                "## Date Range",
                "",
                f"- **Earliest:** {stats.earliest_date.isoformat()}",
                f"- **Latest:** {stats.latest_date.isoformat()}",
            ]

        return "\n".join(lines) + "\n"

    def render_all(self, records: Sequence[Record], pages_url: Optional[str] = None) -> List[Tuple[str, str]]:
        """Render every page as (filename, content) pairs."""
        stats = RecordStatistics.from_records(records)
        return [
            ("ADR-Index.md", self.render_index(records, pages_url)),
            ("ADR-By-Status.md", self.render_by_status(records)),
            ("ADR-By-Category.md", self.render_by_category(records)),
            ("ADR-Timeline.md", self.render_timeline(records)),
            ("ADR-Statistics.md", self.render_statistics(stats)),
        ]
