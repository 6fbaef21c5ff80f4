"""
Text, JSON and markdown renderings of RecordStatistics.
"""

from __future__ import annotations

import json
from enum import Enum

from ..views.stats import RecordStatistics


class StatsFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"

    @classmethod
    def parse(cls, value: str) -> "StatsFormat":
        lowered = value.lower()
        if lowered == "md":
            return cls.MARKDOWN
        try:
            return cls(lowered)
        except ValueError:
            raise ValueError(f"invalid format: {value}") from None


def format_statistics(stats: RecordStatistics, fmt: StatsFormat = StatsFormat.TEXT) -> str:
    if fmt == StatsFormat.JSON:
        return json.dumps(stats.to_dict(), indent=2, ensure_ascii=False)
    if fmt == StatsFormat.MARKDOWN:
        return format_markdown(stats)
    return stats.summary()


def _table(header: str, counts) -> list:
    lines = [f"| {header} | Count |", "|" + "-" * (len(header) + 2) + "|-------|"]
    lines.extend(f"| {key} | {count} |" for key, count in counts.items())
    return lines


def format_markdown(stats: RecordStatistics) -> str:
    lines = ["# ADR Statistics", "", f"**Total ADRs:** {stats.total_count}", ""]

    lines += ["## By Status", ""]
    lines += _table("Status", stats.by_status)

    if stats.by_category:
        lines += ["", "## By Category", ""]
        lines += _table("Category", stats.by_category)

    if stats.by_author:
        lines += ["", "## By Author", ""]
        lines += _table("Author", stats.by_author)

    if stats.earliest_date and stats.latest_date:
        lines += [
            "",
            "## Date Range",
            "",
            f"- **Earliest:** {stats.earliest_date.isoformat()}",
            f"- **Latest:** {stats.latest_date.isoformat()}",
        ]

    return "\n".join(lines) + "\n"
