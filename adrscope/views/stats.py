"""
Statistics aggregation for ADR collections.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ..catalog.metadata_parser import Status
from ..catalog.record import Record
from .facets import count_by_field

K = TypeVar("K")


@dataclass
class RecordStatistics:
    """Aggregated statistics for a batch of records."""
    total_count: int = 0
    by_status: Dict[str, int] = field(default_factory=dict)
    by_category: Dict[str, int] = field(default_factory=dict)
    by_author: Dict[str, int] = field(default_factory=dict)
    by_tag: Dict[str, int] = field(default_factory=dict)
    by_technology: Dict[str, int] = field(default_factory=dict)
    by_project: Dict[str, int] = field(default_factory=dict)
    by_year: Dict[int, int] = field(default_factory=dict)
    earliest_date: Optional[date] = None
    latest_date: Optional[date] = None

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "RecordStatistics":
        counts = count_by_field(records)
        stats = cls(
            total_count=len(records),
            by_status=counts["status"],
            by_category=counts["category"],
            by_author=counts["author"],
            by_tag=counts["tag"],
            by_technology=counts["technology"],
            by_project=counts["project"],
        )

        earliest: Optional[date] = None
        latest: Optional[date] = None

        for record in records:
            created = record.created
            if created is None:
                continue

            stats.by_year[created.year] = stats.by_year.get(created.year, 0) + 1

            # Strict comparisons: ties keep the first date seen
            if earliest is None or created < earliest:
                earliest = created
            if latest is None or created > latest:
                latest = created

        stats.earliest_date = earliest
        stats.latest_date = latest
        return stats

    @staticmethod
    def top_n(counts: Mapping[K, int], n: int) -> List[Tuple[K, int]]:
        """Return the n entries with the highest counts.

        Ties keep the mapping's iteration order (insertion order for dicts),
        so equal counts are not ordered by value. Sort the result again if a
        reproducible tie-break is needed.
        """
        return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:n]

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            "ADR Statistics",
            "==============",
            f"Total: {self.total_count} records",
        ]

        status_parts = [
            f"{status} ({self.by_status.get(status.value, 0)})"
            for status in Status.all()
            if self.by_status.get(status.value, 0) > 0
        ]
        if status_parts:
            lines.append(f"By Status: {', '.join(status_parts)}")

        if self.by_category:
            top = self.top_n(self.by_category, 5)
            lines.append("By Category: " + ", ".join(f"{k} ({v})" for k, v in top))

        if self.by_author:
            top = self.top_n(self.by_author, 5)
            lines.append("Authors: " + ", ".join(f"{k} ({v})" for k, v in top))

        if self.earliest_date and self.latest_date:
            lines.append(f"Date Range: {self.earliest_date.isoformat()} -> {self.latest_date.isoformat()}")

        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict:
        data = {
            "total_count": self.total_count,
            "by_status": dict(self.by_status),
            "by_category": dict(self.by_category),
            "by_author": dict(self.by_author),
            "by_tag": dict(self.by_tag),
            "by_technology": dict(self.by_technology),
            "by_project": dict(self.by_project),
            "by_year": {str(year): count for year, count in self.by_year.items()},
        }
        if self.earliest_date is not None:
            data["earliest_date"] = self.earliest_date.isoformat()
        if self.latest_date is not None:
            data["latest_date"] = self.latest_date.isoformat()
        return data


def compute_statistics(records: Sequence[Record]) -> RecordStatistics:
    return RecordStatistics.from_records(records)
