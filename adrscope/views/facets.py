"""
Faceted counts for ADR filtering.

Each facet maps a field value to the number of records carrying it. Values
are ordered by count descending, then alphabetically, which is the order
filter lists are shown in.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence

from ..catalog.metadata_parser import Status
from ..catalog.record import Record

# Facet name -> counting key used by count_by_field()
FACET_FIELDS = {
    "statuses": "status",
    "categories": "category",
    "tags": "tag",
    "authors": "author",
    "projects": "project",
    "technologies": "technology",
}


def count_by_field(records: Sequence[Record]) -> Dict[str, Dict[str, int]]:
    """Count field values across records in one pass.

    Status is seeded with every lifecycle value at zero. Other fields only
    hold values that occur; empty strings are not counted and list fields
    count once per element.

    Returns:
        Mapping of field ('status', 'category', 'tag', 'author', 'project',
        'technology') to value counts
    """
    status_counts: Dict[str, int] = {status.value: 0 for status in Status.all()}
    counts: Dict[str, Dict[str, int]] = {
        "status": status_counts,
        "category": defaultdict(int),
        "tag": defaultdict(int),
        "author": defaultdict(int),
        "project": defaultdict(int),
        "technology": defaultdict(int),
    }

    for record in records:
        status_counts[record.status.value] += 1

        if record.category:
            counts["category"][record.category] += 1
        if record.author:
            counts["author"][record.author] += 1
        if record.project:
            counts["project"][record.project] += 1

        for tag in record.tags:
            counts["tag"][tag] += 1
        for tech in record.technologies:
            counts["technology"][tech] += 1

    return {name: dict(values) for name, values in counts.items()}


@dataclass(frozen=True)
class FacetValue:
    value: str
    count: int

    def to_dict(self) -> Dict:
        return {"value": self.value, "count": self.count}


def sorted_facet_values(counts: Mapping[str, int]) -> List[FacetValue]:
    """Convert a count mapping to facet values, count desc then value asc."""
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [FacetValue(value, count) for value, count in ordered]


@dataclass
class Facet:
    """A named filter dimension and its values."""
    name: str
    values: List[FacetValue] = field(default_factory=list)


@dataclass
class Facets:
    """All facets computed from a batch of records."""
    statuses: List[FacetValue] = field(default_factory=list)
    categories: List[FacetValue] = field(default_factory=list)
    tags: List[FacetValue] = field(default_factory=list)
    authors: List[FacetValue] = field(default_factory=list)
    projects: List[FacetValue] = field(default_factory=list)
    technologies: List[FacetValue] = field(default_factory=list)

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "Facets":
        counts = count_by_field(records)
        return cls(**{
            name: sorted_facet_values(counts[key])
            for name, key in FACET_FIELDS.items()
        })

    def as_facets(self) -> List[Facet]:
        return [Facet(name, getattr(self, name)) for name in FACET_FIELDS]

    def to_dict(self) -> Dict:
        return {
            name: [value.to_dict() for value in getattr(self, name)]
            for name in FACET_FIELDS
        }


def build_facets(records: Sequence[Record]) -> Facets:
    return Facets.from_records(records)
