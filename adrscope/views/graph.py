"""
Relationship graph for ADRs.

Nodes are records, edges come from each record's 'related' list. References
to records outside the batch get placeholder nodes so every edge has both
ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set

from ..catalog.metadata_parser import Status
from ..catalog.record import Record

REFERENCE_SUFFIX = ".md"


class EdgeKind(str, Enum):
    """Type of relationship between two records."""

    RELATED = "related"
    # Defined for callers; never inferred from metadata
    SUPERSEDES = "supersedes"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Node:
    id: str
    status: str
    title: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "Node":
        return cls(id=record.id, status=record.status.value, title=record.title)

    @classmethod
    def placeholder(cls, node_id: str) -> "Node":
        """Node for a referenced record that is not in the batch."""
        return cls(id=node_id, status=Status.PROPOSED.value)

    @property
    def is_placeholder(self) -> bool:
        return self.title is None

    def to_dict(self) -> Dict:
        data = {"id": self.id, "status": self.status}
        if self.title is not None:
            data["title"] = self.title
        return data


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    kind: EdgeKind = EdgeKind.RELATED

    @classmethod
    def related(cls, source: str, target: str) -> "Edge":
        return cls(source, target, EdgeKind.RELATED)

    @classmethod
    def supersedes(cls, source: str, target: str) -> "Edge":
        return cls(source, target, EdgeKind.SUPERSEDES)

    def to_dict(self) -> Dict:
        return {"source": self.source, "target": self.target, "type": self.kind.value}


def reference_to_id(reference: str) -> str:
    """Turn a 'related' entry into a record identifier.

    Example:
        >>> reference_to_id("adr_0005.md")
        'adr_0005'
        >>> reference_to_id("adr_0005")
        'adr_0005'
    """
    if reference.endswith(REFERENCE_SUFFIX):
        return reference[:-len(REFERENCE_SUFFIX)]
    return reference


@dataclass
class Graph:
    """Nodes and edges of the record relationship graph."""
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "Graph":
        """Build the graph for a batch of records.

        Every 'related' entry produces one edge, duplicates included. Targets
        outside the batch get a placeholder node; a real record's node always
        wins over a placeholder with the same id.
        """
        nodes = [Node.from_record(record) for record in records]
        edges: List[Edge] = []
        known_ids: Set[str] = {record.id for record in records}

        for record in records:
            for reference in record.related:
                target_id = reference_to_id(reference)
                edges.append(Edge.related(record.id, target_id))
                if target_id not in known_ids:
                    nodes.append(Node.placeholder(target_id))

        return cls(nodes=_dedup_nodes(nodes), edges=edges)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    def placeholders(self) -> List[Node]:
        return [node for node in self.nodes if node.is_placeholder]

    def to_dict(self) -> Dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


def _dedup_nodes(nodes: List[Node]) -> List[Node]:
    seen: Set[str] = set()
    unique = []
    for node in nodes:
        if node.id in seen:
            continue
        seen.add(node.id)
        unique.append(node)
    return unique


def build_graph(records: Sequence[Record]) -> Graph:
    return Graph.from_records(records)
