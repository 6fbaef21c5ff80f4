"""
Cross-record views over a decoded batch.

Components:
- graph: relationship graph with placeholder nodes for dangling references
- facets: value counts per filter dimension, in display order
- stats: totals, per-field and per-year counts, date range
"""

from .graph import Edge, EdgeKind, Graph, Node, build_graph, reference_to_id
from .facets import Facet, Facets, FacetValue, build_facets, count_by_field, sorted_facet_values
from .stats import RecordStatistics, compute_statistics

__all__ = [
    "Edge",
    "EdgeKind",
    "Graph",
    "Node",
    "build_graph",
    "reference_to_id",
    "Facet",
    "Facets",
    "FacetValue",
    "build_facets",
    "count_by_field",
    "sorted_facet_values",
    "RecordStatistics",
    "compute_statistics",
]
