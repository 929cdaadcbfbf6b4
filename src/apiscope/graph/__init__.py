"""Type graphs and hierarchy walks."""

from apiscope.graph.builder import build_inheritance_graph, build_nesting_graph
from apiscope.graph.hierarchy import ancestry, base_chain, interfaces, nesting_chain

__all__ = [
    "build_inheritance_graph",
    "build_nesting_graph",
    "ancestry",
    "base_chain",
    "interfaces",
    "nesting_chain",
]
