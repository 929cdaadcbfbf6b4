"""Build NetworkX graphs from catalog type descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from apiscope.metadata.descriptors import TypeDescriptor

log = logging.getLogger(__name__)


def build_inheritance_graph(types: Iterable[TypeDescriptor]) -> nx.DiGraph:
    """Build a directed child -> parent graph of type relations.

    Nodes are type keys with attributes: name, namespace, module.
    Edges carry a ``kind`` attribute (``base`` or ``interface``).  References
    to keys outside *types* are dropped with a warning.
    """
    G = nx.DiGraph()

    # Insert in key order for deterministic graph construction
    ordered = sorted(types, key=lambda t: t.key)
    G.add_nodes_from(
        (t.key, {"name": t.name, "namespace": t.namespace, "module": t.module}) for t in ordered
    )

    node_set = set(G)
    for t in ordered:
        if t.base_type is not None:
            _add_edge(G, node_set, t.key, t.base_type, "base")
        for iface in t.interfaces:
            _add_edge(G, node_set, t.key, iface, "interface")

    return G


def build_nesting_graph(types: Iterable[TypeDescriptor]) -> nx.DiGraph:
    """Build a directed nested -> declaring type graph.

    Generic parameters point at their owner through ``declaring_type`` too,
    but that is ownership rather than nesting, so they are left out.
    """
    G = nx.DiGraph()
    ordered = sorted(types, key=lambda t: t.key)
    G.add_nodes_from(t.key for t in ordered)

    node_set = set(G)
    for t in ordered:
        if t.is_nested:
            _add_edge(G, node_set, t.key, t.declaring_type, "declaring")

    return G


def _add_edge(G: nx.DiGraph, node_set: set[str], source: str, target: str, kind: str) -> None:
    if target not in node_set:
        log.warning("unresolved %s reference from %s to %s", kind, source, target)
        return
    G.add_edge(source, target, kind=kind)
