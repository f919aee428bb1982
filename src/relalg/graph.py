"""
NetworkX bridge for relations.

A Relation maps onto a directed graph: base elements become nodes and
links become edges. Conversion copies data in both directions; the graph
and the relation never share state.
"""
from __future__ import annotations

from typing import Any

import networkx as nx

from .relation import Relation
from .sets import FiniteSet


def to_digraph(relation: Relation) -> nx.DiGraph:
    """
    Build a DiGraph with one node per base element and one edge per link.

    Endpoints outside the base set (raw-constructed relations) still
    appear as nodes, since networkx adds them with the edge.
    """
    G = nx.DiGraph()
    G.add_nodes_from(relation.base)
    G.add_edges_from(relation.links)
    return G


def from_digraph(G: nx.DiGraph) -> Relation:
    """Build a relation whose base set is the graph's nodes."""
    base = FiniteSet(items=list(G.nodes())).deduplicated()
    relation = Relation(base=base)
    relation.add_links(G.edges())
    return relation


def reachable_from(relation: Relation, v: Any) -> FiniteSet:
    """
    Elements reachable from v along one or more links.

    v itself is included only if it lies on a cycle.
    """
    G = to_digraph(relation)

    if v not in G:
        return FiniteSet()

    reached = set(nx.descendants(G, v))
    if any(G.has_edge(u, v) for u in reached | {v}):
        reached.add(v)

    return FiniteSet(items=list(reached)).deduplicated()
