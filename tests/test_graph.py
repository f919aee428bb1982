"""
Tests for the NetworkX bridge.

Cross-checks transitive_closure() against networkx's own algorithm.
"""
import networkx as nx

from relalg import FiniteSet, Relation, from_digraph, reachable_from, to_digraph


def _chain_with_cycle():
    return Relation(
        base=FiniteSet(items=[0, 1, 2, 3, 4]),
        links=[(0, 1), (1, 2), (2, 3), (3, 2)],
    )


class TestConversion:
    """Test Relation <-> DiGraph conversion."""

    def test_to_digraph(self):
        """Every base element is a node, every link an edge."""
        G = to_digraph(_chain_with_cycle())
        assert set(G.nodes()) == {0, 1, 2, 3, 4}
        assert set(G.edges()) == {(0, 1), (1, 2), (2, 3), (3, 2)}

    def test_from_digraph(self):
        """Nodes become the base set, edges the links."""
        G = nx.DiGraph()
        G.add_nodes_from(["c", "a", "b"])
        G.add_edges_from([("a", "b"), ("b", "c")])

        relation = from_digraph(G)

        assert relation.base == FiniteSet(items=["a", "b", "c"])
        assert relation == Relation(links=[("a", "b"), ("b", "c")])
        assert relation.is_consistent()

    def test_conversion_copies(self):
        """Graph edits do not leak into the relation."""
        relation = _chain_with_cycle()
        G = to_digraph(relation)
        G.add_edge(4, 0)
        assert not relation.has((4, 0))


class TestReachability:
    """Test reachable_from() and closure agreement."""

    def test_reachable_from_chain(self):
        """0 reaches everything downstream but not itself."""
        assert reachable_from(_chain_with_cycle(), 0) == FiniteSet(items=[1, 2, 3])

    def test_reachable_includes_self_on_cycle(self):
        """2 sits on the 2 <-> 3 cycle."""
        assert reachable_from(_chain_with_cycle(), 2) == FiniteSet(items=[2, 3])

    def test_reachable_from_unknown(self):
        """Element outside the base set reaches nothing."""
        assert reachable_from(_chain_with_cycle(), 99).is_empty()

    def test_transitive_closure_matches_networkx(self):
        """Fixpoint closure equals networkx transitive closure."""
        relation = _chain_with_cycle()
        expected = nx.transitive_closure(to_digraph(relation), reflexive=False)

        closure = relation.transitive_closure(max_passes=0)

        assert set(closure.links) == set(expected.edges())
