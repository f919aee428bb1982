"""
Relation algebra: combinators over pairs of relations.

Every combinator is a pure function of two relations and returns a new
Relation. Base sets are combined with the matching set operation; links
are combined as sets of pairs.

rel_union:  base = A ∪ B,               links = R ∪ S
rel_inter:  base = A ∩ B,               links = R ∩ S
rel_compl:  base = A \\ B,               links = R \\ S
rel_compo:  base = dom(R) ∪ cod(S),     links = S ∘ R
"""
from __future__ import annotations

from .relation import Relation
from .sets import complement, intersection, union


def rel_union(r: Relation, s: Relation) -> Relation:
    """Union of two relations; r's links keep their order ahead of s's."""
    links: list = []
    for link in [*r.links, *s.links]:
        if link not in links:
            links.append(link)
    return Relation(base=union(r.base, s.base), links=links)


def rel_inter(r: Relation, s: Relation) -> Relation:
    """Links of r that are also links of s."""
    return Relation(
        base=intersection(r.base, s.base),
        links=[link for link in r.links if s.has(link)],
    )


def rel_compl(r: Relation, s: Relation) -> Relation:
    """Links of r that are not links of s."""
    return Relation(
        base=complement(r.base, s.base),
        links=[link for link in r.links if not s.has(link)],
    )


def rel_compo(r: Relation, s: Relation) -> Relation:
    """
    Relational composition: r followed by s.

    (a, d) is in the result whenever (a, b) is in r and (b, d) is in s
    for some b. Every endpoint lies in dom(r) ∪ cod(s), so add_link()
    only filters duplicates here.
    """
    composed = Relation(base=union(r.domain(), s.codomain()))
    for a, b in r.links:
        for c, d in s.links:
            if b == c:
                composed.add_link((a, d))
    return composed
