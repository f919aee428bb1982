"""
Binary relations over a base FiniteSet.

A Relation is a base set of allowed elements plus a list of ordered pairs
(links). Links are unique and both endpoints must be in the base set, but
only the insertion operations enforce this: the model constructor stores
what it is given. External input should go through add_link(),
add_links() or Relation.from_pairs().

Derived relations (closures, algebraic combinations) are always new
instances; only add_link()/add_links() mutate in place.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, TypeVar

from pydantic import BaseModel, Field

from .config import get_config
from .sets import FiniteSet

logger = logging.getLogger(__name__)

T = TypeVar("T")

Link = tuple[T, T]


class Relation(BaseModel):
    """
    Binary relation on a base set.

    Attributes:
        base: Elements links may draw their endpoints from
        links: Ordered pairs (a, b) meaning "a relates to b"

    Equality compares links only, as sets of pairs. Two relations on
    different base sets with the same links are equal.
    """
    base: FiniteSet = Field(default_factory=FiniteSet)
    links: list[tuple[Any, Any]] = Field(default_factory=list)

    @classmethod
    def from_pairs(
        cls,
        base: FiniteSet,
        pairs: Iterable[Link],
        strict: Optional[bool] = None,
    ) -> Relation:
        """
        Build a relation, validating every pair.

        Non-strict mode drops pairs with an endpoint outside base (and
        duplicates), exactly as add_links() does. Strict mode raises
        LinkValidationError instead of dropping out-of-base pairs.

        Args:
            base: The base set
            pairs: Candidate links, in insertion order
            strict: Overrides RelalgConfig.strict_links when not None

        Raises:
            LinkValidationError: In strict mode, if any item is not a
                pair or has an endpoint outside base
        """
        if strict is None:
            strict = get_config().strict_links

        pairs = list(pairs)
        if strict:
            rejected = [
                p for p in pairs
                if len(p) != 2 or not (base.has(p[0]) and base.has(p[1]))
            ]
            if rejected:
                raise LinkValidationError(rejected)

        relation = cls(base=base)
        relation.add_links(pairs)
        return relation

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_link(self, pair: Link) -> bool:
        """
        Add a link if it is new and both endpoints are in the base set.

        Anything else is a silent no-op. Returns True if the link was added.
        """
        a, b = pair
        if self.has((a, b)):
            logger.debug(f"Ignoring duplicate link ({a!r}, {b!r})")
            return False
        if not (self.base.has(a) and self.base.has(b)):
            logger.debug(f"Ignoring link ({a!r}, {b!r}): endpoint outside base set")
            return False
        self.links.append((a, b))
        return True

    def add_links(self, pairs: Iterable[Link]) -> int:
        """Add each pair in order via add_link(). Returns how many were added."""
        return sum(1 for pair in pairs if self.add_link(pair))

    # =========================================================================
    # Queries
    # =========================================================================

    def has(self, pair: Link) -> bool:
        return tuple(pair) in self.links

    def neighbours(self, v: Any) -> FiniteSet:
        """
        Coordinates equal to v over all links incident to v.

        This collects v's own coordinate, not the opposite endpoint, so
        the result is {v} when v appears in any link and empty otherwise.
        See adjacent() for graph adjacency.
        """
        found = []
        for a, b in self.links:
            if a == v:
                found.append(a)
            if b == v:
                found.append(b)
        return FiniteSet(items=found).deduplicated()

    def adjacent(self, v: Any) -> FiniteSet:
        """Opposite endpoints of all links incident to v."""
        found = []
        for a, b in self.links:
            if a == v:
                found.append(b)
            if b == v:
                found.append(a)
        return FiniteSet(items=found).deduplicated()

    def degree(self, v: Any) -> int:
        return len(self.neighbours(v))

    def domain(self) -> FiniteSet:
        """Set of first coordinates."""
        return FiniteSet(items=[a for a, _ in self.links]).deduplicated()

    def codomain(self) -> FiniteSet:
        """Set of second coordinates."""
        return FiniteSet(items=[b for _, b in self.links]).deduplicated()

    def invalid_links(self) -> list[Link]:
        """
        Return links with an endpoint outside the base set.

        Empty list means the relation is consistent. Only raw construction
        can produce such links.
        """
        return [
            (a, b) for a, b in self.links
            if not (self.base.has(a) and self.base.has(b))
        ]

    def is_consistent(self) -> bool:
        return not self.invalid_links()

    # =========================================================================
    # Properties
    # =========================================================================

    def is_reflexive(self) -> bool:
        """Check (x, x) is present for every x in the base set."""
        return all(self.has((x, x)) for x in self.base)

    def is_symmetric(self) -> bool:
        """Check (b, a) is present for every link (a, b)."""
        return all(self.has((b, a)) for a, b in self.links)

    def is_transitive(self) -> bool:
        """
        Check every link factors through the base set.

        For each x, y in the base set with (x, y) present, some z in the
        base set must have both (x, z) and (z, y) present. A witness
        z = x needs (x, x), so a non-reflexive chain such as {(0, 1)}
        fails. O(n^3) in the size of the base set.

        For the textbook property use is_closed_under_composition().
        """
        for x in self.base:
            for y in self.base:
                if not self.has((x, y)):
                    continue
                if not any(self.has((x, z)) and self.has((z, y)) for z in self.base):
                    return False
        return True

    def is_closed_under_composition(self) -> bool:
        """Check (a, b) and (b, c) always imply (a, c)."""
        for a, b in self.links:
            for c, d in self.links:
                if b == c and not self.has((a, d)):
                    return False
        return True

    # =========================================================================
    # Closures
    # =========================================================================

    def ref_closure(self) -> Relation:
        """
        One transitive augmentation pass over the base set.

        Adds (i, j) whenever (i, k) and (k, j) hold in this relation for
        some k. Pairs created during the pass are not chained further, so
        paths longer than two links may need more passes; see
        transitive_closure().
        """
        closure = self._copy_links()
        for i in self.base:
            for k in self.base:
                if not self.has((i, k)):
                    continue
                for j in self.base:
                    if self.has((k, j)):
                        closure.add_link((i, j))
        return closure

    def transitive_closure(self, max_passes: Optional[int] = None) -> Relation:
        """
        Repeat ref_closure() until no link is added.

        Args:
            max_passes: Upper bound on passes; 0 means run to fixpoint.
                None takes RelalgConfig.max_closure_passes.

        Raises:
            ValueError: If max_passes is negative
        """
        if max_passes is None:
            max_passes = get_config().max_closure_passes
        if max_passes < 0:
            raise ValueError(f"max_passes must be >= 0, got {max_passes}")

        current = self._copy_links()
        passes = 0
        while True:
            augmented = current.ref_closure()
            if len(augmented) == len(current):
                logger.debug(f"transitive_closure reached fixpoint in {passes} passes")
                return current
            if max_passes and passes >= max_passes:
                logger.warning(
                    f"transitive_closure stopped after {passes} passes "
                    f"before reaching a fixpoint"
                )
                return current
            current = augmented
            passes += 1

    def reflexive_closure(self) -> Relation:
        """Add (x, x) for every x in the base set."""
        closure = self._copy_links()
        closure.add_links((x, x) for x in self.base)
        return closure

    def sym_closure(self) -> Relation:
        """Add the reverse (b, a) of every link (a, b)."""
        closure = self._copy_links()
        closure.add_links((b, a) for a, b in self.links)
        return closure

    def _copy_links(self) -> Relation:
        return Relation(base=self.base, links=list(self.links))

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[Link]:  # type: ignore[override]
        return iter(self.links)

    def __contains__(self, pair: object) -> bool:
        return isinstance(pair, tuple) and self.has(pair)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(other.has(link) for link in self.links) and all(
            self.has(link) for link in other.links
        )

    def __str__(self) -> str:
        return "R{" + ", ".join(f"({a}, {b})" for a, b in self.links) + "}"


# =============================================================================
# EXCEPTIONS
# =============================================================================

class RelationError(Exception):
    """Base class for relalg relation errors."""
    pass


class LinkValidationError(RelationError):
    """Raised when strict construction meets links outside the base set."""

    def __init__(self, links: list[Link]):
        self.links = links
        super().__init__(
            f"{len(links)} link(s) have an endpoint outside the base set: {links}"
        )
