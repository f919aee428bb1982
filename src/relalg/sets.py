"""
Finite sets over a totally ordered element type.

FiniteSet is an immutable, order-independent collection. Elements need
equality, a total order (`<`) and cheap copying; nothing else is assumed,
so membership is a linear scan with `==` rather than a hash lookup.

Key invariants:
- Equality ignores storage order
- union() deduplicates; the constructor, intersection() and complement() do not
- No operation mutates its inputs
"""
from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class FiniteSet(BaseModel, Generic[T]):
    """
    Finite set of elements of type T.

    Items are stored verbatim: FiniteSet(items=[1, 1]) keeps both copies
    and has length 2 until an operation that deduplicates (union) is
    applied. Use deduplicated() to normalise explicitly.
    """
    items: tuple[T, ...] = ()

    model_config = {"frozen": True}

    def has(self, element: Any) -> bool:
        """True iff some stored item equals element."""
        return any(item == element for item in self.items)

    def union(self, other: FiniteSet) -> FiniteSet:
        return union(self, other)

    def intersection(self, other: FiniteSet) -> FiniteSet:
        return intersection(self, other)

    def complement(self, other: FiniteSet) -> FiniteSet:
        return complement(self, other)

    def deduplicated(self) -> FiniteSet:
        """Return a sorted copy with duplicates removed."""
        return union(self, FiniteSet())

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def is_subset(self, other: FiniteSet) -> bool:
        """Check if every item of this set is a member of other."""
        return all(other.has(item) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __contains__(self, element: Any) -> bool:
        return self.has(element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        return self.is_subset(other) and other.is_subset(self)

    def __hash__(self) -> int:
        return hash(self.deduplicated().items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self.items) + "}"


def union(a: FiniteSet, b: FiniteSet) -> FiniteSet:
    """
    Union of two sets.

    Concatenates both item tuples, sorts them and drops adjacent
    duplicates. The result is sorted, but callers must not rely on
    order for identity.
    """
    merged: list[Any] = []
    for item in sorted(a.items + b.items):
        if not merged or merged[-1] != item:
            merged.append(item)
    return FiniteSet(items=tuple(merged))


def intersection(a: FiniteSet, b: FiniteSet) -> FiniteSet:
    """Items of a that are members of b, in a's order."""
    return FiniteSet(items=tuple(item for item in a.items if b.has(item)))


def complement(a: FiniteSet, b: FiniteSet) -> FiniteSet:
    """Relative complement a \\ b: items of a that are not members of b."""
    return FiniteSet(items=tuple(item for item in a.items if not b.has(item)))
