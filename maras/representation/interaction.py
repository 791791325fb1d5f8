"""
Interactions (item sets) and the size-indexed lattice of closed interactions.
"""
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Sequence, Tuple

from .item import Item


@dataclass(frozen=True)
class Interaction:
    """
    Immutable, unordered set of unique items that co-occur in reports.

    Attributes:
        items: Frozenset of Item
    """
    items: FrozenSet[Item]

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "Interaction":
        return cls(items=frozenset(items))

    @property
    def size(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def contains(self, other: "Interaction") -> bool:
        """True if every item of ``other`` is also in this interaction."""
        return self.items.issuperset(other.items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in sorted(self.items, key=Item.to_int)) + "}"


def _as_interaction(closure) -> Interaction:
    """Accept Interactions or plain collections of Items or item codes."""
    if isinstance(closure, Interaction):
        return closure
    return Interaction.from_items(
        item if isinstance(item, Item) else Item.from_int(item) for item in closure
    )


class ClosureLattice:
    """
    Closed interactions grouped by size; level k holds the closures of size k.

    The lattice is owned by whoever computed the closures and is only read here.
    A size with no level (k >= number of levels) is different from an empty
    level only in how it was built; both hold no closures.
    """

    def __init__(self, levels: Sequence[Iterable[Interaction]]):
        self._levels: Tuple[Tuple[Interaction, ...], ...] = tuple(
            tuple(_as_interaction(closure) for closure in level) for level in levels
        )

    @classmethod
    def from_itemsets(cls, itemsets: Iterable[Iterable[Item]]) -> "ClosureLattice":
        """
        Build a lattice from closed itemsets of any size.

        Every level from 0 up to the largest itemset size exists afterwards,
        empty where no closure of that size was supplied.
        """
        closures = [_as_interaction(c) for c in itemsets]
        depth = max((c.size for c in closures), default=0) + 1
        levels: List[List[Interaction]] = [[] for _ in range(depth)]
        for closure in closures:
            levels[closure.size].append(closure)
        return cls(levels)

    @property
    def levels(self) -> Tuple[Tuple[Interaction, ...], ...]:
        return self._levels

    def has_level(self, size: int) -> bool:
        return 0 <= size < len(self._levels)

    def level(self, size: int) -> Tuple[Interaction, ...]:
        return self._levels[size]

    def __len__(self) -> int:
        return len(self._levels)

    def __repr__(self) -> str:
        sizes = [len(level) for level in self._levels]
        return f"ClosureLattice(levels={sizes})"
