from collections.abc import MutableSet
from typing import Any, Dict, Hashable, Iterable, Iterator, Optional


class OrderedSet(MutableSet):
    """
    A mutable set remembering the order in which members were first added.

    Re-adding an existing member does not move it. Backed by a plain `dict`,
    whose keys keep insertion order.

    Equality against another `OrderedSet` is order-sensitive, so two equal
    instances always iterate identically; against any other
    `~collections.abc.Set` it falls back to plain set comparison.
    """

    def __init__(self, iterable: Optional[Iterable[Hashable]] = None) -> None:
        self._members: Dict[Hashable, None] = {}
        if iterable is not None:
            self.update(iterable)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[Any]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def add(self, value: Hashable) -> None:
        self._members[value] = None

    def discard(self, value: Hashable) -> None:
        self._members.pop(value, None)

    def update(self, iterable: Iterable[Hashable]) -> None:
        for value in iterable:
            self.add(value)

    def copy(self) -> "OrderedSet":
        return self.__class__(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return list(self) == list(other)
        return super().__eq__(other)

    # Mutable, like the builtin set.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, list(self))
