"""Utility functions and helpers for the gardenctl application."""
from typing import Generic, Hashable, Iterable, Iterator, List, Set, TypeVar

T = TypeVar('T', bound=Hashable)


class OrderedSet(Generic[T]):
    """A set that remembers the order in which items first arrived.

    Adding an item that is already present is a no-op, so iteration yields
    every distinct item once, in first-seen order.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._seen: Set[T] = set()
        self._order: List[T] = []
        self.update(items)

    def add(self, item: T) -> None:
        if item not in self._seen:
            self._seen.add(item)
            self._order.append(item)

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._seen

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def to_list(self) -> List[T]:
        return list(self._order)


def remove_duplicates(values: Iterable[T]) -> List[T]:
    """Drop repeated values, keeping the first occurrence of each."""
    return OrderedSet(values).to_list()


def split_lines(value: str) -> List[str]:
    """Split a newline separated value.

    A single trailing empty element (from a trailing newline) is dropped.
    An empty value therefore yields an empty list.
    """
    parts = value.split('\n')
    if parts and parts[-1] == '':
        parts = parts[:-1]
    return parts
