"""A work queue that rewrites a list in place.

The list handed to :class:`InPlaceQueue` is split into two contiguous
regions: a prefix of *processed* elements, which are final and keep the order
in which they were added, and a suffix of *unprocessed* elements, whose order
is irrelevant. Elements are taken from the unprocessed region, transformed,
and either added to the processed region or requeued as unprocessed. All
operations are O(1) and no auxiliary list is allocated.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar('T')


class InPlaceQueue(Generic[T]):
    """Rewrite `items` in place. The queue assumes exclusive use of `items`
    until it has been drained. Initially, all elements are unprocessed.

    >>> items = [1, 2, 3]
    >>> q = InPlaceQueue(items)
    >>> while q.has_unprocessed():
    ...     x = q.take_unprocessed()
    ...     if x == 2:
    ...         q.add_unprocessed(20)
    ...         q.add_unprocessed(21)
    ...     else:
    ...         q.add_processed(x)
    >>> sorted(items)
    [1, 3, 20, 21]

    The queue does not check termination. Requeued elements must eventually be
    added as processed.
    """

    def __init__(self, items: list[T]) -> None:
        self._items = items
        self._processed = 0

    @property
    def processed_count(self) -> int:
        """The length of the processed prefix.
        """
        return self._processed

    def has_unprocessed(self) -> bool:
        return self._processed < len(self._items)

    def take_unprocessed(self) -> Optional[T]:
        """Remove and return some unprocessed element, or :data:`None` if
        there is none. The slot of the removed element is filled with the last
        element of the list.

        Since :data:`None` signals an empty queue, loops over queues that may
        hold :data:`None` as an element must test :meth:`has_unprocessed`
        instead of the result.

        >>> items = ['a', 'b', 'c']
        >>> q = InPlaceQueue(items)
        >>> q.take_unprocessed()
        'a'
        >>> items
        ['c', 'b']
        """
        if not self.has_unprocessed():
            return None
        last = self._items.pop()
        if self._processed == len(self._items):
            return last
        taken = self._items[self._processed]
        self._items[self._processed] = last
        return taken

    def add_unprocessed(self, item: T) -> None:
        """Requeue `item` for processing.
        """
        self._items.append(item)

    def add_processed(self, item: T) -> None:
        """Append `item` to the processed prefix.

        >>> items = ['x', 'y']
        >>> q = InPlaceQueue(items)
        >>> q.add_processed('p')
        >>> items
        ['p', 'y', 'x']
        >>> q.processed_count
        1
        """
        items = self._items
        items.append(item)
        self._processed += 1
        last = len(items) - 1
        boundary = self._processed - 1
        items[last], items[boundary] = items[boundary], items[last]

    def extend_processed(self, items: Iterable[T]) -> None:
        for item in items:
            self.add_processed(item)

    @staticmethod
    def in_place_endo_map(items: list[T], func: Callable[[T], T]) -> None:
        """Replace every element `x` of `items` with ``func(x)``. The order of
        the result is unspecified.

        >>> items = [1, 2, 3]
        >>> InPlaceQueue.in_place_endo_map(items, lambda x: 10 * x)
        >>> sorted(items)
        [10, 20, 30]
        """
        queue = InPlaceQueue(items)
        while queue.has_unprocessed():
            x = queue.take_unprocessed()
            queue.add_processed(func(x))  # type: ignore[arg-type]
