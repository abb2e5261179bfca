"""Binary heap ordered by an injected comparison function.

The comparator is a plain two-argument predicate ``higher_priority(a, b)``
that returns True when ``a`` must sit nearer the root than ``b``. Passing
``operator.lt`` gives a min-heap and ``operator.gt`` a max-heap.

Note: ``pop()`` and ``peek()`` return None on an empty heap, so storing None
as an element makes those results ambiguous. Check ``is_empty()`` first if
you need to store None.
"""

import operator
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional, Callable

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError(f"comparator must be callable, got {type(comparator).__name__}")
        self._comparator = comparator
        self._items: List[T] = []

    @staticmethod
    def new_min() -> 'Heap[T]':
        return Heap(operator.lt)

    @staticmethod
    def new_max() -> 'Heap[T]':
        return Heap(operator.gt)

    @staticmethod
    def from_iterable(values: Iterable[T], comparator: Comparator) -> 'Heap[T]':
        """Build a heap from any iterable in O(n).

        Note: the input is copied, never consumed in place.
        """
        heap: Heap[T] = Heap(comparator)
        heap._items = list(values)
        for i in range(len(heap._items) // 2 - 1, -1, -1):
            heap._bubble_down(i)
        return heap

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def len(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.len() == 0

    def add(self, value: T) -> None:
        self._items.append(value)
        try:
            self._bubble_up(len(self._items) - 1)
        except Exception:
            # Nothing has moved yet; drop the value the comparator rejected.
            self._items.pop()
            raise

    def pop(self) -> Optional[T]:
        if self.is_empty():
            return None
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._bubble_down(0)
        return root

    def peek(self) -> Optional[T]:
        if self.is_empty():
            return None
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._comparator)
        clone.__class__ = type(self)
        clone._items = self._items.copy()
        return clone

    def into_sorted(self) -> List[T]:
        """Drain the heap, returning its elements in priority order."""
        return list(self)

    def _bubble_up(self, idx: int) -> None:
        """Sift items[idx] toward the root.

        All comparisons run before any element moves, so a comparator that
        raises leaves the list exactly as it was.
        """
        items = self._items
        value = items[idx]
        target = idx
        while target > 0:
            parent = self._parent_idx(target)
            if self._comparator(items[parent], value):
                break
            target = parent
        while idx > target:
            parent = self._parent_idx(idx)
            items[idx] = items[parent]
            idx = parent
        items[target] = value

    def _bubble_down(self, idx: int) -> None:
        items = self._items
        while self._children_present(idx):
            winner = self._highest_priority_idx(idx)
            if winner == idx:
                break
            items[idx], items[winner] = items[winner], items[idx]
            idx = winner

    def _highest_priority_idx(self, idx: int) -> int:
        """Pick among idx and its live children; ties go to idx, then left."""
        winner = idx
        for child in (self._left_child_idx(idx), self._right_child_idx(idx)):
            if child < len(self._items) and self._comparator(self._items[child], self._items[winner]):
                winner = child
        return winner

    def _children_present(self, idx: int) -> bool:
        return self._left_child_idx(idx) < len(self._items)

    @staticmethod
    def _parent_idx(idx: int) -> int:
        return (idx - 1) // 2

    @staticmethod
    def _left_child_idx(idx: int) -> int:
        return idx * 2 + 1

    @staticmethod
    def _right_child_idx(idx: int) -> int:
        return Heap._left_child_idx(idx) + 1

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self.is_empty():
            raise StopIteration
        return self.pop()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"


class MinHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.lt)


class MaxHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.gt)
