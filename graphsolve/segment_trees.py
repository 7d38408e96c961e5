"""Segment trees: point updates with range queries, and range updates with range sums."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SegmentTree:
    """Range queries over an associative combine function, with point updates."""

    def __init__(
        self,
        values: Iterable[Any],
        combine: Callable[[Any, Any], Any] = operator.add,
        default: Any = 0,
    ) -> None:
        items = list(values)
        self._size = len(items)
        self._combine = combine
        self._default = default
        self._tree = [default] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def query(self, start: int, stop: int) -> Any:
        """Combine the values at positions start..stop-1."""
        if not 0 <= start <= stop <= self._size:
            raise IndexError(f"range [{start}, {stop}) is outside [0, {self._size})")
        left = right = self._default
        start += self._size
        stop += self._size
        while start < stop:
            if start & 1:
                left = self._combine(left, self._tree[start])
                start += 1
            if stop & 1:
                stop -= 1
                right = self._combine(self._tree[stop], right)
            start >>= 1
            stop >>= 1
        return self._combine(left, right)

    def update(self, index: int, value: Any) -> None:
        """Replace the value at position index."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside [0, {self._size})")
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node >= 1:
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2


class _Kind(Enum):
    ADD = "add"
    SET = "set"


@dataclass(frozen=True)
class _Pending:
    kind: _Kind
    value: int


class LazySegmentTree:
    """Sums over inclusive ranges, with range additions and range assignments."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a lazy segment tree needs at least one value")
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        self._lazy: list[_Pending | None] = [None] * (4 * self._size)
        self._build(1, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, left: int, right: int, items: list[int]) -> None:
        if left == right:
            self._tree[node] = items[left]
            return
        middle = (left + right) // 2
        self._build(2 * node, left, middle, items)
        self._build(2 * node + 1, middle + 1, right, items)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _apply(self, node: int, length: int, update: _Pending) -> None:
        pending = self._lazy[node]
        if update.kind is _Kind.ADD:
            if pending is None:
                self._lazy[node] = update
            else:
                self._lazy[node] = _Pending(pending.kind, pending.value + update.value)
            self._tree[node] += update.value * length
        else:
            self._tree[node] = update.value * length
            self._lazy[node] = update

    def _push_down(self, node: int, left: int, right: int) -> None:
        pending = self._lazy[node]
        if pending is None:
            return
        middle = (left + right) // 2
        self._apply(2 * node, middle - left + 1, pending)
        self._apply(2 * node + 1, right - middle, pending)
        self._lazy[node] = None

    def _update(
        self, node: int, left: int, right: int, first: int, last: int, update: _Pending
    ) -> None:
        if last < left or first > right:
            return
        if first <= left and right <= last:
            self._apply(node, right - left + 1, update)
            return
        self._push_down(node, left, right)
        middle = (left + right) // 2
        self._update(2 * node, left, middle, first, last, update)
        self._update(2 * node + 1, middle + 1, right, first, last, update)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _sum(self, node: int, left: int, right: int, first: int, last: int) -> int:
        if last < left or first > right:
            return 0
        if first <= left and right <= last:
            return self._tree[node]
        self._push_down(node, left, right)
        middle = (left + right) // 2
        return self._sum(2 * node, left, middle, first, last) + self._sum(
            2 * node + 1, middle + 1, right, first, last
        )

    def _check(self, first: int, last: int) -> None:
        if not 0 <= first <= last < self._size:
            raise IndexError(f"range [{first}, {last}] is outside [0, {self._size - 1}]")

    def add(self, first: int, last: int, value: int) -> None:
        """Add value to every position first..last, inclusive."""
        self._check(first, last)
        self._update(1, 0, self._size - 1, first, last, _Pending(_Kind.ADD, value))

    def assign(self, first: int, last: int, value: int) -> None:
        """Set every position first..last, inclusive, to value."""
        self._check(first, last)
        self._update(1, 0, self._size - 1, first, last, _Pending(_Kind.SET, value))

    def range_sum(self, first: int, last: int) -> int:
        """Return the sum of positions first..last, inclusive."""
        self._check(first, last)
        return self._sum(1, 0, self._size - 1, first, last)