# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""ObservableCollection: a list that announces its own mutations.

Every mutator works on the backing list first, then emits its events
synchronously, then returns the list primitive's natural result:

    =========== ===================================================
    pop         ``pop``, ``remove``
    push        ``push`` (new length), ``add`` per element
    reverse     ``reverse``
    shift       ``shift``, ``remove``
    sort        ``sort``
    splice      ``splice`` (removed), ``remove`` each, ``add`` each
    unshift     ``unshift`` (new length), ``add`` per element
    clear       ``clear`` (no payload)
    =========== ===================================================

A listener that raises aborts the rest of that sequence and the error
reaches the caller of the mutator. The storage change is not rolled back.
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

from ._sentinel import MaybeUndefined, Undefined
from .config import settings
from .emitter import Emitter, Listener
from .enumerable import Cursor, iterate

__all__ = ("ObservableCollection",)

T = TypeVar("T")


class ObservableCollection(Generic[T]):
    """Ordered, observable container of arbitrary items.

    Composes a private list with an :class:`Emitter`; the subscription
    methods (``on``, ``once``, ``off``, ``emit``) delegate to the emitter and
    return the collection so calls can be chained.

    Not thread-safe. Callers sharing an instance across threads must
    serialize access themselves.
    """

    def __init__(self, initial: Iterable[T] | None = None, *, copy: bool | None = None):
        if copy is None:
            copy = settings.copy_initial
        if initial is None:
            self._items: list[T] = []
        elif copy or not isinstance(initial, list):
            self._items = list(initial)
        else:
            self._items = initial
        self._emitter = Emitter()

    # -- traversal ---------------------------------------------------------

    @property
    def items(self) -> list[T]:
        """The backing list. Mutating it directly bypasses all events."""
        return self._items

    def length(self) -> int:
        return len(self._items)

    def get(self, index: int) -> MaybeUndefined[T]:
        """Element at ``index``, or ``Undefined`` outside ``[0, length())``."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return Undefined

    def cursor(self) -> Cursor[T]:
        """A ``length``/``get`` view of this collection for traversal consumers."""
        return Cursor(length=self.length, get=self.get)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # Mutating while iterating is undefined: elements may be skipped
        # or seen twice.
        return iterate(self)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # -- mutation ----------------------------------------------------------

    def pop(self) -> MaybeUndefined[T]:
        """Remove and return the last element."""
        ret = self._items.pop() if self._items else Undefined
        self.emit("pop", ret)
        self.emit("remove", ret)
        return ret

    def push(self, *items: T) -> int:
        """Append ``items`` and return the new length."""
        self._items.extend(items)
        ret = len(self._items)
        self.emit("push", ret)
        for item in items:
            self.emit("add", item)
        return ret

    def reverse(self) -> ObservableCollection[T]:
        self._items.reverse()
        self.emit("reverse", self)
        return self

    def shift(self) -> MaybeUndefined[T]:
        """Remove and return the first element."""
        ret = self._items.pop(0) if self._items else Undefined
        self.emit("shift", ret)
        self.emit("remove", ret)
        return ret

    def sort(
        self,
        compare: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> ObservableCollection[T]:
        """Sort in place.

        Args:
            compare: Two-argument comparator returning a negative, zero or
                positive number. Mutually exclusive with ``key``.
            key: One-argument key function, as for :func:`sorted`.
            reverse: Sort descending.

        Raises:
            TypeError: Both ``compare`` and ``key`` given, or the elements
                cannot be ordered. The collection is left untouched.
        """
        if compare is not None:
            if key is not None:
                raise TypeError("sort() takes either compare or key, not both")
            key = functools.cmp_to_key(compare)
        self._items[:] = sorted(self._items, key=key, reverse=reverse)
        self.emit("sort", self)
        return self

    def splice(self, start: int | None = None, delete_count: int | None = None, *items: T) -> list[T]:
        """Remove ``delete_count`` elements at ``start`` and insert ``items`` there.

        ``start`` may be negative (counted from the end) and is clamped to
        ``[0, length()]``. Omitting ``delete_count`` removes everything from
        ``start`` on; a negative count removes nothing. Calling ``splice()``
        with no arguments removes nothing.

        Returns:
            The removed elements, in their former order.
        """
        begin, count = self._splice_bounds(start, delete_count)
        removed = self._items[begin : begin + count]
        self._items[begin : begin + count] = items

        self.emit("splice", removed)
        for item in removed:
            self.emit("remove", item)
        for item in items:
            self.emit("add", item)
        return removed

    def unshift(self, *items: T) -> int:
        """Insert ``items`` at the front, keeping their order; return the new length."""
        self._items[0:0] = items
        ret = len(self._items)
        self.emit("unshift", ret)
        for item in items:
            self.emit("add", item)
        return ret

    def clear(self) -> ObservableCollection[T]:
        """Swap in a fresh empty list. A list adopted at construction is not emptied."""
        self._items = []
        self.emit("clear")
        return self

    def _splice_bounds(self, start: int | None, delete_count: int | None) -> tuple[int, int]:
        length = len(self._items)
        if start is None:
            return 0, 0 if delete_count is None else self._clamp_count(delete_count, length)

        begin = operator.index(start)
        if begin < 0:
            begin = max(length + begin, 0)
        else:
            begin = min(begin, length)

        if delete_count is None:
            return begin, length - begin
        return begin, self._clamp_count(delete_count, length - begin)

    @staticmethod
    def _clamp_count(delete_count: int, available: int) -> int:
        return min(max(operator.index(delete_count), 0), available)

    # -- events ------------------------------------------------------------

    def on(self, event: str, callback: Listener) -> ObservableCollection[T]:
        self._emitter.on(event, callback)
        return self

    def once(self, event: str, callback: Listener) -> ObservableCollection[T]:
        self._emitter.once(event, callback)
        return self

    def off(self, event: str | None = None, callback: Listener | None = None) -> ObservableCollection[T]:
        self._emitter.off(event, callback)
        return self

    def emit(self, event: str, *args: Any) -> ObservableCollection[T]:
        self._emitter.emit(event, *args)
        return self

    def listeners(self, event: str) -> list[Listener]:
        return self._emitter.listeners(event)

    def has_listeners(self, event: str) -> bool:
        return self._emitter.has_listeners(event)

    def statistics(self, event: str) -> dict[str, int]:
        return self._emitter.statistics(event)
