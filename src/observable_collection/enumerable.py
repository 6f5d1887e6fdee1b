# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Traversal over anything that exposes ``length()`` and ``get(i)``."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from ._sentinel import MaybeUndefined

__all__ = (
    "Cursor",
    "Traversable",
    "iterate",
)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Traversable(Protocol[T_co]):
    """Minimal read interface a traversal consumer relies on."""

    def length(self) -> int: ...

    def get(self, index: int) -> MaybeUndefined[T_co]: ...


@dataclass(frozen=True, slots=True)
class Cursor(Generic[T]):
    """Detached ``length``/``get`` pair bound to some storage.

    Hands a consumer the traversal interface without exposing the mutation
    or subscription API of the object behind it.
    """

    length: Callable[[], int]
    get: Callable[[int], MaybeUndefined[T]]

    def __iter__(self) -> Iterator[T]:
        return iterate(self)


def iterate(source: Traversable[T]) -> Iterator[T]:
    """Lazily yield ``source.get(i)`` for ``i`` in ``[0, source.length())``.

    Each call produces a fresh generator, so traversal is restartable. The
    length is re-read on every step: mutating ``source`` while iterating is
    undefined behavior and is not guarded against.
    """
    i = 0
    while i < source.length():
        yield source.get(i)
        i += 1
