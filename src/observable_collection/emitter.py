# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import settings
from .errors import ListenerRegistrationError

__all__ = ("Emitter", "Listener")

Listener = Callable[..., Any]
logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Registration:
    callback: Listener
    once: bool = False


class Emitter:
    """Synchronous in-proc pub/sub keyed by event name.

    - Listeners run inline, in registration order, on the caller's stack
    - A listener error propagates to whoever called ``emit``; the remaining
      listeners for that emission are skipped
    - Each emission works on a snapshot of the listener list, so changes made
      by a listener apply from the next emission on
    - Per-event counters for debugging
    """

    def __init__(self) -> None:
        self._subs: dict[str, list[_Registration]] = {}
        self._stats: dict[str, dict[str, int]] = {}

    def on(self, event: str, callback: Listener) -> Emitter:
        """Register ``callback`` for ``event``. Duplicates are kept."""
        self._subscribe(event, callback, once=False)
        return self

    def once(self, event: str, callback: Listener) -> Emitter:
        """Register ``callback`` for the next emission of ``event`` only."""
        self._subscribe(event, callback, once=True)
        return self

    def off(self, event: str | None = None, callback: Listener | None = None) -> Emitter:
        """Remove registrations.

        Args:
            event: Event name. When omitted, applies to every event.
            callback: Listener to remove. Only its first registration per
                event is dropped. When omitted, every listener for ``event``
                is dropped.
        """
        if event is None and callback is None:
            self._subs.clear()
            return self

        events = list(self._subs) if event is None else [event]
        for name in events:
            if name not in self._subs:
                continue
            if callback is None:
                del self._subs[name]
                continue
            self._remove_first(name, callback)
        return self

    def emit(self, event: str, *args: Any) -> Emitter:
        """Invoke every listener registered for ``event`` with ``args``."""
        registrations = list(self._subs.get(event, ()))
        stats = self._stats.setdefault(event, {"emitted": 0, "handled": 0})
        stats["emitted"] += 1

        if settings.trace_emits:
            logger.debug(f"emit '{event}' to {len(registrations)} listener(s): {args!r}")

        if not registrations:
            logger.debug(f"Emitting event '{event}' with no listeners")
            return self

        for reg in registrations:
            # a nested emission may already have consumed this one
            if reg.once and not self._discard(event, reg):
                continue
            try:
                reg.callback(*args)
            except Exception:
                name = getattr(reg.callback, "__name__", repr(reg.callback))
                logger.debug(f"Listener '{name}' failed for event '{event}'", exc_info=True)
                raise
            stats["handled"] += 1
        return self

    def listeners(self, event: str) -> list[Listener]:
        """Callbacks currently registered for ``event``, in invocation order."""
        return [reg.callback for reg in self._subs.get(event, ())]

    def has_listeners(self, event: str) -> bool:
        return bool(self._subs.get(event))

    def statistics(self, event: str) -> dict[str, int]:
        """Emission counters for ``event``."""
        return dict(self._stats.get(event, {"emitted": 0, "handled": 0}))

    def _subscribe(self, event: str, callback: Listener, *, once: bool) -> None:
        if not isinstance(event, str) or not event:
            raise ListenerRegistrationError.from_value(
                event,
                expected="non-empty str",
                message="Event name must be a non-empty string",
            )
        if not callable(callback):
            raise ListenerRegistrationError.from_value(
                callback,
                expected="callable",
                message=f"Listener for '{event}' is not callable",
            )
        self._subs.setdefault(event, []).append(_Registration(callback, once))

    def _remove_first(self, event: str, callback: Listener) -> None:
        regs = self._subs[event]
        for i, reg in enumerate(regs):
            if reg.callback == callback:
                del regs[i]
                break
        if not regs:
            del self._subs[event]

    def _discard(self, event: str, registration: _Registration) -> bool:
        regs = self._subs.get(event)
        if not regs:
            return False
        for i, reg in enumerate(regs):
            if reg is registration:
                del regs[i]
                break
        else:
            return False
        if not regs:
            del self._subs[event]
        return True
