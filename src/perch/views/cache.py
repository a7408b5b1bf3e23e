"""View location cache.

Maps the inputs of a lookup (view name, controller, area, and the
values contributed by expanders) to the path where a page was found.

Only successful lookups are stored. A cached path is a hint, not a
promise: the engine re-checks it with the page loader on every hit and
falls back to a full search when the page is gone. Stale entries are
overwritten by the next successful search rather than evicted.

Thread safety:
    ``DefaultViewLocationCache`` guards its state with a
    ``threading.Lock``, so a single key's get/set are linearizable.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Protocol

from perch.views.expanders import ViewLocationExpanderContext

logger = logging.getLogger("perch.cache")


@dataclass(frozen=True, slots=True)
class ViewLocationCacheKey:
    """Composite cache key derived from an expander context.

    ``values`` is sorted by key so the key does not depend on dict
    insertion order.
    """

    view_name: str
    controller_name: str
    area_name: str
    values: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_context(cls, context: ViewLocationExpanderContext) -> ViewLocationCacheKey:
        values = tuple(sorted(context.values.items())) if context.values else ()
        return cls(
            view_name=context.view_name,
            controller_name=context.controller_name,
            area_name=context.area_name,
            values=values,
        )


class ViewLocationCache(Protocol):
    """Protocol for view location caches."""

    def get(self, context: ViewLocationExpanderContext) -> str | None:
        """Return the cached path for *context*, or ``None``."""
        ...

    def set(self, context: ViewLocationExpanderContext, path: str) -> None:
        """Record that *context* resolved to *path*."""
        ...


class DefaultViewLocationCache:
    """Process-wide, thread-safe location cache.

    Unbounded by default. With ``max_entries``, the least recently used
    key is evicted once the bound is exceeded.
    """

    __slots__ = ("_entries", "_lock", "_max_entries")

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            msg = f"max_entries must be a positive integer or None, got {max_entries!r}"
            raise ValueError(msg)
        self._max_entries = max_entries
        self._lock = threading.Lock()
        self._entries: OrderedDict[ViewLocationCacheKey, str] = OrderedDict()

    def get(self, context: ViewLocationExpanderContext) -> str | None:
        key = ViewLocationCacheKey.from_context(context)
        with self._lock:
            path = self._entries.get(key)
            if path is not None and self._max_entries is not None:
                self._entries.move_to_end(key)
            return path

    def set(self, context: ViewLocationExpanderContext, path: str) -> None:
        if not path:
            msg = "Cannot cache an empty view location"
            raise ValueError(msg)
        key = ViewLocationCacheKey.from_context(context)
        with self._lock:
            self._entries[key] = path
            self._entries.move_to_end(key)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Evicted view location for %r", evicted.view_name)

    def clear(self) -> None:
        """Drop every cached location."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
