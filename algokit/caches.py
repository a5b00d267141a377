"""In-memory caches: least recently used, least frequently used, and expiring."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict, defaultdict
from collections.abc import Callable, Hashable
from typing import Any


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class LRUCache:
    """A fixed-size cache that evicts the least recently used entry."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key`` and mark it as recently used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key, last=False)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least recently used entry if full."""
        if self.capacity == 0:
            return
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=True)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)


class LFUCache:
    """A fixed-size cache that evicts the least frequently used entry.

    Among entries with the same use count, the one used longest ago goes first.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._values: dict[Hashable, Any] = {}
        self._counts: dict[Hashable, int] = {}
        self._buckets: defaultdict[int, OrderedDict[Hashable, None]] = defaultdict(OrderedDict)
        self._min_count = 0

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def frequency(self, key: Hashable) -> int:
        """Return how often ``key`` has been used, or 0 if it is not cached."""
        return self._counts.get(key, 0)

    def _touch(self, key: Hashable) -> None:
        count = self._counts[key]
        bucket = self._buckets[count]
        del bucket[key]
        if not bucket:
            del self._buckets[count]
            if self._min_count == count:
                self._min_count = count + 1
        self._counts[key] = count + 1
        self._buckets[count + 1][key] = None

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key`` and count the use, or None if absent."""
        if key not in self._values:
            return None
        self._touch(key)
        return self._values[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least frequently used entry if full."""
        if self.capacity == 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) == self.capacity:
            bucket = self._buckets[self._min_count]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._buckets[self._min_count]
            del self._values[victim]
            del self._counts[victim]
        self._values[key] = value
        self._counts[key] = 1
        self._buckets[1][key] = None
        self._min_count = 1


class ExpiringCache:
    """A thread-safe cache whose entries expire a fixed number of seconds after being stored."""

    def __init__(
        self,
        expiration_time: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.expiration_time = expiration_time
        self._clock = clock
        self._entries: dict[Hashable, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key`` with a fresh expiry time."""
        with self._lock:
            self._entries[key] = (value, self._clock() + self.expiration_time)

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key``, or None if it is absent or has expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, deadline = entry
            if self._clock() > deadline:
                del self._entries[key]
                return None
            return value