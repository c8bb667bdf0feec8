"""Bounded set of recently seen message keys."""

import threading
from collections import OrderedDict

DEFAULT_CAPACITY = 1000
DEFAULT_EVICT_BATCH = 500


class SeenCache:
    """Insertion-ordered set with batch eviction of the oldest entries.

    Once the size exceeds `capacity`, the oldest `evict_batch` keys are
    dropped in one pass. Lookups do not refresh an entry's position.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, evict_batch: int = DEFAULT_EVICT_BATCH):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        if not 1 <= evict_batch <= capacity:
            raise ValueError("evict_batch must be between 1 and capacity")
        self.capacity = capacity
        self.evict_batch = evict_batch
        self._keys: "OrderedDict[str, None]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: str) -> bool:
        return self.has_seen(key)

    def has_seen(self, key: str) -> bool:
        with self._lock:
            return key in self._keys

    def mark_seen(self, key: str) -> None:
        with self._lock:
            self._mark(key)

    def check_and_mark(self, key: str) -> bool:
        """Mark `key` as seen. Returns True if it was new, False if already seen."""
        with self._lock:
            if key in self._keys:
                return False
            self._mark(key)
            return True

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()

    def _mark(self, key: str) -> None:
        if key in self._keys:
            return
        self._keys[key] = None
        if len(self._keys) > self.capacity:
            for _ in range(self.evict_batch):
                self._keys.popitem(last=False)
