"""
In-memory result cache with per-entry expiry.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

DEFAULT_CACHE_TTL = 3600.0


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class ResultCache:
    """Keyed store whose entries disappear ``ttl`` seconds after they were put.

    The clock is injectable so expiry can be driven by tests.
    """

    def __init__(self, ttl: float = DEFAULT_CACHE_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.clock = clock
        self._entries: Dict[Hashable, CacheEntry] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self.clock():
            del self._entries[key]
            return None
        return entry.value

    def put(self, key: Hashable, value: Any, ttl: Optional[float] = None) -> None:
        lifetime = self.ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(value=value, expires_at=self.clock() + lifetime)

    def evict_expired(self) -> int:
        now = self.clock()
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
