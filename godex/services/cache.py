"""In-memory response cache with a background sweep thread.

Entries are raw response bodies keyed by request URL. Expiry is eventual:
``get`` never checks age, a daemon thread wakes once per interval and drops
every entry older than the interval. An entry can therefore outlive the
interval by up to one sweep period.

There is no size bound. The cache grows with the number of distinct URLs
requested during the process lifetime.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    value: bytes
    created_at: float


class Cache:
    """Thread-safe URL -> bytes cache. One lock guards the whole keyspace."""

    def __init__(
        self,
        interval: float,
        time_func: Callable[[], float] = time.monotonic,
        start_sweeper: bool = True,
    ):
        if interval <= 0:
            raise ValueError(f"Cache interval must be positive, got {interval}")
        self.interval = interval
        self._entries: dict[str, Entry] = {}
        self._lock = threading.Lock()
        self._time_func = time_func
        self._stopped = threading.Event()
        self._sweeper: threading.Thread | None = None
        if start_sweeper:
            self._sweeper = threading.Thread(
                target=self._reap_loop, name="godex-cache-sweeper", daemon=True
            )
            self._sweeper.start()

    def add(self, key: str, payload: bytes | bytearray | memoryview) -> None:
        if not key:
            raise ValueError("Cache key must be a non-empty string")
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cache payload must be bytes-like, got {type(payload).__name__}")
        entry = Entry(value=bytes(payload), created_at=self._time_func())
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> tuple[bytes, bool]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return b"", False
        return entry.value, True

    def sweep(self) -> int:
        """Run one expiry pass now and return the number of removed keys."""
        with self._lock:
            # Reference time is taken per pass, so the effective TTL stays fixed.
            now = self._time_func()
            expired = [
                key for key, entry in self._entries.items()
                if now - entry.created_at > self.interval
            ]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Cache sweep removed %d entries", len(expired))
        return len(expired)

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.sweep()

    def close(self, timeout: float | None = None) -> None:
        """Stop the sweep thread. Stored entries stay readable."""
        self._stopped.set()
        if self._sweeper is not None and self._sweeper is not threading.current_thread():
            self._sweeper.join(timeout)

    @property
    def closed(self) -> bool:
        return self._stopped.is_set()

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


def new_cache(interval: float) -> Cache:
    """Create a cache and start its sweep thread."""
    return Cache(interval)

