"""Thread-safe in-memory key/value store."""

import threading


class KeyValueStore:
    """String-to-string mapping guarded by a single lock.

    Every read and write takes the lock, so concurrent callers never
    observe a partially applied update.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite ``key``."""
        with self._lock:
            self._entries[key] = value

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None if it was never stored."""
        with self._lock:
            return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
