"""In-memory key/value store with per-entry expiry."""

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: float


class ExpiringStore(Generic[V]):
    """Mapping whose entries disappear once their expiry time has passed.

    Expired entries are dropped when popped, or in bulk via ``sweep()``.
    ``pop`` removes the entry in the same step it reads it, so a key can be
    consumed at most once.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, _Entry[V]] = {}

    def set(self, key: str, value: V, ttl_seconds: float) -> None:
        """Store a value that expires ``ttl_seconds`` from now."""
        self._entries[key] = _Entry(value=value, expires_at=self._clock() + ttl_seconds)

    def pop(self, key: str) -> V | None:
        """Remove and return the value, or None if absent or expired."""
        entry = self._entries.pop(key, None)
        if entry is None or self._is_expired(entry):
            return None
        return entry.value

    def sweep(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def _is_expired(self, entry: _Entry[V]) -> bool:
        return self._clock() >= entry.expires_at

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if now < entry.expires_at)
