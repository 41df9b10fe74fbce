"""Open-addressing hash table with double hashing."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from .hashing import hash1, hash2
from .primes import next_prime

__all__ = ["HashMap", "DEFAULT_CAPACITY", "MAX_PROBES", "MAX_LOAD"]

DEFAULT_CAPACITY = 1048583
MAX_PROBES = 20
MAX_LOAD = 0.75

_Entry = Tuple[bytes, Any]


def _normalize_key(key: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"key must be str or bytes, not {type(key).__name__}")


class HashMap:
    """Key/value table sized to prime capacities and probed by double hashing.

    Keys are stored as bytes; str keys are encoded as UTF-8.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._allocate(next_prime(capacity))

    def _allocate(self, capacity: int) -> None:
        self._capacity = capacity
        self._step_prime = next_prime(capacity // 2)
        self._slots: list[Optional[_Entry]] = [None] * capacity
        self._size = 0

    def _probe(self, key: bytes) -> Iterator[int]:
        capacity = self._capacity
        idx = hash1(key) % capacity
        step = hash2(key, self._step_prime)
        for _ in range(min(capacity, MAX_PROBES)):
            yield idx
            idx = (idx + step) % capacity

    def _insert_index(self, key: bytes) -> Optional[int]:
        for idx in self._probe(key):
            entry = self._slots[idx]
            if entry is None or entry[0] == key:
                return idx
        return None

    def _lookup_index(self, key: bytes) -> Optional[int]:
        if self._size == 0:
            return None
        for idx in self._probe(key):
            entry = self._slots[idx]
            if entry is None:
                return None
            if entry[0] == key:
                return idx
        return None

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return self._capacity

    def insert(self, key: bytes | str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if value is None:
            raise TypeError("value must not be None")
        key = _normalize_key(key)
        while True:
            if self._size / self._capacity >= MAX_LOAD:
                self.resize()
            idx = self._insert_index(key)
            if idx is not None:
                break
            self.resize()
        if self._slots[idx] is None:
            self._size += 1
        self._slots[idx] = (key, value)

    def get(self, key: bytes | str) -> Any:
        """Return the value stored under ``key``, or None if it is absent."""
        idx = self._lookup_index(_normalize_key(key))
        if idx is None:
            return None
        entry = self._slots[idx]
        assert entry is not None
        return entry[1]

    def resize(self) -> None:
        """Grow to the next prime at or above twice the capacity and rehash."""
        old_slots = self._slots
        self._allocate(next_prime(self._capacity * 2))
        for entry in old_slots:
            if entry is not None:
                self.insert(*entry)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        try:
            normalized = _normalize_key(key)  # type: ignore[arg-type]
        except TypeError:
            return False
        return self._lookup_index(normalized) is not None