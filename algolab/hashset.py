"""A separately chained hash set with prime-sized bucket tables."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Callable, Hashable, Iterator, Optional, TextIO

__all__ = ["thomas_wang_hash", "HashSet"]

_logger = logging.getLogger(__name__)

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

_DEFAULT_LOAD_FACTOR = 0.7

_PRIME_SIZES = (
    11, 23, 47, 97, 199, 409, 823, 1741, 3469, 6949, 14033,
    28067, 56103, 112213, 224467, 448949, 897919, 1795847,
    3591703, 7183417, 14366889, 28733777, 57467521, 114935069,
    229870171, 459740359, 919480687, 1838961469, 3677922933,
    7355845867, 14711691733, 29423383469, 58846766941,
)


def thomas_wang_hash(key: int) -> int:
    """Hash an integer to 32 bits with Thomas Wang's 64-bit mixing function."""
    if not isinstance(key, int):
        raise TypeError("thomas_wang_hash requires an integral key")
    key &= _MASK64
    key = ((~key & _MASK64) + (key << 18)) & _MASK64
    key ^= key >> 31
    key = (key * 21) & _MASK64
    key ^= key >> 11
    key = (key + (key << 6)) & _MASK64
    key ^= key >> 22
    return key & _MASK32


class HashSet:
    """Thread-safe set of keys stored in chained buckets that grow through a prime table."""

    def __init__(
        self,
        load_factor: float = _DEFAULT_LOAD_FACTOR,
        hasher: Optional[Callable[[Any], int]] = None,
    ) -> None:
        if load_factor <= 0:
            raise ValueError("load factor must be positive")
        self._max_load = float(load_factor)
        self._hasher = hasher if hasher is not None else thomas_wang_hash
        self._lock = threading.RLock()
        self._reset()

    def _reset(self) -> None:
        self._prime_index = 0
        self._buckets: list[list[Hashable]] = [[] for _ in range(_PRIME_SIZES[0])]
        self._count = 0

    def _bucket_of(self, key: Any, bucket_count: int) -> int:
        return self._hasher(key) % bucket_count

    def _resize(self) -> None:
        if self._prime_index + 1 >= len(_PRIME_SIZES):
            return
        self._prime_index += 1
        new_count = _PRIME_SIZES[self._prime_index]
        new_buckets: list[list[Hashable]] = [[] for _ in range(new_count)]
        for bucket in self._buckets:
            for key in bucket:
                new_buckets[self._bucket_of(key, new_count)].insert(0, key)
        self._buckets = new_buckets

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        with self._lock:
            if self._count > len(self._buckets) * self._max_load:
                self._resize()
            index = self._bucket_of(key, len(self._buckets))
            bucket = self._buckets[index]
            if any(existing == key for existing in bucket):
                _logger.debug("Key: %r already exists at bucket: %d", key, index)
                return False
            bucket.insert(0, key)
            self._count += 1
            _logger.debug("Inserted key: %r at bucket: %d", key, index)
            return True

    def search(self, key: Any) -> bool:
        """Return True if ``key`` is in the set."""
        with self._lock:
            index = self._bucket_of(key, len(self._buckets))
            found = any(existing == key for existing in self._buckets[index])
            if found:
                _logger.debug("Search key: %r found at bucket: %d", key, index)
            else:
                _logger.debug("Key: %r not found", key)
            return found

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not present."""
        with self._lock:
            index = self._bucket_of(key, len(self._buckets))
            bucket = self._buckets[index]
            for position, existing in enumerate(bucket):
                if existing == key:
                    del bucket[position]
                    self._count -= 1
                    _logger.debug("Removed key: %r from bucket: %d", key, index)
                    return True
            _logger.debug("Key: %r not found for removal. Removal skipped.", key)
            return False

    def clear(self) -> None:
        """Drop every key and shrink back to the smallest table."""
        with self._lock:
            self._reset()

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write each bucket's chain to ``stream`` (standard output by default)."""
        out = stream if stream is not None else sys.stdout
        with self._lock:
            lines = ["HashSet contents:"]
            for index, bucket in enumerate(self._buckets):
                chain = "".join(f"{key} -> " for key in bucket)
                lines.append(f"Bucket {index}: {chain}None")
        out.write("\n".join(lines) + "\n")

    def capacity(self) -> int:
        """Return the number of buckets."""
        with self._lock:
            return len(self._buckets)

    def load_factor(self) -> float:
        """Return the current ratio of keys to buckets."""
        with self._lock:
            return self._count / len(self._buckets)

    def __len__(self) -> int:
        with self._lock:
            return self._count

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = [key for bucket in self._buckets for key in bucket]
        return iter(snapshot)