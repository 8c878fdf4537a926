from __future__ import annotations

import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..config import KEY_MAX_BYTES, MIN_TABLE_SIZE
from ..errors import (
    AllocationError,
    CorruptTableError,
    InvalidKeyError,
    InvalidSizeError,
    InvalidValueError,
    KeyTooLongError,
)
from .linked_list import LinkedList

logger = logging.getLogger(__name__)


class InsertResult(NamedTuple):
    value: int
    created: bool


class LookupResult(NamedTuple):
    found: bool
    value: Optional[int]


class TableStats(NamedTuple):
    size: int
    distinct_entries: int
    collisions: int
    total_entries: int
    occupied_buckets: int
    longest_chain: int
    load_factor: float


def get_hash(size: int, key: str) -> int:
    """Return the bucket index of *key* in a table of *size* buckets.

    Horner-style rolling hash with multiplier 33: for every character the
    running value becomes ``ord(c) + h * 33``, where ``h * 33`` is computed as
    ``(h << 5) + h``. The modulo is applied after every character, so the
    intermediate value stays below ``33 * size`` and the result is always a
    valid index. The empty string hashes to 0.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidSizeError(f"bucket count must be a positive integer, got {size!r}")
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a str, got {type(key).__name__}")
    h = 0
    for ch in key:
        h = (ord(ch) + (h << 5) + h) % size
    return h


def _encode_key(key: Optional[str]) -> bytes:
    """Validate *key* and return its UTF-8 bytes."""
    if key is None:
        raise InvalidKeyError("key is required")
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a str, got {type(key).__name__}")
    try:
        raw = key.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidKeyError("key is not encodable as UTF-8") from exc
    if len(raw) > KEY_MAX_BYTES:
        raise KeyTooLongError(key, KEY_MAX_BYTES)
    return raw


class StringHashTable:
    """A fixed-size, separately-chained hash table from short strings to unsigned ints.

    The bucket count is chosen at construction and never changes (no
    rehashing). Each bucket is either empty (``None``) or a :class:`LinkedList`
    of entries whose keys hashed to that index.

    Two counters are kept in step with every structural change:

    - ``distinct_entries``: bumped when a key lands in an empty bucket and
      dropped when a bucket's last entry is deleted, i.e. the number of
      occupied buckets.
    - ``collisions``: entries that are not the only entry of their bucket,
      i.e. total entries minus occupied buckets.

    ``len(table)`` is the number of stored keys, ``distinct_entries + collisions``.

    Not thread-safe: callers sharing a table across threads must lock around it.
    """

    __slots__ = ("size", "distinct_entries", "collisions", "_buckets")

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < MIN_TABLE_SIZE:
            raise InvalidSizeError(f"bucket count must be an integer >= {MIN_TABLE_SIZE}, got {size!r}")
        try:
            self._buckets: List[Optional[LinkedList]] = [None] * size
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"cannot allocate {size} buckets") from exc
        self.size: int = size
        self.distinct_entries: int = 0
        self.collisions: int = 0
        logger.info("Created hash table with %d buckets", size)

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, key: str, value: int) -> InsertResult:
        """Insert *key* with *value*, or replace the value if *key* is already stored.

        A new key in an empty bucket becomes its only entry; a new key in an
        occupied bucket is appended at the tail of the chain and counts as a
        collision. An existing key keeps its position.
        """
        raw = _encode_key(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidValueError(f"value must be a non-negative integer, got {value!r}")

        idx = get_hash(self.size, key)
        bucket = self._buckets[idx]
        was_empty = bucket is None
        try:
            if bucket is None:
                bucket = LinkedList()
            entry, created = bucket.insert_or_replace(raw, value)
        except MemoryError as exc:
            raise AllocationError(f"cannot allocate entry for a {len(raw)}-byte key") from exc

        if was_empty:
            self._buckets[idx] = bucket
            self.distinct_entries += 1
            logger.debug("insert %d-byte key -> bucket %d (new chain)", len(raw), idx)
        elif created:
            self.collisions += 1
            logger.debug("insert %d-byte key -> bucket %d (collision)", len(raw), idx)
        else:
            logger.debug("update %d-byte key in bucket %d", len(raw), idx)
        return InsertResult(entry.value, created)

    def get(self, key: str) -> LookupResult:
        """Look up *key*; ``found`` is False when it is not stored."""
        raw = _encode_key(key)
        bucket = self._buckets[get_hash(self.size, key)]
        if bucket is None:
            return LookupResult(False, None)
        entry = bucket.find(raw)
        if entry is None:
            return LookupResult(False, None)
        return LookupResult(True, entry.value)

    def delete(self, key: str) -> LookupResult:
        """Remove *key* and return the value it held.

        The removed entry's key bytes are zeroed before the entry is dropped.
        A missing key leaves the table untouched and returns ``found=False``.
        """
        raw = _encode_key(key)
        idx = get_hash(self.size, key)
        bucket = self._buckets[idx]
        if bucket is None:
            return LookupResult(False, None)
        entry = bucket.delete(raw)
        if entry is None:
            return LookupResult(False, None)

        if bucket:
            # head promoted or entry spliced out; bucket stays occupied
            self.collisions -= 1
        else:
            self._buckets[idx] = None
            self.distinct_entries -= 1
        value = entry.value
        entry.erase()
        logger.debug("delete %d-byte key from bucket %d", len(raw), idx)
        return LookupResult(True, value)

    def clear(self) -> None:
        """Erase every entry and reset the counters."""
        for idx, bucket in enumerate(self._buckets):
            if bucket is None:
                continue
            for entry in list(bucket.entries()):
                entry.erase()
            self._buckets[idx] = None
        self.distinct_entries = 0
        self.collisions = 0

    # -----------------------------
    # Enumeration
    # -----------------------------
    def buckets(self) -> Iterator[Tuple[int, List[Tuple[str, int]]]]:
        """Yield ``(index, [(key, value), ...])`` for every bucket, index ascending.

        Chains are listed head to tail; empty buckets yield an empty list.
        """
        for idx, bucket in enumerate(self._buckets):
            yield idx, list(bucket.items()) if bucket else []

    def items(self) -> Iterator[Tuple[str, int]]:
        for bucket in self._buckets:
            if bucket:
                yield from bucket.items()

    def keys(self) -> Iterator[str]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[int]:
        for _, v in self.items():
            yield v

    def occupied_buckets(self) -> int:
        return sum(1 for bucket in self._buckets if bucket)

    # -----------------------------
    # Diagnostics
    # -----------------------------
    def stats(self) -> TableStats:
        lengths = [len(bucket) for bucket in self._buckets if bucket]
        total = sum(lengths)
        return TableStats(
            size=self.size,
            distinct_entries=self.distinct_entries,
            collisions=self.collisions,
            total_entries=total,
            occupied_buckets=len(lengths),
            longest_chain=max(lengths, default=0),
            load_factor=total / self.size,
        )

    def check_invariants(self) -> None:
        """Recount the structure and raise :class:`CorruptTableError` if the counters disagree."""
        s = self.stats()
        if s.distinct_entries != s.occupied_buckets:
            raise CorruptTableError(
                f"distinct_entries={s.distinct_entries} but {s.occupied_buckets} buckets are occupied"
            )
        if s.collisions != s.total_entries - s.occupied_buckets:
            raise CorruptTableError(
                f"collisions={s.collisions} but chains hold "
                f"{s.total_entries - s.occupied_buckets} overflow entries"
            )

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self.distinct_entries + self.collisions

    def __contains__(self, key: str) -> bool:
        return self.get(key).found

    def __getitem__(self, key: str) -> int:
        found, value = self.get(key)
        if not found:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def __setitem__(self, key: str, value: int) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.delete(key).found:
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:  # pragma: no cover - simple
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"StringHashTable(size={self.size}, distinct_entries={self.distinct_entries}, "
            f"collisions={self.collisions})"
        )


def new_table(size: int) -> StringHashTable:
    """Create an empty table with *size* buckets (``InvalidSizeError`` if size < 2)."""
    return StringHashTable(size)
