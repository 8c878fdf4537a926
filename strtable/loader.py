"""
Word-list loading for the bulk demo.

A word list is a text file with one key per line. Each record is stripped of
its line terminator and cut to the key buffer size (``KEY_MAX_BYTES`` bytes of
UTF-8, never splitting a character) before it is inserted. Reaching the end
of the file simply ends the load.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Iterator, List, Optional

from .config import KEY_MAX_BYTES
from .datastructures.hash_table import StringHashTable
from .errors import LoaderError

logger = logging.getLogger(__name__)

# Alphabet of generated keys (matches the sample keys of the 12-string demo)
ALPHABET = string.ascii_lowercase + string.digits


def truncate_key(record: str, limit: int = KEY_MAX_BYTES) -> str:
    """Cut *record* to at most *limit* UTF-8 bytes without breaking a character."""
    raw = record.encode("utf-8")
    if len(raw) <= limit:
        return record
    return raw[:limit].decode("utf-8", errors="ignore")


def read_keys(path: str) -> Iterator[str]:
    """Yield one bounded key per line of *path*."""
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as exc:
        raise LoaderError(f"cannot open word list {path!r}: {exc}") from exc
    with f:
        for line in f:
            yield truncate_key(line.rstrip("\r\n"))


def load_file(table: StringHashTable, path: str, value: int = 0) -> int:
    """Insert every key of *path* into *table* with *value*; return the number of records."""
    count = 0
    for key in read_keys(path):
        table.insert(key, value)
        count += 1
    logger.info(
        "Loaded %d records from %s (distinct_entries=%d, collisions=%d)",
        count, path, table.distinct_entries, table.collisions,
    )
    return count


def generate_keys(count: int, length: int = KEY_MAX_BYTES, seed: Optional[int] = None) -> List[str]:
    """Return *count* distinct random keys of *length* lowercase letters and digits."""
    if length < 1 or length > KEY_MAX_BYTES:
        raise ValueError(f"length must be in [1, {KEY_MAX_BYTES}]")
    if count < 0:
        raise ValueError("count must be >= 0")
    if count > len(ALPHABET) ** length:
        raise ValueError(f"cannot make {count} distinct keys of length {length}")
    rng = random.Random(seed)
    seen = set()
    keys: List[str] = []
    while len(keys) < count:
        k = "".join(rng.choice(ALPHABET) for _ in range(length))
        if k not in seen:
            seen.add(k)
            keys.append(k)
    return keys


def write_word_list(path: str, count: int, length: int = KEY_MAX_BYTES, seed: Optional[int] = None) -> int:
    """Write a generated word list to *path*; return the number of keys written."""
    keys = generate_keys(count, length, seed)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for k in keys:
                f.write(k + "\n")
    except OSError as exc:
        raise LoaderError(f"cannot write word list {path!r}: {exc}") from exc
    logger.info("Wrote %d keys of length %d to %s", len(keys), length, path)
    return len(keys)
