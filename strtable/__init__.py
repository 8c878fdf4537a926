"""Fixed-size, separately-chained hash table from short strings to unsigned ints."""

from .datastructures import InsertResult, LookupResult, StringHashTable, TableStats, get_hash, new_table
from .errors import (
    AllocationError,
    CorruptTableError,
    HashTableError,
    InvalidKeyError,
    InvalidSizeError,
    InvalidValueError,
    KeyTooLongError,
    LoaderError,
)
from .inspector import format_table, pretty_print

__all__ = [
    "StringHashTable",
    "InsertResult",
    "LookupResult",
    "TableStats",
    "get_hash",
    "new_table",
    "format_table",
    "pretty_print",
    "HashTableError",
    "InvalidSizeError",
    "InvalidKeyError",
    "KeyTooLongError",
    "InvalidValueError",
    "AllocationError",
    "CorruptTableError",
    "LoaderError",
]
