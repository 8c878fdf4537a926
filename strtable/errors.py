"""Exceptions raised by the string hash table and its collaborators.

Every error derives from :class:`HashTableError` and also from the closest
builtin exception, so callers can catch either.  A key that is simply not in
the table is *not* an error: ``get`` and ``delete`` report it through the
``found`` flag of their result.
"""


class HashTableError(Exception):
    """Base class for all hash table errors."""


class InvalidSizeError(HashTableError, ValueError):
    """Bucket count is not an integer >= 2."""


class InvalidKeyError(HashTableError, TypeError):
    """Key is missing (``None``) or is not a string."""


class KeyTooLongError(InvalidKeyError, ValueError):
    """Key does not fit the fixed-size key buffer."""

    def __init__(self, key: str, limit: int) -> None:
        super().__init__(f"key of {len(key.encode('utf-8'))} bytes exceeds the {limit}-byte limit")
        self.key = key
        self.limit = limit


class InvalidValueError(HashTableError, ValueError):
    """Value is not an unsigned integer."""


class AllocationError(HashTableError, MemoryError):
    """Memory could not be obtained for a table or an entry."""


class CorruptTableError(HashTableError):
    """Counters no longer agree with the bucket structure."""


class LoaderError(HashTableError, OSError):
    """A word list could not be read or written."""
