from __future__ import annotations
from typing import Iterator, Optional, Tuple


class Entry:
    """A node of a bucket chain: one (key, value) pair plus the link to the next node.

    The key is kept as UTF-8 bytes in a private ``bytearray`` so that it can be
    overwritten in place by :meth:`erase` when the entry is deleted. Python
    ``str`` objects are immutable and cannot be wiped.
    """

    __slots__ = ("_key", "value", "next")

    def __init__(self, key: bytes, value: int, next: Optional["Entry"] = None) -> None:
        self._key = bytearray(key)
        self.value = value
        self.next = next

    @property
    def key(self) -> str:
        return self._key.decode("utf-8")

    def matches(self, key: bytes) -> bool:
        """Exact, case-sensitive comparison against an encoded key."""
        return self._key == key

    def erase(self) -> None:
        """Overwrite the key bytes with zeros, then drop the value and the link."""
        self._key[:] = bytes(len(self._key))
        self.value = 0
        self.next = None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.key!r}, {self.value!r})"


class LinkedList:
    """Singly-linked chain of :class:`Entry` nodes for one bucket.

    New keys are appended at the tail, existing keys keep their position and
    only have their value replaced. Lookups scan head to tail.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[Entry] = None

    def insert_or_replace(self, key: bytes, value: int) -> Tuple[Entry, bool]:
        """Replace the value of *key* if present, otherwise append a new tail node.

        Returns the entry that now holds the value and True if it was created,
        False if an existing entry was updated.
        """
        n = self.head
        if n is None:
            self.head = Entry(key, value)
            return self.head, True
        while True:
            if n.matches(key):
                n.value = value
                return n, False  # replaced
            if n.next is None:
                break
            n = n.next
        n.next = Entry(key, value)
        return n.next, True  # appended at tail

    def find(self, key: bytes) -> Optional[Entry]:
        """Return the entry for *key*, or None if not present."""
        n = self.head
        while n:
            if n.matches(key):
                return n
            n = n.next
        return None

    def delete(self, key: bytes) -> Optional[Entry]:
        """Unlink the entry for *key* and return it; None if not present.

        A head match promotes its successor, any other match is spliced out by
        linking its predecessor to its successor. The returned entry still
        holds its data; erasing it is up to the caller.
        """
        prev: Optional[Entry] = None
        cur = self.head
        while cur:
            if cur.matches(key):
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                cur.next = None
                return cur
            prev, cur = cur, cur.next
        return None

    def entries(self) -> Iterator[Entry]:
        n = self.head
        while n:
            yield n
            n = n.next

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield (key, value) pairs in chain order."""
        for n in self.entries():
            yield (n.key, n.value)

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())

    def __bool__(self) -> bool:
        return self.head is not None

    def __iter__(self) -> Iterator[Tuple[str, int]]:  # pragma: no cover - simple
        return self.items()
