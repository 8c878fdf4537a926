"""
Pretty-printer for a :class:`StringHashTable`.

Read-only: it only walks ``table.buckets()``. Each occupied bucket prints its
whole chain on one line; runs of empty buckets are shortened so that only the
first and the last empty bucket of a run are shown, with a single truncation
marker in between.

Example (size 16)::

     0 --> {(7i2pefipwc, 0), (ouam4phm2c, 0)}
     1 --> NULL
     [...]
     6 --> NULL
     7 --> {(8ct4xaucod, 0)}
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .datastructures.hash_table import StringHashTable

MISSING_TABLE = "This hash table does not exist."


def _marker(padding: int) -> str:
    """Truncation marker, as wide as the index column (at least three dots)."""
    if padding < 7:
        return " [...]"
    return " [" + "." * (padding - 3) + "]"


def format_lines(table: Optional[StringHashTable]) -> List[str]:
    """Return the listing of *table* as a list of lines (no trailing blank lines)."""
    if table is None:
        return [MISSING_TABLE]

    padding = len(str(table.size)) + 1
    buckets = [chain for _, chain in table.buckets()]
    last = table.size - 1

    lines: List[str] = []
    consecutive_empty = 0
    dots = False  # marker already printed for the current run
    for i, chain in enumerate(buckets):
        if chain:
            consecutive_empty = 0
            dots = False
            pairs = ", ".join(f"({k}, {v})" for k, v in chain)
            lines.append(f"{i:>{padding}} --> {{{pairs}}}")
            continue

        consecutive_empty += 1
        if i == 0 or i == last or consecutive_empty == 1 or buckets[i + 1]:
            lines.append(f"{i:>{padding}} --> NULL")
        elif not dots:
            lines.append(_marker(padding))
            dots = True
    return lines


def format_table(table: Optional[StringHashTable]) -> str:
    """Return the full listing, terminated by two blank lines."""
    lines = format_lines(table)
    if table is None:
        return lines[0] + "\n"
    return "\n".join(lines) + "\n\n\n"


def pretty_print(table: Optional[StringHashTable], out: Optional[TextIO] = None) -> None:
    """Write the listing of *table* to *out* (stdout by default)."""
    (out or sys.stdout).write(format_table(table))
