"""
Demo scenarios, each printing the table after every step.

- ``run_twelve_strings``: 12 ten-character keys in a 16-bucket table, then
  4 deletions and 3 value updates.
- ``run_word_file``: bulk-load a word list into a 2^18-bucket table.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import DEFAULT_WORDS_PATH, DEMO_DELETES, DEMO_KEYS, DEMO_TABLE_SIZE, DEMO_UPDATES, WORD_TABLE_SIZE
from .datastructures.hash_table import StringHashTable, new_table
from .inspector import pretty_print
from .loader import load_file


def run_twelve_strings(out: Optional[TextIO] = None) -> StringHashTable:
    out = out or sys.stdout
    table = new_table(DEMO_TABLE_SIZE)

    out.write("Empty hashtable\n")
    pretty_print(table, out)

    out.write(f"\nInsert strings ({', '.join(DEMO_KEYS)}), with value '0', in the hash table:\n")
    for key in DEMO_KEYS:
        table.insert(key, 0)
        pretty_print(table, out)

    out.write(f"\nDelete strings ({', '.join(DEMO_DELETES)}) from the hash table:\n")
    for key in DEMO_DELETES:
        table.delete(key)
        pretty_print(table, out)

    changes = ", ".join(f"{k} -> {v}" for k, v in DEMO_UPDATES)
    out.write(f"\nChange value of strings ({changes}) in the hash table:\n")
    for key, value in DEMO_UPDATES:
        table.insert(key, value)
        pretty_print(table, out)
    return table


def run_word_file(
    path: str = DEFAULT_WORDS_PATH,
    out: Optional[TextIO] = None,
    size: int = WORD_TABLE_SIZE,
) -> StringHashTable:
    """Load every line of *path* into a fresh table and print it."""
    table = new_table(size)
    load_file(table, path)
    pretty_print(table, out)
    return table
