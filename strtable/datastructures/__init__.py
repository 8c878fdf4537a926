from .linked_list import Entry, LinkedList
from .hash_table import InsertResult, LookupResult, StringHashTable, TableStats, get_hash, new_table

__all__ = [
    "Entry",
    "LinkedList",
    "StringHashTable",
    "InsertResult",
    "LookupResult",
    "TableStats",
    "get_hash",
    "new_table",
]
