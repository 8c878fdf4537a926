"""
Project-wide settings for the string hash table.

Paths are resolved relative to the project root (one level above this
package), the same way the demo scripts expect to find their word list.
"""

import os

# Base directory of the project (one level above this file's folder)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Word list used by the bulk-load demo (one key per line)
DEFAULT_WORDS_PATH = os.path.join(BASE_DIR, "rnd_str.txt")

# Keys are stored in a fixed buffer of this many bytes (UTF-8)
KEY_MAX_BYTES = 64

# A table needs at least two buckets
MIN_TABLE_SIZE = 2

# Bucket counts used by the two demo scenarios
DEMO_TABLE_SIZE = 16
WORD_TABLE_SIZE = 2 ** 18

# Default shape of a generated word list
WORD_COUNT = 100_000
WORD_LENGTH = KEY_MAX_BYTES

# 12-string demo: keys (bucket index with 16 buckets in the comment)
DEMO_KEYS = (
    "8ct4xaucod",  # 7
    "7i2pefipwc",  # 0
    "mmnoy7c6yq",  # 10
    "ouam4phm2c",  # 0
    "e2xztziqtj",  # 15
    "wrrw5arl6d",  # 0
    "7lc5pgl8kd",  # 5
    "93i5i8sx17",  # 14
    "6kkd8e0zq1",  # 9
    "yeqmy6bjmk",  # 15
    "hn1gybiuy6",  # 6
    "5wr2vyui8t",  # 9
)
DEMO_DELETES = ("7lc5pgl8kd", "6kkd8e0zq1", "e2xztziqtj", "yeqmy6bjmk")
DEMO_UPDATES = (("ouam4phm2c", 37), ("93i5i8sx17", 55), ("5wr2vyui8t", 79))
