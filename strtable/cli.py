"""
String Hash Table Command-Line Interface (CLI)

Runs the demo scenarios of the hash table. It ties together:
- The table itself (insert / delete / update)
- The word-list loader and generator
- The pretty-printer

Usage examples:
    python -m strtable.cli twelve
    python -m strtable.cli gen-words --path rnd_str.txt --count 100000
    python -m strtable.cli load --path rnd_str.txt
    python -m strtable.cli menu
"""

import argparse
import logging
import re
import sys

from . import demo, loader
from .config import DEFAULT_WORDS_PATH, WORD_COUNT, WORD_LENGTH, WORD_TABLE_SIZE
from .errors import HashTableError

logger = logging.getLogger(__name__)

MENU = (
    "Welcome to the String Hash Table implementation in Python!\n\n"
    "There are two test functions available:\n"
    "  1) Test with 12 different strings, each 10 characters long\n"
    "  2) Test with 100.000 different strings, each 64 characters long, "
    "written in a file called \"rnd_str.txt\"\n"
    "  3) Exit\n"
)
PROMPT = "Please, choose an option [1,2,3]: "

# Leading integer of a line, as scanf("%d") reads it
_OPTION_RE = re.compile(r"\s*([+-]?\d+)")


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_twelve(args):
    """Insert, delete and update the 12 sample strings."""
    demo.run_twelve_strings()
    return 0


def cmd_load(args):
    """Load a word list into a large table and print it."""
    demo.run_word_file(args.path, size=args.size)
    return 0


def cmd_gen_words(args):
    """Write a word list of random distinct keys."""
    n = loader.write_word_list(args.path, args.count, args.length, args.seed)
    print(f"Wrote {n} keys to {args.path}")
    return 0


def read_option():
    """Prompt until the user picks 1, 2 or 3; return None on end of input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return None
        m = _OPTION_RE.match(line)
        if m is None:
            continue
        option = int(m.group(1))
        if 1 <= option <= 3:
            return option


def cmd_menu(args):
    """Interactive menu choosing one of the demos."""
    print(MENU)
    option = read_option()
    if option == 1:
        demo.run_twelve_strings()
    elif option == 2:
        demo.run_word_file(args.path, size=args.size)
    elif option == 3:
        print("\nGoodbye! :)")
    else:
        print("[ERROR] There was an error while trying to read the value. Closing...", file=sys.stderr)
        return 1
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="strtable", description="String hash table demos")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("twelve", help="Run the 12-string demo")
    s.set_defaults(func=cmd_twelve)

    s = sub.add_parser("load", help="Load a word list and print the table")
    s.add_argument("--path", default=DEFAULT_WORDS_PATH)
    s.add_argument("--size", type=int, default=WORD_TABLE_SIZE)
    s.set_defaults(func=cmd_load)

    s = sub.add_parser("gen-words", help="Generate a word list")
    s.add_argument("--path", default=DEFAULT_WORDS_PATH)
    s.add_argument("--count", type=int, default=WORD_COUNT)
    s.add_argument("--length", type=int, default=WORD_LENGTH)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_gen_words)

    s = sub.add_parser("menu", help="Pick a demo interactively")
    s.add_argument("--path", default=DEFAULT_WORDS_PATH)
    s.add_argument("--size", type=int, default=WORD_TABLE_SIZE)
    s.set_defaults(func=cmd_menu)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `strtable` or `python -m strtable.cli`."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (HashTableError, ValueError) as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
