"""Command line entry point: load key/value pairs, then answer lookups."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Optional, Sequence

from .hashmap import DEFAULT_CAPACITY, HashMap
from .reader import LineReader

__all__ = ["read_pairs", "search_keys", "main"]

NOT_FOUND = b": Not found.\n"


def read_pairs(reader: LineReader, table: HashMap) -> None:
    """Insert alternating key and value lines until a blank line or end of input."""
    while True:
        key = reader.readline()
        if key is None or key.startswith(b"\n"):
            break
        value = reader.readline()
        if value is not None:
            table.insert(key, value)


def search_keys(reader: LineReader, table: HashMap, out: BinaryIO) -> None:
    """Look up each remaining line and write its value or a not-found notice."""
    for query in reader:
        if query.startswith(b"\0"):
            return
        result = table.get(query)
        if result is not None:
            out.write(result)
        else:
            name = query[:-1] if query.endswith(b"\n") else query
            out.write(name + NOT_FOUND)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read pairs and queries from standard input and answer on standard output."""
    parser = argparse.ArgumentParser(
        prog="hotrace",
        description=(
            "Read key and value lines from standard input up to a blank line, "
            "then print the value of every key that follows."
        ),
    )
    parser.parse_args(argv)
    table = HashMap(DEFAULT_CAPACITY)
    reader = LineReader(sys.stdin.buffer)
    out = sys.stdout.buffer
    read_pairs(reader, table)
    search_keys(reader, table, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())