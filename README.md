# hotrace

`hotrace` reads a list of key/value pairs and then answers lookups for keys.
It stores the pairs in an open-addressing hash table that resolves collisions
with double hashing and keeps its capacity at a prime number.

## Installation

```
pip install .
```

## Command-line use

The input is read from standard input in two sections, split by an empty line:

1. Key and value lines, one after the other: a key on one line, its value on
   the next. A key that comes again replaces the value stored earlier.
2. Keys to look up, one per line.

For each key that is looked up, the stored value is written out as it was
read. If the key is not in the table, the key is written without its line
ending, followed by `: Not found.` and a newline.

```
$ printf 'apple\nred\nbanana\nyellow\n\napple\ncherry\n' | hotrace
red
cherry: Not found.
```

Keys and values are compared as raw bytes, and the line ending is part of
each key and value. The lookup section ends at the end of input, or at a line
that begins with a NUL byte. `hotrace --help` prints a short usage message;
the command takes no other options.

## Library use

The hash table can also be used on its own:

```python
from hotrace.hashmap import HashMap

table = HashMap(16)                # capacity is raised to the next prime, 17
table.insert(b"apple", b"red")
table.insert(b"apple", b"green")   # replaces the earlier value

table.get(b"apple")      # b"green"
table.get(b"cherry")     # None
b"apple" in table        # True
len(table)               # 1
table.capacity           # 17
```

Keys may be `bytes` or `str`; `str` keys are encoded as UTF-8. Storing `None`
as a value raises `TypeError`. The table grows on its own: `resize()` moves it
to the next prime at or above twice its capacity, which happens when the table
is three quarters full, and also when a probe sequence for a new key (at most
20 attempts) finds no free slot.

Other modules:

- `hotrace.primes` provides `isqrt`, `is_prime` and `next_prime`.
- `hotrace.hashing` provides the two hash functions the table uses: `hash1`,
  an FNV-1a style hash in 64-bit arithmetic that picks the first slot, and
  `hash2`, which gives the odd, non-zero probe step modulo a prime.
- `hotrace.reader` provides `LineReader`, which reads newline-terminated
  lines from a binary stream in fixed-size chunks; it can be iterated.
- `hotrace.cli` provides `read_pairs`, `search_keys` and `main`, which drive
  the command.

## What it does not do

The table lives in memory only: nothing is saved between runs, and there is
no way to remove a key once it has been inserted.

## Running the tests

```
pip install .[test]
pytest
```