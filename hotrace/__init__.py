"""Key/value lookup backed by a double-hashing open-addressing table."""

__version__ = "0.1.0"
__all__ = ["cli", "hashing", "hashmap", "primes", "reader"]