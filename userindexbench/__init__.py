"""Benchmark of MurmurHash3-based hash tables and binary search trees for indexing user records."""

__version__ = "0.1.0"
__all__ = ["murmur", "users", "closed_hash", "open_hash", "bst", "experiment"]