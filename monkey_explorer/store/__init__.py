"""
Store package for the Monkey Explorer.

Owns the loaded dataset: integrity verification, parsing and the
thread-safe random-pick counters. This is the only layer that touches the
dataset bytes; the CLI talks to it through `DataStore`.
"""

from monkey_explorer.store.data_store import DataStore
from monkey_explorer.store.errors import IntegrityViolation, MalformedInput
from monkey_explorer.store.integrity import EXPECTED_DIGEST, compute_digest, digest_matches

__all__ = [
    "DataStore",
    "IntegrityViolation",
    "MalformedInput",
    "EXPECTED_DIGEST",
    "compute_digest",
    "digest_matches",
]
