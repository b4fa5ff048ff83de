"""
Error taxonomy for the data store.

Only `IntegrityViolation` ever escapes `DataStore.load`. `MalformedInput` is
raised by the parser and absorbed by the store, which then comes up empty.
Absence of data is never an error: query operations return `None` or an empty
tuple instead.
"""

from __future__ import annotations


class IntegrityViolation(Exception):
    """The dataset bytes do not hash to the expected digest."""

    def __init__(self, source: str, expected: str, actual: str) -> None:
        self.source = source
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Integrity check failed for {source}: data was modified "
            f"(expected digest {expected}, got {actual})"
        )


class MalformedInput(ValueError):
    """The dataset could not be read or does not have the expected shape."""


__all__ = ["IntegrityViolation", "MalformedInput"]
