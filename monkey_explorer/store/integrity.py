"""
Integrity verification for the shipped dataset.

The dataset is trusted only if its exact bytes hash to `EXPECTED_DIGEST`, the
base64-encoded SHA-512 digest of `monkey_explorer/data/monkeys.json`. Whenever
the dataset legitimately changes, regenerate the constant with:

    python scripts/compute_digest.py monkey_explorer/data/monkeys.json
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import string

EXPECTED_DIGEST = (
    "cxdgXrJ5uOpGYxXVtkinJ9AqexO2Q03FKjdd6TDjHc2fqf8azWMHzzEmFt1XixjkHQUeVvjUmrqaSAESXW590w=="
)

_HEX_DIGEST_LENGTH = hashlib.sha512().digest_size * 2


def compute_digest(data: bytes) -> str:
    """Return the base64-encoded SHA-512 digest of `data`."""
    return base64.b64encode(hashlib.sha512(data).digest()).decode("ascii")


def _is_hex_digest(value: str) -> bool:
    return len(value) == _HEX_DIGEST_LENGTH and all(c in string.hexdigits for c in value)


def digest_matches(data: bytes, expected: str) -> bool:
    """
    Check `data` against an expected SHA-512 digest.

    `expected` may be base64 (the embedded form) or hex encoded. Comparison is
    exact: no whitespace trimming and no case folding, so hex digests must be
    lowercase as `hashlib` emits them.
    """
    if _is_hex_digest(expected):
        actual = hashlib.sha512(data).hexdigest()
        return hmac.compare_digest(actual, expected)
    return hmac.compare_digest(compute_digest(data).encode("ascii"), expected.encode("utf-8"))


__all__ = ["EXPECTED_DIGEST", "compute_digest", "digest_matches"]
