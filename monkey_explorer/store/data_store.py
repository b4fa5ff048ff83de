"""
In-memory data store for the Monkey Explorer.

`DataStore.load` is the only way to build a store from a dataset source:

1. the raw bytes are hashed and compared to the expected digest; a mismatch
   raises `IntegrityViolation` and no store is produced;
2. the bytes are parsed as a JSON array of `Record` objects; anything that
   cannot be read or parsed is logged and yields an empty store;
3. a pick counter is seeded at 0 for every validly named record.

After load the record tuple never changes. The pick counters are the only
mutable state and are guarded by a single lock, held only around the counter
read or increment itself.

Usage:
    from monkey_explorer.store import DataStore

    store = DataStore.load("monkey_explorer/data/monkeys.json")
    monkey = store.pick_random()
    print(store.access_count(monkey.name))
"""

from __future__ import annotations

import os
import random
import threading
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from monkey_explorer.domain.models import Record
from monkey_explorer.store.errors import IntegrityViolation, MalformedInput
from monkey_explorer.store.integrity import EXPECTED_DIGEST, compute_digest, digest_matches
from monkey_explorer.utils.logging import get_logger

log = get_logger(__name__)

Source = Union[str, os.PathLike, bytes, BinaryIO]

_RECORDS_ADAPTER = TypeAdapter(Tuple[Record, ...])


def _is_blank(name: Optional[str]) -> bool:
    return not name or not name.strip()


def _counter_key(name: str) -> str:
    return name.casefold()


def _describe(source: Source) -> str:
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    return getattr(source, "name", None) or repr(source)


def _read_source(source: Source) -> bytes:
    """Read the raw bytes of `source`, raising MalformedInput if it cannot be read."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            return Path(source).read_bytes()
        data = source.read()
    except (OSError, ValueError) as exc:
        raise MalformedInput(f"cannot read dataset: {exc}") from exc
    if not isinstance(data, bytes):
        raise MalformedInput("dataset stream must be opened in binary mode")
    return data


def _parse_records(data: bytes) -> Tuple[Record, ...]:
    """Decode a UTF-8 JSON array of records, raising MalformedInput on any failure."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedInput(f"dataset is not valid UTF-8: {exc}") from exc
    try:
        return _RECORDS_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise MalformedInput(
            f"dataset is not a JSON array of records ({exc.error_count()} error(s)): "
            f"{exc.errors(include_url=False)[0]['msg']}"
        ) from exc


class DataStore:
    """
    Owner of the loaded records and their random-pick counters.

    Parameters
    ----------
    records : iterable of Record
        Records in display order. Normally produced by `DataStore.load`.
    rng : random.Random, optional
        Random source for `pick_random`. Defaults to the process-wide
        generator of the `random` module; inject a seeded instance for
        deterministic tests.
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._records: Tuple[Record, ...] = tuple(records)
        self._rng = rng
        self._lock = threading.Lock()
        self._access_counts: Dict[str, int] = {}
        for record in self._records:
            if not _is_blank(record.name):
                self._access_counts.setdefault(_counter_key(record.name), 0)

    @classmethod
    def load(
        cls,
        source: Source,
        expected_digest: str = EXPECTED_DIGEST,
        rng: Optional[random.Random] = None,
    ) -> "DataStore":
        """
        Build a store from a dataset source after verifying its integrity.

        Parameters
        ----------
        source : path, bytes or binary stream
            Where the dataset JSON comes from.
        expected_digest : str
            Base64 (or hex) SHA-512 digest the raw bytes must hash to.
        rng : random.Random, optional
            Random source passed on to the store.

        Returns
        -------
        DataStore
            A ready store; empty if the source was unreadable or malformed.

        Raises
        ------
        IntegrityViolation
            If the source bytes do not match `expected_digest`.
        """
        description = _describe(source)
        log.debug("Loading dataset", extra={"source": description})
        try:
            data = _read_source(source)
        except MalformedInput as exc:
            log.error("Dataset unavailable, starting empty: %s", exc, extra={"source": description})
            return cls((), rng=rng)

        if not digest_matches(data, expected_digest):
            actual = compute_digest(data)
            log.error(
                "Integrity check failed: dataset was modified",
                extra={"source": description, "expected": expected_digest, "actual": actual},
            )
            raise IntegrityViolation(description, expected_digest, actual)

        try:
            records = _parse_records(data)
        except MalformedInput as exc:
            log.error("Malformed dataset, starting empty: %s", exc, extra={"source": description})
            return cls((), rng=rng)

        store = cls(records, rng=rng)
        log.info("Loaded %d records", len(records), extra={"source": description})
        return store

    def get_all(self) -> Tuple[Record, ...]:
        """Return every record in load order."""
        return self._records

    def get_by_name(self, name: Optional[str]) -> Optional[Record]:
        """Return the first record whose name matches `name` case-insensitively."""
        if _is_blank(name):
            return None
        key = _counter_key(name)
        return next((r for r in self._records if _counter_key(r.name) == key), None)

    def pick_random(self) -> Optional[Record]:
        """
        Return a uniformly chosen record and bump its pick counter.

        Records with a blank name are returned but never counted. An empty
        store returns None and changes nothing.
        """
        if not self._records:
            return None

        index = (self._rng or random).randrange(len(self._records))
        selected = self._records[index]
        if _is_blank(selected.name):
            return selected

        key = _counter_key(selected.name)
        with self._lock:
            self._access_counts[key] = self._access_counts.get(key, 0) + 1
        return selected

    def access_count(self, name: Optional[str]) -> int:
        """Return how many times `pick_random` returned the named record."""
        if _is_blank(name):
            return 0
        key = _counter_key(name)
        with self._lock:
            return self._access_counts.get(key, 0)


__all__ = ["DataStore", "Source"]
