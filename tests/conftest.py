"""
Pytest configuration for the Monkey Explorer.

Provides fixtures for:
- Dataset sources written to a temporary directory, with their digests
- Settings cache reset and environment overrides for CLI tests
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Tuple

import pytest

from monkey_explorer.config import get_settings
from monkey_explorer.store.integrity import compute_digest

MONA: Dict[str, Any] = {
    "name": "Mona",
    "location": "Peru",
    "population": 1000,
    "latitude": -3.5,
    "longitude": -62.1,
    "image": "",
    "details": "",
}

SAMPLE_RECORDS: List[Dict[str, Any]] = [
    {
        "Name": "Baboon",
        "Location": "Africa & Asia",
        "Population": 10000,
        "Latitude": -8.783195,
        "Longitude": 34.508523,
        "Image": "https://example.org/baboon.jpg",
        "Details": "Old World monkey of the genus Papio.",
    },
    {
        "Name": "Capuchin Monkey",
        "Location": "Central & South America",
        "Population": 23000,
        "Latitude": 12.769013,
        "Longitude": -85.602364,
        "Image": "https://example.org/capuchin.jpg",
        "Details": "New World monkey of the subfamily Cebinae.",
    },
    {
        "Name": "Mandrill",
        "Location": "Southern Cameroon, Gabon, and Congo",
        "Population": 17000,
        "Latitude": 7.369722,
        "Longitude": 12.354722,
        "Image": "https://example.org/mandrill.jpg",
        "Details": "Closely related to the drill.",
    },
]

SourceFactory = Callable[..., Tuple[Path, str]]


@pytest.fixture
def mona() -> Dict[str, Any]:
    return dict(MONA)


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def make_source(tmp_path: Path) -> SourceFactory:
    """
    Write a dataset file and return `(path, digest)`.

    Accepts raw bytes/str (written verbatim) or any JSON-serializable payload.
    """
    counter = {"n": 0}

    def _make(payload: Any, name: str | None = None) -> Tuple[Path, str]:
        counter["n"] += 1
        path = tmp_path / (name or f"dataset-{counter['n']}.json")
        if isinstance(payload, bytes):
            data = payload
        elif isinstance(payload, str):
            data = payload.encode("utf-8")
        else:
            data = json.dumps(payload, indent=2).encode("utf-8")
        path.write_bytes(data)
        return path, compute_digest(data)

    return _make


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """
    Clear the cached Settings before and after each test so env overrides apply.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """
    Isolate CLI tests from a developer's .env and environment.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("EXPLORER_DATA_FILE", "EXPLORER_LOG_LEVEL", "EXPLORER_JSON_LOGS"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo any `configure_logging` call a CLI test triggers.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
