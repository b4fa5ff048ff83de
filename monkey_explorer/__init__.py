"""
Monkey Explorer - interactive terminal explorer for a small monkey dataset.

The package loads a fixed JSON dataset once, refuses to serve it if its bytes
do not match the embedded SHA-512 digest, and answers three questions about
it: list everything, find one by name, and pick one at random while counting
how often each monkey was picked.

- `monkey_explorer.store`: integrity check, parsing and the thread-safe store
- `monkey_explorer.domain`: the record model
- `monkey_explorer.main`: the typer CLI and interactive menu
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from monkey_explorer.config import Settings, get_settings
from monkey_explorer.domain.models import Record
from monkey_explorer.store import (
    EXPECTED_DIGEST,
    DataStore,
    IntegrityViolation,
    MalformedInput,
    compute_digest,
)
from monkey_explorer.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "Record",
    "DataStore",
    "EXPECTED_DIGEST",
    "compute_digest",
    # Errors
    "IntegrityViolation",
    "MalformedInput",
    # Logging
    "configure_logging",
    "get_logger",
]
