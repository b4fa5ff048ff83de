"""
Utilities package for the Monkey Explorer.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from monkey_explorer.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
