"""
Domain package for the Monkey Explorer.

Exports the record model shared by the data store and the CLI.
Keep this package focused on data definitions and validation concerns.
"""

from monkey_explorer.domain.models import Record

__all__ = [
    "Record",
]
