"""JSON syntax package.

Provides the byte cursor and the recursive-descent scanner built on it.

Python 3.13+.
"""

from .cursor import Cursor
from .scanner import JsonScanner, ScanContext, ScanResult

__all__ = [
    "Cursor",
    "JsonScanner",
    "ScanContext",
    "ScanResult",
]
