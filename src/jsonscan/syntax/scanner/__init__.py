"""JSON scanner module.

This module provides the main JsonScanner class and the grammar rules it
drives, organized into focused submodules.

Module Organization:
- core.py: JsonScanner class, ScanResult, scan()/is_valid()/check() entry points
- rules.py: Structural rules (value, object, array) and ScanContext
- primitives.py: Leaf rules (string, escape, number, digits, literals)
- whitespace.py: Whitespace skipping

Public API:
    JsonScanner: Main scanner class
    ScanResult: Outcome of one scan
    ScanContext: Per-scan state for calling rules directly (advanced usage)
"""

from jsonscan.syntax.scanner.core import JsonScanner, ScanResult
from jsonscan.syntax.scanner.rules import ScanContext

__all__ = ["JsonScanner", "ScanContext", "ScanResult"]
