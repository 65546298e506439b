"""Diagnostic system for jsonscan errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    JsonScanError,
    JsonSyntaxError,
    SourceTooLargeError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "JsonScanError",
    "JsonSyntaxError",
    "SourceTooLargeError",
]
