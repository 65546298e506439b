"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (grammar violations)
        2000-2999: Resource errors (limits enforced before or during scanning)
    """

    # Syntax errors (1000-1999)
    INVALID_DOCUMENT = 1001
    INVALID_ROOT = 1002
    TRAILING_DATA = 1003
    UNEXPECTED_EOF = 1004

    # Resource errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    SOURCE_TOO_LARGE = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Scanning reports no source positions, so a diagnostic is a code,
    a message and an optional hint.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MAX_DEPTH_EXCEEDED]: Maximum nesting depth (100) exceeded
              = help: Flatten the document or raise max_depth

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
