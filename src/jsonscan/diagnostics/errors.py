"""jsonscan exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JsonScanError(Exception):
    """Base exception for all jsonscan errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonScanError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonSyntaxError(JsonScanError):
    """Input is not a well-formed document.

    Raised only by check(); is_valid() and scan() report this as
    ScanOutcome.INVALID instead.
    """


class SourceTooLargeError(JsonScanError):
    """Input exceeds the configured maximum source size."""
