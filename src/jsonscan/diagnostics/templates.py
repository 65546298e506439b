"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_document() -> Diagnostic:
        """Buffer is not a well-formed document.

        Returns:
            Diagnostic for INVALID_DOCUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_DOCUMENT,
            message="Input is not a well-formed JSON document",
            hint="Check delimiters, literals, numbers and string escapes",
        )

    @staticmethod
    def invalid_root() -> Diagnostic:
        """Top-level value is missing or is not an object or array.

        Returns:
            Diagnostic for INVALID_ROOT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ROOT,
            message="Document must start with '{' or '['",
            hint="Wrap scalar values in an array or object",
        )

    @staticmethod
    def trailing_data() -> Diagnostic:
        """Bytes remain after a complete top-level value.

        Returns:
            Diagnostic for TRAILING_DATA
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_DATA,
            message="Unexpected data after top-level value",
            hint="Remove trailing content or enable allow_trailing_data",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for unclosed braces, brackets or strings",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Nesting depth limit exceeded.

        Args:
            max_depth: The configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the document or raise max_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Actual input size in bytes
            max_size: Configured maximum in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} bytes) exceeds maximum ({max_size:,} bytes)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in ScanConfig to increase the limit",
        )
