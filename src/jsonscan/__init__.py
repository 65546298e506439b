"""jsonscan - strict JSON validity checking without building values.

Answers one question: is a byte sequence a well-formed JSON document?
The scanner walks the input once with an immutable cursor and never
materializes objects, arrays, strings or numbers.

Public API:
    is_valid - True if the input is a well-formed document
    scan - Classify input as valid, invalid, depth-exceeded or too large
    check - Raise a JsonScanError subclass unless the input is valid
    JsonScanner - Scanner bound to a ScanConfig
    ScanConfig - Depth, size, whitespace and trailing-data settings

Exceptions:
    JsonScanError - Base exception class
    JsonSyntaxError - Malformed document (check() only)
    DepthLimitExceededError - Nesting deeper than max_depth
    SourceTooLargeError - Input larger than max_source_size

Submodules:
    jsonscan.syntax.cursor - Immutable byte cursor
    jsonscan.syntax.scanner - Grammar rules and the scanner class
    jsonscan.diagnostics - Diagnostic codes and error templates
    jsonscan.cli - Command-line wrapper
"""

from .config import ScanConfig
from .core import DepthLimitExceededError
from .diagnostics import JsonScanError, JsonSyntaxError, SourceTooLargeError
from .enums import ScanOutcome, WhitespaceMode
from .syntax import JsonScanner, ScanResult
from .syntax.scanner.core import Source

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonscan")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__rfc__ = "RFC 8259"

_default_scanner = JsonScanner()


def is_valid(source: Source) -> bool:
    """Return True if source is a well-formed document (default ScanConfig).

    Example:
        >>> is_valid(b'{"a": [1, 2.5e3, true, null]}')
        True
        >>> is_valid(b'{"a":1,}')
        False
        >>> is_valid(b"42")  # Top level must be an object or array
        False
    """
    return _default_scanner.is_valid(source)


def scan(source: Source) -> ScanResult:
    """Classify source using the default ScanConfig.

    Example:
        >>> scan(b"[" * 1000).outcome
        <ScanOutcome.DEPTH_EXCEEDED: 'depth_exceeded'>
    """
    return _default_scanner.scan(source)


def check(source: Source) -> None:
    """Raise a JsonScanError subclass unless source is valid (default ScanConfig)."""
    _default_scanner.check(source)


__all__ = [
    "DepthLimitExceededError",
    "JsonScanError",
    "JsonScanner",
    "JsonSyntaxError",
    "ScanConfig",
    "ScanOutcome",
    "ScanResult",
    "Source",
    "SourceTooLargeError",
    "WhitespaceMode",
    "__rfc__",
    "__version__",
    "check",
    "is_valid",
    "scan",
]
