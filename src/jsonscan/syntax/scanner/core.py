"""JSON scanner entry point.

This module provides the JsonScanner class that drives the grammar rules
in :mod:`jsonscan.syntax.scanner.rules` over one input buffer and reduces
the outcome to a :class:`ScanResult`.

Architecture:
    The scanner uses an immutable cursor pattern
    (:class:`~jsonscan.syntax.cursor.Cursor`) to traverse the buffer. Each
    rule returns the advanced cursor on success or None on failure. The only
    exception the rules raise is DepthLimitExceededError, which the scanner
    converts into ScanOutcome.DEPTH_EXCEEDED.

Top level:
    Only an object or an array is accepted as the top-level value. This is
    stricter than RFC 8259, which permits any value.

Security:
    Includes a configurable input size limit and a configurable nesting
    depth limit (see :class:`~jsonscan.config.ScanConfig`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jsonscan.config import ScanConfig
from jsonscan.core.depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp
from jsonscan.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    JsonSyntaxError,
    SourceTooLargeError,
)
from jsonscan.enums import ScanOutcome
from jsonscan.syntax.cursor import Cursor
from jsonscan.syntax.scanner.rules import ScanContext, scan_array, scan_object
from jsonscan.syntax.scanner.whitespace import skip_whitespace

__all__ = ["JsonScanner", "ScanResult", "Source"]

logger = logging.getLogger(__name__)

type Source = bytes | bytearray | memoryview | str

_OBJECT_OPEN: int = ord("{")
_ARRAY_OPEN: int = ord("[")


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning one buffer.

    Attributes:
        outcome: Classification of the buffer
        end: Position after the top-level value and its trailing whitespace
            when outcome is VALID, otherwise None. Equals the buffer length
            unless allow_trailing_data accepted extra bytes.

    Example:
        >>> result = JsonScanner().scan(b"[1, 2] ")
        >>> result.outcome
        <ScanOutcome.VALID: 'valid'>
        >>> result.end
        7
        >>> bool(JsonScanner().scan(b"[1, 2"))
        False
    """

    outcome: ScanOutcome
    end: int | None = None

    def __bool__(self) -> bool:
        """True only for a valid document."""
        return self.outcome is ScanOutcome.VALID

    @property
    def is_valid(self) -> bool:
        """True only for a valid document."""
        return self.outcome is ScanOutcome.VALID


def _as_bytes(source: Source) -> bytes:
    """Normalize accepted input types to an immutable bytes object."""
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str):
        return source.encode("utf-8", errors="surrogatepass")
    msg = f"Expected bytes-like object or str, got {type(source).__name__}"
    raise TypeError(msg)


class JsonScanner:
    """Strict JSON validity checker using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Rules are plain functions; a failed rule returns None
    - Per-call ScanContext makes one scanner safe to share across threads

    Attributes:
        config: Immutable scanner configuration
    """

    __slots__ = ("_config", "_max_depth")

    def __init__(self, config: ScanConfig | None = None) -> None:
        """Initialize scanner.

        Args:
            config: Scanner configuration (default: ScanConfig())
        """
        self._config = config if config is not None else ScanConfig()
        # Clamped once per scanner; every scan enforces this value
        self._max_depth = depth_clamp(self._config.max_depth)

    @property
    def config(self) -> ScanConfig:
        """Scanner configuration."""
        return self._config

    @property
    def max_depth(self) -> int:
        """Nesting limit actually enforced (config.max_depth after clamping)."""
        return self._max_depth

    def __repr__(self) -> str:
        return f"JsonScanner({self._config!r})"

    def scan(self, source: Source) -> ScanResult:
        """Classify source as valid, invalid, too large, or too deep.

        Never raises for any byte content. Grammar failures and depth
        overruns are reported through the returned ScanResult. Reaching the
        interpreter recursion limit (when called from an already deep stack)
        also counts as DEPTH_EXCEEDED.

        Args:
            source: Candidate document. bytes are used as-is; bytearray and
                memoryview are copied; str is encoded as UTF-8.

        Returns:
            ScanResult with the outcome and, when valid, the end position

        Raises:
            TypeError: If source is not bytes-like or str

        Example:
            >>> scanner = JsonScanner()
            >>> scanner.scan(b'{"a": 1}').outcome
            <ScanOutcome.VALID: 'valid'>
            >>> scanner.scan(b'{"a": 01}').outcome
            <ScanOutcome.INVALID: 'invalid'>
        """
        data = _as_bytes(source)
        config = self._config

        if config.max_source_size > 0 and len(data) > config.max_source_size:
            logger.debug(
                "Rejected %d-byte source (max_source_size=%d)",
                len(data),
                config.max_source_size,
            )
            return ScanResult(ScanOutcome.TOO_LARGE)

        context = ScanContext(
            guard=DepthGuard(self._max_depth),
            whitespace=config.whitespace.byte_set,
        )

        try:
            end = self._scan_document(Cursor(data, 0), context)
        except DepthLimitExceededError as e:
            logger.debug("Scan aborted: %s", e)
            return ScanResult(ScanOutcome.DEPTH_EXCEEDED)
        except RecursionError:
            # Caller's own stack left less room than the clamp assumed
            logger.debug("Scan aborted: interpreter recursion limit reached")
            return ScanResult(ScanOutcome.DEPTH_EXCEEDED)

        if end is None:
            return ScanResult(ScanOutcome.INVALID)
        return ScanResult(ScanOutcome.VALID, end.pos)

    def is_valid(self, source: Source) -> bool:
        """Return True if source is a well-formed document.

        Depth overruns and oversized input count as not valid. Use scan()
        to tell them apart from grammar errors.
        """
        return self.scan(source).outcome is ScanOutcome.VALID

    def check(self, source: Source) -> None:
        """Validate source, raising on anything but a valid document.

        Args:
            source: Candidate document

        Raises:
            JsonSyntaxError: If the document is malformed
            DepthLimitExceededError: If nesting exceeds max_depth
            SourceTooLargeError: If source exceeds max_source_size
            TypeError: If source is not bytes-like or str
        """
        data = _as_bytes(source)
        result = self.scan(data)
        match result.outcome:
            case ScanOutcome.VALID:
                return
            case ScanOutcome.DEPTH_EXCEEDED:
                raise DepthLimitExceededError(
                    ErrorTemplate.depth_exceeded(self._max_depth)
                )
            case ScanOutcome.TOO_LARGE:
                raise SourceTooLargeError(
                    ErrorTemplate.source_too_large(len(data), self._config.max_source_size)
                )
            case _:
                raise JsonSyntaxError(self._describe_invalid(data))

    def _scan_document(self, cursor: Cursor, context: ScanContext) -> Cursor | None:
        """Scan leading whitespace, the top-level object or array, and the tail.

        Returns:
            Cursor after the document, or None if the document is invalid
        """
        cursor = skip_whitespace(cursor, context.whitespace)
        if cursor.is_eof:
            return None

        lead = cursor.current
        if lead == _OBJECT_OPEN:
            end = scan_object(cursor, context)
        elif lead == _ARRAY_OPEN:
            end = scan_array(cursor, context)
        else:
            return None

        if end is None:
            return None

        end = skip_whitespace(end, context.whitespace)
        if not end.is_eof and not self._config.allow_trailing_data:
            return None
        return end

    def _describe_invalid(self, data: bytes) -> Diagnostic:
        """Pick the most specific diagnostic for an invalid document.

        Only called on the check() failure path, so the extra scan of the
        leading whitespace and of the top-level value costs nothing on the
        hot path.
        """
        whitespace = self._config.whitespace.byte_set
        cursor = skip_whitespace(Cursor(data, 0), whitespace)
        if cursor.is_eof or cursor.current not in (_OBJECT_OPEN, _ARRAY_OPEN):
            return ErrorTemplate.invalid_root()

        # Rescan without the trailing-data check to see whether the value itself was complete
        context = ScanContext(guard=DepthGuard(self._max_depth), whitespace=whitespace)
        rule = scan_object if cursor.current == _OBJECT_OPEN else scan_array
        end = rule(cursor, context)
        if end is not None:
            end = skip_whitespace(end, whitespace)
            if not end.is_eof:
                return ErrorTemplate.trailing_data()
        return ErrorTemplate.invalid_document()
