#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: scanner - JSON Validity Scanner
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""JSON Validity Scanner Fuzzer (Atheris).

Targets: jsonscan.JsonScanner (scan, is_valid)

Invariants checked on every input:
- scan() never raises for any byte sequence
- The same input always yields the same outcome
- A VALID result has 0 < end <= len(input)
- On ASCII input without NaN/Infinity spellings, is_valid() agrees with
  json.loads (object or array at the top level)
- Deep nesting yields DEPTH_EXCEEDED, never RecursionError

Patterns are selected round-robin from a weighted schedule so that
coverage feedback cannot starve the structured patterns.

Usage:
    python fuzz_atheris/fuzz_scanner.py -max_total_time=60
    python fuzz_atheris/fuzz_scanner.py --checkpoint-interval 1000 corpus/

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import atexit
import gc
import json
import logging
import os
import pathlib
import sys
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass


def _check_dependencies(dep_names: Sequence[str], dep_modules: Sequence[Any]) -> None:
    """Exit with install instructions if a fuzzing dependency is missing."""
    missing = [name for name, mod in zip(dep_names, dep_modules, strict=True) if mod is None]
    if missing:
        print("-" * 80, file=sys.stderr)
        print("ERROR: Missing required dependencies for fuzzing:", file=sys.stderr)
        for dep in missing:
            print(f"  - {dep}", file=sys.stderr)
        print("", file=sys.stderr)
        print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
        print("-" * 80, file=sys.stderr)
        sys.exit(1)


_check_dependencies(["psutil", "atheris"], [_psutil_mod, _atheris_mod])

import atheris  # noqa: E402  # pylint: disable=C0412,C0413
import psutil  # noqa: E402  # pylint: disable=C0412,C0413

GC_INTERVAL = 256
"""Periodic gc.collect() interval to reclaim Atheris instrumentation cycles."""

# --- State ---


@dataclass
class ScannerFuzzState:
    """Observability state for the scanner fuzzer."""

    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"
    checkpoint_interval: int = 500
    initial_memory_mb: float = 0.0
    peak_memory_mb: float = 0.0
    slowest_ms: float = 0.0
    pattern_coverage: dict[str, int] = field(default_factory=dict)
    outcome_counts: dict[str, int] = field(default_factory=dict)
    differential_checks: int = 0


class ScannerFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# Pattern definitions with weights (name, weight)
_PATTERN_WEIGHTS: Sequence[tuple[str, int]] = (
    ("raw_bytes", 10),
    ("grammar_noise", 10),
    ("mutated_document", 10),
    ("deep_nesting", 5),
    ("long_string", 4),
    ("number_soup", 6),
    ("escape_soup", 6),
    ("whitespace_soup", 4),
)


def _build_weighted_schedule(items: Sequence[str], weights: Sequence[int]) -> tuple[str, ...]:
    schedule: list[str] = []
    for item, weight in zip(items, weights, strict=True):
        schedule.extend([item] * weight)
    return tuple(schedule)


_PATTERN_SCHEDULE: tuple[str, ...] = _build_weighted_schedule(
    [name for name, _ in _PATTERN_WEIGHTS],
    [weight for _, weight in _PATTERN_WEIGHTS],
)

# Restricted to lowercase letters plus "E" so json.loads cannot see NaN/Infinity
_GRAMMAR_ALPHABET = b'{}[]:,"\\/ \t\n\r-+.0123456789eEtrufalsnbu'

_SEED_DOCUMENTS: Sequence[bytes] = (
    b"{}",
    b"[]",
    b'{"a": [1, 2.5, -3e10, true, false, null]}',
    b'[{"k": "v\\n\\u0041"}, [[]], ""]',
    b'{"nested": {"deeper": {"deepest": [0, -0, 0.0]}}}',
)

_state = ScannerFuzzState()
_process = psutil.Process(os.getpid())

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "scanner"
_REPORT_FILENAME = "fuzz_scanner_report.json"


def _build_stats_dict() -> dict[str, Any]:
    return {
        "fuzzer": "scanner",
        "status": _state.status,
        "iterations": _state.iterations,
        "findings": _state.findings,
        "differential_checks": _state.differential_checks,
        "initial_memory_mb": round(_state.initial_memory_mb, 2),
        "peak_memory_mb": round(_state.peak_memory_mb, 2),
        "slowest_ms": round(_state.slowest_ms, 3),
        "pattern_coverage": dict(sorted(_state.pattern_coverage.items())),
        "outcome_counts": dict(sorted(_state.outcome_counts.items())),
    }


def _emit_checkpoint() -> None:
    report = json.dumps(_build_stats_dict(), sort_keys=True)
    print(f"\n[CHECKPOINT-JSON-BEGIN]{report}[CHECKPOINT-JSON-END]", file=sys.stderr, flush=True)


def _emit_report() -> None:
    """Emit crash-proof final report to stderr and file."""
    _state.status = "complete"
    report = json.dumps(_build_stats_dict(), sort_keys=True)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr, flush=True)

    try:
        _REPORT_DIR.mkdir(parents=True, exist_ok=True)
        (_REPORT_DIR / _REPORT_FILENAME).write_text(report, encoding="utf-8")
    except OSError:
        pass


atexit.register(_emit_report)

# --- Suppress logging and instrument imports ---
logging.getLogger("jsonscan").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["jsonscan"]):
    from jsonscan import JsonScanner, ScanConfig, ScanOutcome

_SCANNER = JsonScanner()
_LENIENT = JsonScanner(ScanConfig(allow_trailing_data=True))


# --- Input Generation ---


def _grammar_bytes(fdp: atheris.FuzzedDataProvider, length: int) -> bytes:
    return bytes(
        _GRAMMAR_ALPHABET[fdp.ConsumeIntInRange(0, len(_GRAMMAR_ALPHABET) - 1)]
        for _ in range(length)
    )


def _generate_input(fdp: atheris.FuzzedDataProvider, pattern_name: str) -> bytes:  # noqa: PLR0911
    """Generate scanner input for a given pattern."""
    match pattern_name:
        case "raw_bytes":
            return fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 512))

        case "grammar_noise":
            return _grammar_bytes(fdp, fdp.ConsumeIntInRange(0, 128))

        case "mutated_document":
            doc = bytearray(fdp.PickValueInList(list(_SEED_DOCUMENTS)))
            for _ in range(fdp.ConsumeIntInRange(1, 4)):
                index = fdp.ConsumeIntInRange(0, len(doc) - 1)
                action = fdp.ConsumeIntInRange(0, 2)
                if action == 0 and len(doc) > 1:
                    del doc[index]
                elif action == 1:
                    doc.insert(index, doc[index])
                else:
                    doc[index] = _grammar_bytes(fdp, 1)[0]
            return bytes(doc)

        case "deep_nesting":
            opener = fdp.PickValueInList([b"[", b'{"k":', b'[{"a":'])
            depth = fdp.ConsumeIntInRange(1, 50_000)
            closer = b"" if fdp.ConsumeBool() else b"]" * depth
            return opener * depth + closer

        case "long_string":
            body = fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 4096))
            return b'["' + body + b'"]'

        case "number_soup":
            numbers = [
                _grammar_bytes(fdp, fdp.ConsumeIntInRange(1, 12))
                for _ in range(fdp.ConsumeIntInRange(1, 8))
            ]
            return b"[" + b",".join(numbers) + b"]"

        case "escape_soup":
            escapes = [
                b"\\" + _grammar_bytes(fdp, fdp.ConsumeIntInRange(1, 5))
                for _ in range(fdp.ConsumeIntInRange(1, 8))
            ]
            return b'{"k":"' + b"".join(escapes) + b'"}'

        case "whitespace_soup":
            ws = bytes(
                fdp.PickValueInList([0x20, 0x09, 0x0A, 0x0D, 0x0B, 0x0C])
                for _ in range(fdp.ConsumeIntInRange(0, 16))
            )
            return ws + b"[" + ws + b"1" + ws + b"," + ws + b"2" + ws + b"]" + ws

        case _:
            return b"[]"


# --- Oracles ---


def _reference_accepts(data: bytes) -> bool | None:
    """Stdlib verdict on ASCII grammar input, or None when not comparable."""
    if any(byte not in _GRAMMAR_ALPHABET for byte in data):
        return None
    try:
        value = json.loads(data.decode("ascii"))
    except (ValueError, RecursionError):
        return False
    return isinstance(value, (dict, list))


def _check_invariants(data: bytes) -> None:
    result = _SCANNER.scan(data)
    outcome = result.outcome
    _state.outcome_counts[outcome] = _state.outcome_counts.get(outcome, 0) + 1

    if _SCANNER.scan(data) != result:
        msg = f"Non-deterministic result for {data[:80]!r}"
        raise ScannerFuzzError(msg)

    if outcome is ScanOutcome.VALID and (result.end is None or not 0 < result.end <= len(data)):
        msg = f"VALID result with end={result.end} for {len(data)}-byte input"
        raise ScannerFuzzError(msg)

    if outcome is ScanOutcome.VALID and not _LENIENT.is_valid(data):
        msg = f"Lenient scanner rejected strictly valid input {data[:80]!r}"
        raise ScannerFuzzError(msg)

    # Depth outcomes are not comparable with the stdlib recursion limit
    if outcome is ScanOutcome.DEPTH_EXCEEDED:
        return

    expected = _reference_accepts(data)
    if expected is not None:
        _state.differential_checks += 1
        if result.is_valid is not expected:
            msg = f"Scanner said {outcome}, json.loads said {expected} for {data[:80]!r}"
            raise ScannerFuzzError(msg)


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: check scanner invariants on one generated input."""
    if _state.iterations == 0:
        _state.initial_memory_mb = _process.memory_info().rss / (1024 * 1024)

    _state.iterations += 1
    _state.status = "running"

    if _state.iterations % _state.checkpoint_interval == 0:
        _emit_checkpoint()

    start_time = time.perf_counter()
    fdp = atheris.FuzzedDataProvider(data)

    # Round-robin pattern selection (immune to coverage-guided bias)
    pattern_name = _PATTERN_SCHEDULE[(_state.iterations - 1) % len(_PATTERN_SCHEDULE)]
    _state.pattern_coverage[pattern_name] = _state.pattern_coverage.get(pattern_name, 0) + 1

    source = _generate_input(fdp, pattern_name)

    try:
        _check_invariants(source)
    except Exception:
        # Any exception escaping the scanner or an oracle is a finding
        _state.findings += 1
        raise
    finally:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        _state.slowest_ms = max(_state.slowest_ms, elapsed_ms)

        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()

        if _state.iterations % 100 == 0:
            rss_mb = _process.memory_info().rss / (1024 * 1024)
            _state.peak_memory_mb = max(_state.peak_memory_mb, rss_mb)


def main() -> None:
    """Run the scanner fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="JSON validity scanner fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval",
        type=int,
        default=500,
        help="Emit report every N iterations (default: 500)",
    )

    # Parse known args, pass rest to Atheris/libFuzzer
    args, remaining = parser.parse_known_args()
    _state.checkpoint_interval = args.checkpoint_interval

    # Inject -rss_limit_mb default if not already specified
    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=4096")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80, file=sys.stderr)
    print("JSON Validity Scanner Fuzzer (Atheris)", file=sys.stderr)
    print("Target:     jsonscan.JsonScanner (scan, is_valid)", file=sys.stderr)
    print(f"Patterns:   {len(_PATTERN_WEIGHTS)} ({len(_PATTERN_SCHEDULE)} weighted slots)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
