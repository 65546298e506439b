"""Tests for ScanConfig validation and defaults."""

from __future__ import annotations

import dataclasses

import pytest

from jsonscan import ScanConfig, WhitespaceMode
from jsonscan.constants import (
    MAX_DEPTH,
    MAX_SOURCE_SIZE,
    SPACE_ONLY_WHITESPACE,
    STANDARD_WHITESPACE,
)


class TestScanConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self) -> None:
        config = ScanConfig()

        assert config.max_depth == MAX_DEPTH
        assert config.max_source_size == MAX_SOURCE_SIZE
        assert config.whitespace is WhitespaceMode.STANDARD
        assert config.allow_trailing_data is False

    def test_frozen(self) -> None:
        """ScanConfig is immutable."""
        config = ScanConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_depth = 5  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ScanConfig(max_depth=5) == ScanConfig(max_depth=5)
        assert ScanConfig(max_depth=5) != ScanConfig(max_depth=6)


class TestScanConfigValidation:
    """Test __post_init__ validation."""

    @pytest.mark.parametrize("max_depth", [0, -1, -100])
    def test_non_positive_max_depth(self, max_depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth must be positive"):
            ScanConfig(max_depth=max_depth)

    def test_negative_max_source_size(self) -> None:
        with pytest.raises(ValueError, match="max_source_size must be >= 0"):
            ScanConfig(max_source_size=-1)

    def test_zero_max_source_size_allowed(self) -> None:
        assert ScanConfig(max_source_size=0).max_source_size == 0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("standard", WhitespaceMode.STANDARD), ("space-only", WhitespaceMode.SPACE_ONLY)],
    )
    def test_whitespace_string_coerced(self, value: str, expected: WhitespaceMode) -> None:
        config = ScanConfig(whitespace=value)  # type: ignore[arg-type]

        assert config.whitespace is expected

    def test_unknown_whitespace_mode(self) -> None:
        with pytest.raises(ValueError, match="tabs"):
            ScanConfig(whitespace="tabs")  # type: ignore[arg-type]


class TestWhitespaceMode:
    """Test the byte sets behind each whitespace mode."""

    def test_standard_bytes(self) -> None:
        assert WhitespaceMode.STANDARD.byte_set == STANDARD_WHITESPACE
        assert WhitespaceMode.STANDARD.byte_set == frozenset(b" \t\n\r")

    def test_space_only_bytes(self) -> None:
        assert WhitespaceMode.SPACE_ONLY.byte_set == SPACE_ONLY_WHITESPACE
        assert WhitespaceMode.SPACE_ONLY.byte_set == frozenset(b" ")

    def test_str_conversion(self) -> None:
        assert str(WhitespaceMode.SPACE_ONLY) == "space-only"
