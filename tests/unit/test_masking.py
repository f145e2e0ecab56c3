"""Unit tests for functions defined in confprint/masking.py."""

from enum import Enum
from pathlib import PurePosixPath

import pytest
from pydantic import SecretBytes, SecretStr

from confprint.masking import mask_value, render_value
from confprint.models import PrinterConfig


class TestMaskValue:
    """Tests for mask_value function."""

    @pytest.mark.parametrize(
        "value",
        ["", "a", "short-secret", "x" * 19],
    )
    def test_short_values_are_fully_masked(self, value: str) -> None:
        """Test values below the threshold become the bare mask."""
        assert mask_value(value) == "********"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("x" * 17 + "abc", "********abc"),
            ("very-long-secret-key-123", "********123"),
        ],
    )
    def test_long_values_reveal_suffix(self, value: str, expected: str) -> None:
        """Test values at or above the threshold keep their suffix."""
        result = mask_value(value)
        assert result == expected
        assert len(result) == 8 + 3

    def test_custom_mask_length(self) -> None:
        """Test mask length changes the number of asterisks."""
        config = PrinterConfig(mask_length=4)
        assert mask_value("very-long-secret-key-123", config) == "****123"
        assert mask_value("short-secret", config) == "****"

    def test_custom_visible_suffix(self) -> None:
        """Test visible suffix length changes the revealed tail."""
        config = PrinterConfig(visible_suffix_length=5)
        assert mask_value("very-long-secret-key-12345", config) == "********12345"

    def test_custom_min_secret_length(self) -> None:
        """Test a lower threshold reveals the suffix of short values."""
        config = PrinterConfig(min_secret_length_for_suffix=5)
        assert mask_value("short-key", config) == "********key"
        assert mask_value("abcd", config) == "********"

    def test_suffix_longer_than_value_is_clamped(self) -> None:
        """Test an oversized suffix reveals the whole value without failing."""
        config = PrinterConfig(visible_suffix_length=10, min_secret_length_for_suffix=2)
        assert mask_value("abc", config) == "********abc"

    def test_zero_mask_length(self) -> None:
        """Test a zero mask length leaves only the suffix."""
        config = PrinterConfig(mask_length=0)
        assert mask_value("very-long-secret-key-123", config) == "123"
        assert mask_value("short", config) == ""

    def test_zero_suffix_length(self) -> None:
        """Test a zero suffix length reveals nothing even for long values."""
        config = PrinterConfig(visible_suffix_length=0)
        assert mask_value("very-long-secret-key-123", config) == "********"

    def test_zero_threshold_masks_empty_value(self) -> None:
        """Test an empty value meets a zero threshold and reveals nothing."""
        config = PrinterConfig(min_secret_length_for_suffix=0)
        assert mask_value("", config) == "********"


class TestRenderValue:
    """Tests for render_value function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("as-is", "as-is"),
            ("", ""),
            (8080, "8080"),
            (0, "0"),
            (-3, "-3"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (None, ""),
            (PurePosixPath("/etc/app.yaml"), "/etc/app.yaml"),
        ],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        """Test scalar values use their natural text."""
        assert render_value(value) == expected

    def test_enum(self) -> None:
        """Test enum renders through its value."""

        class Mode(Enum):
            """Test enum for rendering."""

            FAST = "fast"
            DEBUG = True

        assert render_value(Mode.FAST) == "fast"
        assert render_value(Mode.DEBUG) == "true"

    def test_secret_str_is_unwrapped(self) -> None:
        """Test SecretStr renders the secret so masking sees its length."""
        assert render_value(SecretStr("sk-123")) == "sk-123"

    def test_secret_bytes_is_unwrapped(self) -> None:
        """Test SecretBytes renders the decoded secret."""
        assert render_value(SecretBytes(b"token")) == "token"
