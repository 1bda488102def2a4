"""
Tests for branch code normalization.
"""

from __future__ import annotations

import pytest

from ifsc.normalizer import normalize_code


class TestNormalizeCode:
    """Numeric fragments collapse to decimal form, everything else passes through."""

    @pytest.mark.parametrize(
        "fragment, expected",
        [
            ("007", "7"),
            ("7", "7"),
            ("000000", "0"),
            ("065001", "65001"),
            ("+12", "12"),
            ("-05", "-5"),
        ],
    )
    def test_numeric_fragments(self, fragment: str, expected: str) -> None:
        assert normalize_code(fragment) == expected

    @pytest.mark.parametrize("fragment", ["ABCDEF", "0CMSNO", "12A456", "", " 12", "12\n", "1_000", "+", "１２"])
    def test_non_numeric_fragments_pass_through(self, fragment: str) -> None:
        assert normalize_code(fragment) == fragment

    def test_idempotent(self) -> None:
        """Normalizing twice gives the same result."""
        for fragment in ("007", "7", "ABCDEF", "000240"):
            once = normalize_code(fragment)
            assert normalize_code(once) == once

    def test_leading_zero_variants_agree(self) -> None:
        assert normalize_code("007") == normalize_code("7") == "7"

    def test_out_of_int32_range_kept_verbatim(self) -> None:
        assert normalize_code("02147483648") == "02147483648"
        assert normalize_code("02147483647") == "2147483647"

    def test_very_long_numeric_fragment_kept_verbatim(self) -> None:
        """Digit strings far wider than int32 are returned unchanged, not parsed."""
        fragment = "1" * 5000
        assert normalize_code(fragment) == fragment
        assert normalize_code("-" + fragment) == "-" + fragment
        assert normalize_code("12345678901") == "12345678901"
