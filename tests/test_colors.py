"""Tests for typedash.ui.colors – palette and color blending."""

from __future__ import annotations

import pytest

from typedash.ui.colors import Palette, blend_hex


class TestPalette:
    @pytest.mark.parametrize("name", ["PENDING", "CORRECT", "INCORRECT", "PRIMARY", "PRIMARY_DARK"])
    def test_is_hex(self, name: str):
        value = getattr(Palette, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_feedback_colors_distinct(self):
        assert len({Palette.PENDING, Palette.CORRECT, Palette.INCORRECT}) == 3


class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        r = int(result[1:3], 16)
        assert 126 <= r <= 128

    def test_same_color(self):
        assert blend_hex("#ABCDEF", "#ABCDEF", 0.5) == "#ABCDEF"

    def test_t_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_whitespace_padding(self):
        assert blend_hex("  #FF0000  ", "  #0000FF  ", 0.0) == "#FF0000"


class TestBlendHexInvalid:
    def test_missing_hash(self):
        assert blend_hex("FF0000", "#0000FF", 0.5) == "FF0000"

    def test_wrong_length(self):
        assert blend_hex("#FF0000", "#FFF", 0.5) == "#FF0000"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_empty_strings(self):
        assert blend_hex("", "", 0.5) == ""
