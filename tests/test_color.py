"""Unit tests for the packed RGBA color.

Tests cover:
- Saturating addition and subtraction (color and scalar forms)
- Scalar multiplication, division and modulo, including failure modes
- Invert, grayscale and blend
- Packed byte layouts and ordering
"""

import itertools
import math

import pytest

from phongtrace.core.color import Color
from phongtrace.core.errors import (
    ColorArithmeticError,
    DivideByZeroError,
    NegativeDivisorError,
)

CHANNEL_SAMPLES = [0, 1, 127, 128, 254, 255]


class TestConstruction:
    """Tests for constructors and accessors."""

    def test_channels(self):
        """Channels are stored as given."""
        c = Color(1, 2, 3, 4)
        assert (c.r, c.g, c.b, c.a) == (1, 2, 3, 4)

    def test_default_alpha_is_opaque(self):
        assert Color(10, 20, 30).a == 255

    def test_constructor_clamps(self):
        """Out-of-range channels are clamped, never wrapped."""
        assert Color(300, -1, 256, 1000) == Color(255, 0, 255, 255)

    def test_setters_clamp(self):
        c = Color(0, 0, 0, 0)
        c.r = 300
        c.g = -5
        c.b = 42
        c.a = 256
        assert c.to_tuple() == (255, 0, 42, 255)

    def test_named_colors(self):
        assert Color.white() == Color(255, 255, 255, 255)
        assert Color.cyan() == Color(0, 255, 255, 255)
        assert Color.transparent() == Color(0, 0, 0, 0)

    def test_str_and_repr(self):
        c = Color(1, 2, 3, 4)
        assert str(c) == "(1, 2, 3, 4)"
        assert repr(c) == "Color(1, 2, 3, 4)"


class TestPackedLayout:
    """Tests for the rgba and argb packed values."""

    def test_rgba_byte_order(self):
        """Byte 0 is red and byte 3 is alpha."""
        assert Color(0x11, 0x22, 0x33, 0x44).rgba == 0x44332211

    def test_argb_byte_order(self):
        """Alpha is the most significant byte for pixel buffers."""
        assert Color(0x11, 0x22, 0x33, 0x44).argb == 0x44112233

    def test_from_rgba(self):
        assert Color.from_rgba(0x44332211) == Color(0x11, 0x22, 0x33, 0x44)

    def test_from_argb(self):
        assert Color.from_argb(0x44112233) == Color(0x11, 0x22, 0x33, 0x44)

    def test_rgba_setter_overwrites_all_channels(self):
        c = Color(9, 9, 9, 9)
        c.rgba = 0x000000FF
        assert c.to_tuple() == (255, 0, 0, 0)

    def test_rgba_setter_masks_to_32_bits(self):
        c = Color()
        c.rgba = 0x1_000000FF
        assert c.to_tuple() == (255, 0, 0, 0)

    def test_argb_setter(self):
        c = Color()
        c.argb = 0xFF00FF00
        assert c == Color.green()


class TestAddition:
    """Tests for saturating addition."""

    def test_add_colors_saturates(self):
        result = Color(200, 100, 50, 255) + Color(100, 100, 100, 10)
        assert result == Color(255, 200, 150, 255)

    @pytest.mark.parametrize("a,b", list(itertools.product(CHANNEL_SAMPLES, repeat=2)))
    def test_add_matches_min(self, a, b):
        result = Color(a, a, a, a) + Color(b, b, b, b)
        assert result.r == min(255, a + b)
        assert result.a == min(255, a + b)

    def test_add_scalar(self):
        assert Color(250, 0, 10, 255) + 10 == Color(255, 10, 20, 255)

    def test_scalar_plus_color(self):
        assert 10 + Color(250, 0, 10, 245) == Color(255, 10, 20, 255)

    def test_add_does_not_modify_operands(self):
        a = Color(1, 2, 3, 4)
        b = Color(5, 6, 7, 8)
        a + b
        assert a == Color(1, 2, 3, 4)
        assert b == Color(5, 6, 7, 8)

    def test_iadd_mutates_in_place(self):
        c = Color(1, 2, 3, 4)
        ref = c
        c += Color(1, 1, 1, 1)
        assert c is ref
        assert ref == Color(2, 3, 4, 5)

    def test_add_unsupported_type(self):
        with pytest.raises(TypeError):
            Color() + "red"


class TestSubtraction:
    """Tests for subtraction floored at zero."""

    def test_subtract_colors_floors(self):
        result = Color(10, 20, 30, 40) - Color(20, 10, 30, 50)
        assert result == Color(0, 10, 0, 0)

    @pytest.mark.parametrize("a,b", list(itertools.product(CHANNEL_SAMPLES, repeat=2)))
    def test_subtract_matches_max(self, a, b):
        result = Color(a, a, a, a) - Color(b, b, b, b)
        assert result.g == max(0, a - b)
        assert result.a == max(0, a - b)

    def test_subtract_scalar(self):
        assert Color(5, 50, 255, 0) - 10 == Color(0, 40, 245, 0)

    def test_scalar_minus_color(self):
        """Reflected form: each channel = max(0, scalar - channel)."""
        assert 100 - Color(50, 150, 100, 0) == Color(50, 0, 0, 100)

    def test_isub_mutates_in_place(self):
        c = Color(10, 10, 10, 10)
        ref = c
        c -= 3
        assert ref == Color(7, 7, 7, 7)


class TestMultiplication:
    """Tests for scalar multiplication."""

    def test_multiply_rounds_half_up(self):
        assert Color(100, 200, 51, 255) * 0.5 == Color(50, 100, 26, 128)

    def test_multiply_saturates(self):
        assert Color(100, 200, 10, 255) * 2 == Color(200, 255, 20, 255)

    def test_reflected_multiply(self):
        assert 2.0 * Color(1, 2, 3, 4) == Color(2, 4, 6, 8)

    @pytest.mark.parametrize("scalar", [0, 0.0, -1, -0.5, 1e-12, -1e-12])
    def test_non_positive_scalar_gives_transparent_black(self, scalar):
        assert Color(10, 20, 30, 40) * scalar == Color(0, 0, 0, 0)

    @pytest.mark.parametrize("scalar", [1e307, math.inf])
    def test_huge_scalar_saturates(self, scalar):
        assert Color(255, 0, 0) * scalar == Color(255, 0, 0, 255)
        assert scalar * Color(1, 2, 0, 3) == Color(255, 255, 0, 255)

    def test_nan_scalar_gives_transparent_black(self):
        assert Color(10, 20, 30, 40) * math.nan == Color(0, 0, 0, 0)

    def test_imul_mutates_in_place(self):
        c = Color(10, 20, 30, 40)
        ref = c
        c *= 2
        assert ref == Color(20, 40, 60, 80)


class TestDivision:
    """Tests for scalar division and its failure modes."""

    def test_divide(self):
        assert Color(100, 201, 50, 255) / 2 == Color(50, 100, 25, 127)

    def test_divide_by_fraction_saturates(self):
        assert Color(100, 201, 50, 255) / 0.5 == Color(200, 255, 100, 255)

    @pytest.mark.parametrize("divisor", [0, 0.0, 1e-12])
    def test_divide_by_zero(self, divisor):
        with pytest.raises(DivideByZeroError):
            Color(1, 2, 3, 4) / divisor

    def test_divide_by_zero_is_value_and_zero_division_error(self):
        with pytest.raises(ValueError):
            Color(1, 2, 3, 4) / 0
        with pytest.raises(ZeroDivisionError):
            Color(1, 2, 3, 4) / 0

    def test_divide_by_negative(self):
        with pytest.raises(NegativeDivisorError):
            Color(1, 2, 3, 4) / -2

    def test_failed_division_leaves_color_unchanged(self):
        c = Color(1, 2, 3, 4)
        with pytest.raises(ColorArithmeticError):
            c /= 0
        with pytest.raises(ColorArithmeticError):
            c /= -1
        assert c == Color(1, 2, 3, 4)

    @pytest.mark.parametrize("divisor", [0.1, 0.5, 1, 3, 7.5, 1000])
    def test_positive_division_never_negative(self, divisor):
        result = Color(0, 1, 128, 255) / divisor
        assert all(0 <= channel <= 255 for channel in result)

    def test_scalar_divided_by_color(self):
        assert 255 / Color(1, 2, 5, 255) == Color(255, 127, 51, 1)

    def test_scalar_divided_by_color_with_zero_channel(self):
        """Any zero channel, including alpha, is a division by zero."""
        with pytest.raises(DivideByZeroError):
            255 / Color(1, 1, 1, 0)

    def test_infinity_divided_by_color_saturates(self):
        assert math.inf / Color(1, 1, 1, 1) == Color(255, 255, 255, 255)

    def test_divide_by_infinity(self):
        assert Color(10, 20, 30, 40) / math.inf == Color(0, 0, 0, 0)

    def test_negative_scalar_divided_by_color(self):
        with pytest.raises(NegativeDivisorError):
            -1 / Color(1, 1, 1, 1)


class TestModulo:
    """Tests for modulo."""

    def test_modulo(self):
        assert Color(10, 20, 30, 40) % 7 == Color(3, 6, 2, 5)

    def test_modulo_by_zero(self):
        with pytest.raises(DivideByZeroError):
            Color(10, 20, 30, 40) % 0

    def test_modulo_by_negative(self):
        with pytest.raises(NegativeDivisorError):
            Color(10, 20, 30, 40) % -3

    def test_scalar_modulo_color(self):
        assert 100 % Color(7, 9, 11, 13) == Color(2, 1, 1, 9)

    def test_scalar_modulo_color_with_zero_channel(self):
        with pytest.raises(DivideByZeroError):
            100 % Color(7, 0, 11, 13)

    def test_imod_failure_leaves_color_unchanged(self):
        c = Color(10, 20, 30, 40)
        with pytest.raises(DivideByZeroError):
            c %= 0
        assert c == Color(10, 20, 30, 40)

    def test_modulo_requires_integer(self):
        with pytest.raises(TypeError):
            Color(10, 20, 30, 40) % 2.5


class TestInvert:
    """Tests for inverting red, green and blue."""

    def test_inverted_keeps_alpha(self):
        assert Color(10, 20, 30, 40).inverted() == Color(245, 235, 225, 40)

    def test_tilde_operator(self):
        assert ~Color(0, 0, 0, 7) == Color(255, 255, 255, 7)

    @pytest.mark.parametrize("channels", [(0, 0, 0, 0), (1, 2, 3, 4), (255, 128, 64, 200)])
    def test_invert_twice_restores(self, channels):
        c = Color(*channels)
        assert ~~c == c

    def test_invert_in_place_returns_self(self):
        c = Color(10, 20, 30, 40)
        assert c.invert() is c
        assert c == Color(245, 235, 225, 40)


class TestGrayscale:
    """Tests for luma grayscale."""

    @pytest.mark.parametrize("color,expected", [
        (Color(255, 0, 0, 128), 76),
        (Color(0, 255, 0, 128), 150),
        (Color(0, 0, 255, 128), 29),
    ])
    def test_primary_luma(self, color, expected):
        assert color.grayscaled() == Color(expected, expected, expected, 128)

    @pytest.mark.parametrize("v", CHANNEL_SAMPLES)
    def test_true_grays_unchanged(self, v):
        assert Color(v, v, v, 9).grayscaled() == Color(v, v, v, 9)

    def test_uses_original_channels(self):
        """All three channels come from the luma of the unmodified color."""
        c = Color(100, 50, 200, 255)
        gray = round(0.299 * 100 + 0.587 * 50 + 0.114 * 200)
        assert c.grayscale() == Color(gray, gray, gray, 255)


class TestBlend:
    """Tests for blending two colors."""

    def test_blended_averages(self):
        result = Color(255, 0, 100, 255).blended(Color(0, 255, 51, 255))
        assert result == Color(127, 127, 75, 255)

    def test_blend_is_commutative(self):
        a = Color(13, 200, 7, 90)
        b = Color(250, 3, 77, 255)
        assert a.blended(b) == b.blended(a)

    def test_blended_does_not_modify(self):
        a = Color(255, 255, 255, 255)
        a.blended(Color.black())
        assert a == Color.white()


class TestComparison:
    """Tests for equality and packed-value ordering."""

    def test_equality_compares_all_channels(self):
        assert Color(1, 2, 3, 4) == Color(1, 2, 3, 4)
        assert Color(1, 2, 3, 4) != Color(1, 2, 3, 5)

    def test_not_equal_to_other_types(self):
        assert Color(1, 2, 3, 4) != (1, 2, 3, 4)

    def test_alpha_ordering(self):
        assert Color(0, 0, 0, 1) < Color(0, 0, 0, 2)

    def test_alpha_dominates_red(self):
        """Ordering follows the packed rgba value, not perception."""
        assert Color(255, 0, 0, 0) < Color(0, 0, 0, 1)
        assert Color(0, 1, 0, 0) > Color(255, 0, 0, 0)

    def test_le_ge(self):
        a = Color(1, 2, 3, 4)
        assert a <= Color(1, 2, 3, 4)
        assert a >= Color(1, 2, 3, 4)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Color())
