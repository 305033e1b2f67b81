# core/color.py
import math
import numbers
from typing import Iterator, Tuple

from phongtrace.core.errors import DivideByZeroError, NegativeDivisorError
from phongtrace.core.utils import less_than_or_nearly_equal, nearly_equal

CHANNEL_MAX = 255

# Flips the red, green and blue bytes of the packed rgba value, alpha is kept.
INVERT_MASK = 0x00FFFFFF
PACKED_MASK = 0xFFFFFFFF

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def _to_channel(value) -> int:
    """
    Clamps a number into the 8-bit channel range, truncating fractions.
    NaN maps to 0 and infinities saturate.
    """
    if not value > 0:
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    return int(value)


def _round_half_up(value: float) -> int:
    # Channel products are never negative, so this matches std::round.
    return int(math.floor(value + 0.5))


def _scale_channel(channel: int, scalar: float) -> int:
    if channel == 0:
        return 0
    product = channel * scalar
    # Saturate before rounding so huge or infinite products never reach int()
    if not product < CHANNEL_MAX:
        return CHANNEL_MAX
    return _round_half_up(product)


class Color:
    """
    An RGBA color with four 8-bit channels.

    The packed `rgba` value keeps red in the lowest byte and alpha in the
    highest, so ordering comparisons are dominated by alpha, then blue, then
    green, then red. `argb` is the layout used for pixel buffers.

    Every operation saturates: results are clamped to 0..255 instead of
    wrapping. Only division and modulo can fail, and they fail before any
    channel is modified.
    """
    def __init__(self, r: int = 0, g: int = 0, b: int = 0, a: int = CHANNEL_MAX):
        self._r = _to_channel(r)
        self._g = _to_channel(g)
        self._b = _to_channel(b)
        self._a = _to_channel(a)

    @classmethod
    def from_rgba(cls, rgba: int) -> "Color":
        color = cls()
        color.rgba = rgba
        return color

    @classmethod
    def from_argb(cls, argb: int) -> "Color":
        color = cls()
        color.argb = argb
        return color

    # Named colors

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def red(cls) -> "Color":
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0, 0, 255)

    @classmethod
    def yellow(cls) -> "Color":
        return cls(255, 255, 0)

    @classmethod
    def cyan(cls) -> "Color":
        return cls(0, 255, 255)

    @classmethod
    def magenta(cls) -> "Color":
        return cls(255, 0, 255)

    @classmethod
    def transparent(cls) -> "Color":
        return cls(0, 0, 0, 0)

    # Channel accessors

    @property
    def r(self) -> int:
        return self._r

    @r.setter
    def r(self, value: int):
        self._r = _to_channel(value)

    @property
    def g(self) -> int:
        return self._g

    @g.setter
    def g(self, value: int):
        self._g = _to_channel(value)

    @property
    def b(self) -> int:
        return self._b

    @b.setter
    def b(self, value: int):
        self._b = _to_channel(value)

    @property
    def a(self) -> int:
        return self._a

    @a.setter
    def a(self, value: int):
        self._a = _to_channel(value)

    @property
    def rgba(self) -> int:
        """
        Packed value with byte 0 = r, 1 = g, 2 = b, 3 = a.
        """
        return self._r | (self._g << 8) | (self._b << 16) | (self._a << 24)

    @rgba.setter
    def rgba(self, value: int):
        value = int(value) & PACKED_MASK
        self._r = value & 0xFF
        self._g = (value >> 8) & 0xFF
        self._b = (value >> 16) & 0xFF
        self._a = (value >> 24) & 0xFF

    @property
    def argb(self) -> int:
        """
        Packed value with alpha in the most significant byte, then r, g, b.
        """
        return (self._a << 24) | (self._r << 16) | (self._g << 8) | self._b

    @argb.setter
    def argb(self, value: int):
        value = int(value) & PACKED_MASK
        self._b = value & 0xFF
        self._g = (value >> 8) & 0xFF
        self._r = (value >> 16) & 0xFF
        self._a = (value >> 24) & 0xFF

    def _set(self, r: int, g: int, b: int, a: int):
        self._r, self._g, self._b, self._a = r, g, b, a

    def _operand(self, other):
        """
        Returns the four channel operands for `other`, or None if the type
        is not supported. Scalars are clamped to the 8-bit range.
        """
        if isinstance(other, Color):
            return other.to_tuple()
        if isinstance(other, numbers.Real):
            s = _to_channel(other)
            return (s, s, s, s)
        return None

    # Addition

    def __add__(self, other) -> "Color":
        if self._operand(other) is None:
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other) -> "Color":
        return self.__add__(other)

    def __iadd__(self, other) -> "Color":
        values = self._operand(other)
        if values is None:
            return NotImplemented
        self._set(*(min(CHANNEL_MAX, c + v) for c, v in zip(self, values)))
        return self

    # Subtraction

    def __sub__(self, other) -> "Color":
        if self._operand(other) is None:
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other) -> "Color":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        s = _to_channel(other)
        return Color(*(max(0, s - c) for c in self))

    def __isub__(self, other) -> "Color":
        values = self._operand(other)
        if values is None:
            return NotImplemented
        self._set(*(max(0, c - v) for c, v in zip(self, values)))
        return self

    # Multiplication

    def __mul__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    def __rmul__(self, scalar: float) -> "Color":
        return self.__mul__(scalar)

    def __imul__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if math.isnan(scalar) or less_than_or_nearly_equal(scalar, 0):
            self._set(0, 0, 0, 0)
            return self
        self._set(*(_scale_channel(c, scalar) for c in self))
        return self

    # Division

    def __truediv__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __rtruediv__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if 0 in self.to_tuple():
            raise DivideByZeroError()
        if scalar < 0:
            raise NegativeDivisorError()
        return Color(*(_to_channel(scalar / c) for c in self))

    def __itruediv__(self, scalar: float) -> "Color":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if nearly_equal(scalar, 0):
            raise DivideByZeroError()
        if scalar < 0:
            raise NegativeDivisorError()
        self._set(*(_to_channel(c / scalar) for c in self))
        return self

    # Modulo

    def __mod__(self, scalar: int) -> "Color":
        if not isinstance(scalar, numbers.Integral):
            return NotImplemented
        result = self.copy()
        result %= scalar
        return result

    def __rmod__(self, scalar: int) -> "Color":
        if not isinstance(scalar, numbers.Integral):
            return NotImplemented
        if 0 in self.to_tuple():
            raise DivideByZeroError()
        if scalar < 0:
            raise NegativeDivisorError()
        s = _to_channel(scalar)
        return Color(*(s % c for c in self))

    def __imod__(self, scalar: int) -> "Color":
        if not isinstance(scalar, numbers.Integral):
            return NotImplemented
        if scalar == 0:
            raise DivideByZeroError()
        if scalar < 0:
            raise NegativeDivisorError()
        s = _to_channel(scalar)
        self._set(*(c % s for c in self))
        return self

    # Methods

    def invert(self) -> "Color":
        """
        Inverts red, green and blue in place. Alpha is left untouched.
        """
        self.rgba = self.rgba ^ INVERT_MASK
        return self

    def inverted(self) -> "Color":
        return self.copy().invert()

    def __invert__(self) -> "Color":
        return self.inverted()

    def grayscale(self) -> "Color":
        """
        Replaces r, g and b with the luma of the original color, in place.
        """
        wr, wg, wb = LUMA_WEIGHTS
        gray = min(CHANNEL_MAX, _round_half_up(wr * self._r + wg * self._g + wb * self._b))
        self._set(gray, gray, gray, self._a)
        return self

    def grayscaled(self) -> "Color":
        return self.copy().grayscale()

    def blend(self, other: "Color") -> "Color":
        """
        Averages every channel with `other`, in place.
        """
        self._set(*((c + o) // 2 for c, o in zip(self, other)))
        return self

    def blended(self, other: "Color") -> "Color":
        return self.copy().blend(other)

    def copy(self) -> "Color":
        return Color(self._r, self._g, self._b, self._a)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self._r, self._g, self._b, self._a)

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_tuple())

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None

    def __lt__(self, other: "Color") -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba < other.rgba

    def __le__(self, other: "Color") -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba <= other.rgba

    def __gt__(self, other: "Color") -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba > other.rgba

    def __ge__(self, other: "Color") -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba >= other.rgba

    def __repr__(self) -> str:
        return f"Color({self._r}, {self._g}, {self._b}, {self._a})"

    def __str__(self) -> str:
        return f"({self._r}, {self._g}, {self._b}, {self._a})"
