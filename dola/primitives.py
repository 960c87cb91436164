"""Scalar float types stored at reduced precision (32, 16 and 8 bit)."""

from __future__ import annotations

import math
import random as _random
import struct
from typing import ClassVar, Union

Number = Union[int, float]

_F8_MAX = 448.0
_F8_MIN_NORMAL_EXP = -6
_F8_MANTISSA_BITS = 3


def round_f32(value: float) -> float:
    """Round ``value`` to the nearest IEEE single-precision float."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def round_f16(value: float) -> float:
    """Round ``value`` to the nearest IEEE half-precision float."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<e", struct.pack("<e", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def round_f8e4m3(value: float) -> float:
    """Round ``value`` to the nearest 8-bit E4M3 float.

    Rounding is to nearest, ties to even. E4M3 has no infinities, so
    out-of-range magnitudes saturate to the largest finite value (448).
    """
    value = round_f32(value)
    if math.isnan(value):
        return value
    magnitude = abs(value)
    if magnitude == 0.0:
        return value
    if math.isinf(magnitude):
        return math.copysign(_F8_MAX, value)
    _, exp = math.frexp(magnitude)
    quantum_exp = max(exp - 1, _F8_MIN_NORMAL_EXP) - _F8_MANTISSA_BITS
    rounded = math.ldexp(round(math.ldexp(magnitude, -quantum_exp)), quantum_exp)
    return math.copysign(min(rounded, _F8_MAX), value)


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


class FloatScalar:
    """A float value held at the precision of the concrete subclass."""

    __slots__ = ("value",)
    _round: ClassVar = staticmethod(round_f32)

    def __init__(self, value: Union[Number, "FloatScalar"]) -> None:
        self.value: float = type(self)._round(float(value))

    @classmethod
    def zero(cls) -> "FloatScalar":
        """Return the scalar 0.0 of this kind."""
        return cls(0.0)

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> "FloatScalar":
        """Return a uniform random scalar in [0, 1)."""
        source = rng if rng is not None else _random
        return cls(source.random())

    def to(self, kind: type["FloatScalar"]) -> "FloatScalar":
        """Convert to another scalar kind."""
        return kind(self.value)

    def max(self, other: Union[Number, "FloatScalar"]) -> "FloatScalar":
        """Return the larger of ``self`` and ``other``; ties give ``other``."""
        other_scalar = self._coerce(other)
        if other_scalar is NotImplemented:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        return self if self.value > other_scalar.value else other_scalar

    def _coerce(self, other):
        if isinstance(other, FloatScalar):
            return other if type(other) is type(self) else NotImplemented
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return type(self)(other)
        return NotImplemented

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(self.value + rhs.value)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(self.value - rhs.value)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return type(self)(lhs.value - self.value)

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(self.value * rhs.value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(_ieee_divide(self.value, rhs.value))

    def __rtruediv__(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return type(self)(_ieee_divide(lhs.value, self.value))

    def __neg__(self):
        return type(self)(-self.value)

    def __eq__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.value == rhs.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __lt__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.value < rhs.value

    def __gt__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.value > rhs.value

    def __le__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.value <= rhs.value

    def __ge__(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.value >= rhs.value


class F32(FloatScalar):
    """Single-precision scalar."""

    __slots__ = ()
    _round = staticmethod(round_f32)


class F16(FloatScalar):
    """Half-precision scalar."""

    __slots__ = ()
    _round = staticmethod(round_f16)


class F8(FloatScalar):
    """8-bit E4M3 scalar."""

    __slots__ = ()
    _round = staticmethod(round_f8e4m3)