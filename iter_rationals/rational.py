"""Rational values over fixed-width integer types with checked arithmetic."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Tuple, Union

import numpy as np

from .integers import BIGINT, IntegerType, IntegerTypeLike, resolve_integer_type


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


class Rational:
    """A numerator/denominator pair held in lowest terms.

    Both components must be representable by ``integer_type``; so must every
    intermediate value an operation computes. Leaving the range raises
    :class:`~iter_rationals.integers.IntegerOverflowError` instead of
    wrapping.
    """

    __slots__ = ("_numerator", "_denominator", "_integer_type")

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
        *,
        integer_type: IntegerTypeLike = BIGINT,
    ) -> None:
        itype = resolve_integer_type(integer_type)
        num = itype.check(_ensure_int(numerator, name="numerator"))
        den = itype.check(_ensure_int(denominator, name="denominator"))
        if den == 0:
            raise ZeroDivisionError("denominator must be non-zero")

        num, den = self._normalize(num, den)

        self._numerator = itype.check(num)
        self._denominator = itype.check(den)
        self._integer_type = itype

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def _from_reduced(cls, numerator: int, denominator: int, integer_type: IntegerType) -> "Rational":
        # Caller guarantees gcd(numerator, denominator) == 1 and denominator > 0.
        self = object.__new__(cls)
        self._numerator = integer_type.check(numerator)
        self._denominator = integer_type.check(denominator)
        self._integer_type = integer_type
        return self

    @classmethod
    def from_integer(
        cls, value: numbers.Integral, *, integer_type: IntegerTypeLike = BIGINT
    ) -> "Rational":
        """Return ``value/1``."""
        itype = resolve_integer_type(integer_type)
        return cls._from_reduced(_ensure_int(value, name="value"), itype.one(), itype)

    @classmethod
    def from_fraction(
        cls, value: Fraction, *, integer_type: IntegerTypeLike = BIGINT
    ) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        itype = resolve_integer_type(integer_type)
        return cls._from_reduced(value.numerator, value.denominator, itype)

    @classmethod
    def from_float(
        cls, value: float, *, integer_type: IntegerTypeLike = BIGINT
    ) -> "Rational":
        """Return the exact value of a finite float."""
        if math.isnan(value) or math.isinf(value):
            raise ValueError("cannot convert NaN or infinity to Rational")
        return cls.from_fraction(Fraction.from_float(value), integer_type=integer_type)

    @classmethod
    def rationalize(
        cls, value: Any, *, integer_type: IntegerTypeLike = BIGINT
    ) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        itype = resolve_integer_type(integer_type)
        if isinstance(value, Rational):
            if value._integer_type == itype:
                return value
            return cls._from_reduced(value._numerator, value._denominator, itype)
        if isinstance(value, Fraction):
            return cls.from_fraction(value, integer_type=itype)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item(), integer_type=itype)
        if isinstance(value, numbers.Integral):
            return cls.from_integer(value, integer_type=itype)
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value), integer_type=itype)
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def integer_type(self) -> IntegerType:
        return self._integer_type

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def as_tuple(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def is_integer(self) -> bool:
        return self._denominator == 1

    def trunc(self) -> "Rational":
        """Integer part, rounded toward zero."""
        whole = abs(self._numerator) // self._denominator
        if self._numerator < 0:
            whole = -whole
        itype = self._integer_type
        return Rational._from_reduced(whole, itype.one(), itype)

    def fract(self) -> "Rational":
        """``self - self.trunc()``; carries the sign of the numerator."""
        num, den = self._numerator, self._denominator
        remainder = abs(num) % den
        if num < 0:
            remainder = -remainder
        # gcd(remainder, den) == gcd(num, den) == 1
        return Rational._from_reduced(remainder, den, self._integer_type)

    def recip(self) -> "Rational":
        """Return ``1 / self``."""
        if self._numerator == 0:
            raise ZeroDivisionError("reciprocal of zero")
        if self._numerator < 0:
            return Rational._from_reduced(-self._denominator, -self._numerator, self._integer_type)
        return Rational._from_reduced(self._denominator, self._numerator, self._integer_type)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:  # pragma: no cover - trivial mapping
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return self.trunc()._numerator

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        if self._integer_type == BIGINT:
            return f"Rational({self._numerator}, {self._denominator})"
        return (
            f"Rational({self._numerator}, {self._denominator}, "
            f"integer_type={self._integer_type.name!r})"
        )

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return Rational.from_fraction(value, integer_type=self._integer_type)
        if isinstance(value, np.generic):
            return self._coerce_scalar(value.item())
        if isinstance(value, numbers.Integral):
            return Rational.from_integer(value, integer_type=self._integer_type)
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    @staticmethod
    def _combine_types(a: "Rational", b: "Rational") -> IntegerType:
        if a._integer_type != b._integer_type:
            raise TypeError(
                f"cannot mix {a._integer_type.name} and {b._integer_type.name} rationals"
            )
        return a._integer_type

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den < 0:
            num, den = -num, -den
        gcd = math.gcd(num, den)
        return num // gcd, den // gcd

    def _add_sub(self, other: Any, op) -> "Rational":
        other = self._coerce_scalar(other)
        itype = self._combine_types(self, other)
        check = itype.check
        a, b = self._numerator, self._denominator
        c, d = other._numerator, other._denominator

        # When one side is integral the result is already in lowest terms.
        if b == 1 and d == 1:
            return Rational._from_reduced(check(op(a, c)), b, itype)
        if d == 1:
            return Rational._from_reduced(check(op(a, check(c * b))), b, itype)
        if b == 1:
            return Rational._from_reduced(check(op(check(a * d), c)), d, itype)
        if b == d:
            return Rational(check(op(a, c)), b, integer_type=itype)

        lcm = check(math.lcm(b, d))
        lhs = check(a * (lcm // b))
        rhs = check(c * (lcm // d))
        return Rational(check(op(lhs, rhs)), lcm, integer_type=itype)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> "Rational":
        return self._add_sub(other, operator.add)

    def __radd__(self, other: Any) -> "Rational":
        return self._coerce_scalar(other)._add_sub(self, operator.add)

    def __sub__(self, other: Any) -> "Rational":
        return self._add_sub(other, operator.sub)

    def __rsub__(self, other: Any) -> "Rational":
        return self._coerce_scalar(other)._add_sub(self, operator.sub)

    def __neg__(self) -> "Rational":
        return Rational._from_reduced(-self._numerator, self._denominator, self._integer_type)

    def __pos__(self) -> "Rational":  # pragma: no cover - trivial
        return self

    def __abs__(self) -> "Rational":
        return Rational._from_reduced(abs(self._numerator), self._denominator, self._integer_type)

    # ------------------------------------------------------------------
    # Comparisons
    @staticmethod
    def _components(value: Any) -> Tuple[int, int]:
        # Comparisons run on Python ints and never overflow.
        if isinstance(value, Rational):
            return value._numerator, value._denominator
        if isinstance(value, Fraction):
            return value.numerator, value.denominator
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, numbers.Integral):
            return int(value), 1
        raise TypeError(f"Cannot compare Rational with {type(value)!r}")

    def _compare(self, other: Any, op) -> bool:
        c, d = self._components(other)
        return op(self._numerator * d, c * self._denominator)

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except TypeError:
            return False

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        return hash(self.as_fraction())


def rationalize(value: Any, *, integer_type: IntegerTypeLike = BIGINT) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value, integer_type=integer_type)


__all__ = ["Rational", "rationalize"]
