"""Enumerate every positive rational exactly once.

The successor function comes from Gibbons, Lester and Bird,
"Functional Pearl: Enumerating the Rationals"
(http://www.cs.ox.ac.uk/people/jeremy.gibbons/publications/rationals.pdf)::

    next(r) = 1 / (trunc(r) + 1 - fract(r))

Starting from 1 it visits the Calkin-Wilf tree breadth first, so every value
comes out already in lowest terms.
"""
from __future__ import annotations

import logging
from itertools import islice
from typing import Iterator, List

import numpy as np

from .integers import IntegerOverflowError, IntegerType, IntegerTypeLike, resolve_integer_type
from .rational import Rational

logger = logging.getLogger(__name__)

DEFAULT_INTEGER_TYPE = "u32"


class Rationals:
    """Infinite iterator over the positive rationals.

    >>> [str(r) for r in Rationals().take(7)]
    ['1', '1/2', '2', '1/3', '3/2', '2/3', '3']

    Values use ``integer_type`` for their components. Once a step would need
    a number outside that type's range, :class:`IntegerOverflowError` is
    raised and the enumerator stays on the value it could not advance past.
    """

    __slots__ = ("_state", "_one")

    def __init__(self, integer_type: IntegerTypeLike = DEFAULT_INTEGER_TYPE) -> None:
        itype = resolve_integer_type(integer_type)
        # Raises IntegerConversionError before any state exists.
        self._one = Rational.from_integer(itype.one(), integer_type=itype)
        self._state = self._one
        logger.debug("created rational enumerator over %s", itype.name)

    @property
    def integer_type(self) -> IntegerType:
        return self._state.integer_type

    def produce_next_value(self) -> Rational:
        """Return the current value and advance to its successor."""
        r = self._state
        n = r.trunc()
        y = r.fract()
        try:
            self._state = (n + self._one - y).recip()
        except IntegerOverflowError:
            logger.debug("%s range exhausted after %s", self.integer_type.name, r)
            raise
        return r

    # ------------------------------------------------------------------
    # Iterator protocol
    def __iter__(self) -> Iterator[Rational]:
        return self

    def __next__(self) -> Rational:
        return self.produce_next_value()

    # ------------------------------------------------------------------
    # Sequence helpers
    def nth(self, index: int) -> Rational:
        """Consume ``index + 1`` values and return the last one."""
        if index < 0:
            raise ValueError("index must be non-negative")
        if index:
            self.skip(index)
        return self.produce_next_value()

    def take(self, count: int) -> List[Rational]:
        """Return the next ``count`` values."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return list(islice(self, count))

    def skip(self, count: int) -> "Rationals":
        """Discard the next ``count`` values."""
        if count < 0:
            raise ValueError("count must be non-negative")
        if count >= 10_000:
            logger.debug("skipping %d %s rationals", count, self.integer_type.name)
        produce = self.produce_next_value
        for _ in range(count):
            produce()
        return self


def rationals_array(
    count: int,
    *,
    integer_type: IntegerTypeLike = DEFAULT_INTEGER_TYPE,
    start: int = 0,
) -> np.ndarray:
    """Return ``count`` rationals from index ``start`` as a ``(count, 2)`` array.

    Column 0 holds numerators and column 1 denominators. The dtype follows
    the integer type; 128-bit and unbounded types fall back to ``object``.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    itype = resolve_integer_type(integer_type)
    values = Rationals(itype).skip(start).take(count)
    array = np.empty((count, 2), dtype=itype.numpy_dtype)
    for row, value in enumerate(values):
        array[row, 0] = value.numerator
        array[row, 1] = value.denominator
    return array


__all__ = ["DEFAULT_INTEGER_TYPE", "Rationals", "rationals_array"]
