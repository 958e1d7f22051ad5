"""Integer types the rational enumerator can be parameterized over."""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import numpy as np

logger = logging.getLogger(__name__)


class IntegerConversionError(ValueError):
    """Raised when an integer type cannot represent a required literal."""


class IntegerOverflowError(OverflowError):
    """Raised when a value leaves the range of its integer type."""


@dataclass(frozen=True)
class IntegerType:
    """A signed or unsigned whole-number type of fixed (or unbounded) width.

    ``bits`` is ``None`` for the unbounded Python ``int``. Values are always
    held as Python ``int`` objects; the type only decides which of them are
    representable.
    """

    name: str
    bits: Optional[int]
    signed: bool = True

    def __post_init__(self) -> None:
        if self.bits is not None and self.bits < 1:
            raise ValueError("bits must be >= 1")

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_dtype(cls, dtype: Any) -> "IntegerType":
        """Create an :class:`IntegerType` matching a NumPy integer dtype."""
        info = np.iinfo(np.dtype(dtype))
        signed = info.min < 0
        prefix = "i" if signed else "u"
        return cls(f"{prefix}{info.bits}", info.bits, signed)

    # ------------------------------------------------------------------
    # Range
    @property
    def unbounded(self) -> bool:
        return self.bits is None

    @property
    def min_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def numpy_dtype(self) -> np.dtype:
        """The NumPy dtype holding this type, ``object`` when NumPy has none."""
        if self.bits in (8, 16, 32, 64):
            kind = "int" if self.signed else "uint"
            return np.dtype(f"{kind}{self.bits}")
        return np.dtype(object)

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: numbers.Integral) -> int:
        """Return *value* as ``int``, raising when it is not representable."""
        value = int(value)
        if not self.contains(value):
            logger.debug("value %d outside %s range", value, self.name)
            raise IntegerOverflowError(
                f"{value} is outside the range of {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    def from_literal(self, value: int) -> int:
        """Convert a small literal constant into this type."""
        if not self.contains(value):
            raise IntegerConversionError(f"{self.name} cannot represent the literal {value}")
        return value

    def zero(self) -> int:
        return self.from_literal(0)

    def one(self) -> int:
        return self.from_literal(1)

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        return self.name


U8 = IntegerType("u8", 8, False)
U16 = IntegerType("u16", 16, False)
U32 = IntegerType("u32", 32, False)
U64 = IntegerType("u64", 64, False)
U128 = IntegerType("u128", 128, False)
I8 = IntegerType("i8", 8, True)
I16 = IntegerType("i16", 16, True)
I32 = IntegerType("i32", 32, True)
I64 = IntegerType("i64", 64, True)
I128 = IntegerType("i128", 128, True)
USIZE = IntegerType("usize", np.iinfo(np.uintp).bits, False)
ISIZE = IntegerType("isize", np.iinfo(np.intp).bits, True)
BIGINT = IntegerType("int", None, True)

INTEGER_TYPES: Dict[str, IntegerType] = {
    t.name: t
    for t in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128, USIZE, ISIZE, BIGINT)
}

_ALIASES = {
    "uint8": U8,
    "uint16": U16,
    "uint32": U32,
    "uint64": U64,
    "uint128": U128,
    "int8": I8,
    "int16": I16,
    "int32": I32,
    "int64": I64,
    "int128": I128,
    "uintp": USIZE,
    "intp": ISIZE,
    "bigint": BIGINT,
}

IntegerTypeLike = Union[IntegerType, str, type, np.dtype]


def resolve_integer_type(spec: Any) -> IntegerType:
    """Coerce a name, NumPy dtype or ``int`` into an :class:`IntegerType`."""
    if isinstance(spec, IntegerType):
        return spec
    if spec is int:
        return BIGINT
    if isinstance(spec, str):
        key = spec.strip().lower()
        if key in INTEGER_TYPES:
            return INTEGER_TYPES[key]
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(
            f"Unknown integer type {spec!r}; expected one of {sorted(INTEGER_TYPES)}"
        )
    if isinstance(spec, np.dtype) or (isinstance(spec, type) and issubclass(spec, np.generic)):
        dtype = np.dtype(spec)
        if dtype.kind not in "iu":
            raise TypeError(f"{dtype} is not an integer dtype")
        return IntegerType.from_dtype(dtype)
    raise TypeError(f"Cannot interpret {spec!r} as an integer type")


__all__ = [
    "BIGINT",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INTEGER_TYPES",
    "ISIZE",
    "IntegerConversionError",
    "IntegerOverflowError",
    "IntegerType",
    "IntegerTypeLike",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "resolve_integer_type",
]
