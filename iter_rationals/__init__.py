"""Lazy enumeration of the positive rationals."""

from .enumerator import DEFAULT_INTEGER_TYPE, Rationals, rationals_array
from .integers import (
    INTEGER_TYPES,
    IntegerConversionError,
    IntegerOverflowError,
    IntegerType,
    resolve_integer_type,
)
from .rational import Rational, rationalize

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_INTEGER_TYPE",
    "INTEGER_TYPES",
    "IntegerConversionError",
    "IntegerOverflowError",
    "IntegerType",
    "Rational",
    "Rationals",
    "rationalize",
    "rationals_array",
    "resolve_integer_type",
]
