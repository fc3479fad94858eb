"""
Coercion of arbitrary Python values into the ternary encoding.

Mapping table (applied in order):

    None / no argument               -> None (indeterminate)
    bool, numpy.bool_                -> the bool itself
    TruthValue                       -> its ternary form
    Ternary                          -> its wrapped value
    numbers (int, float, complex,
      Decimal, Fraction, numpy)      -> False for zero (incl. -0.0) and NaN, else True
    str, bytes, bytearray            -> False if empty, else True ("0" and "false" are True)
    numpy.ndarray                    -> False if it has no elements, else True
    anything else                    -> bool(value)
"""
import cmath
import numbers
from decimal import Decimal
from typing import Any

import numpy as np

from ..model.truth_value import TruthValue
from .ternary import ternary


def _is_nan(value: numbers.Number) -> bool:
    if isinstance(value, Decimal):
        # covers signaling NaN, which refuses to be compared
        return value.is_nan()
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return cmath.isnan(complex(value))
    # NaN is the only value unequal to itself
    return bool(value != value)


def truth_value(value: Any = None) -> ternary:
    """Coerce `value` to True, False or None using the module's mapping table."""
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, TruthValue):
        return value.to_bool()
    if isinstance(value, Ternary):
        return value.value
    if isinstance(value, numbers.Number):
        if _is_nan(value):
            return False
        return bool(value != 0)
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) > 0
    if isinstance(value, np.ndarray):
        return value.size > 0
    return bool(value)


class Ternary:
    """
    Wrapper around a coerced ternary primitive.

    `Ternary(x).value` is `truth_value(x)`; str() gives the primitive's text.
    You should rarely need this over calling truth_value() directly.
    """
    __slots__ = ("_value",)

    def __init__(self, value: Any = None):
        self._value = truth_value(value)

    @property
    def value(self) -> ternary:
        return self._value

    def value_of(self) -> ternary:
        """Returns the primitive value of the wrapper."""
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Ternary):
            return NotImplemented
        return self._value is other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Ternary({self._value!r})"
