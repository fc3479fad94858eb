"""
Elementwise balanced-ternary connectives over numpy arrays.

Arrays hold trits (-1, 0, 1) as int8. Binary connectives broadcast like any
numpy ufunc; the n-ary ones reduce across their operands, not along an axis.
"""
from functools import reduce
from typing import Any

import numpy as np

from . import balanced
from .nary import empty_result

TRIT_DTYPE = np.int8


def as_trits(values: Any) -> np.ndarray:
    """Convert `values` to an int8 trit array.

    Raises:
        ValueError: If any element is not -1, 0 or 1
    """
    array = np.asarray(values)
    if array.dtype == np.bool_:
        raise ValueError("Boolean arrays are not trits; use from_ternary() instead")
    invalid = ~np.isin(array, balanced.TRITS)
    if invalid.any():
        bad = np.unique(array[invalid]).tolist()
        raise ValueError(f"Array contains values outside {{-1, 0, 1}}: {bad}")
    return array.astype(TRIT_DTYPE, copy=False)


def not_(a) -> np.ndarray:
    return np.negative(as_trits(a))


def both(a, b) -> np.ndarray:
    return np.minimum(as_trits(a), as_trits(b))


def either(a, b) -> np.ndarray:
    return np.maximum(as_trits(a), as_trits(b))


def differ(a, b) -> np.ndarray:
    """Elementwise logical inequality, see balanced.differ."""
    return both(either(a, b), not_(both(a, b)))


def same(a, b) -> np.ndarray:
    return not_(differ(a, b))


def and_(*operands) -> np.ndarray:
    if not operands:
        return np.asarray(empty_result("and_", balanced.TRUE), dtype=TRIT_DTYPE)
    return reduce(np.minimum, (as_trits(a) for a in operands))


def or_(*operands) -> np.ndarray:
    if not operands:
        return np.asarray(empty_result("or_", balanced.FALSE), dtype=TRIT_DTYPE)
    return reduce(np.maximum, (as_trits(a) for a in operands))


def xor(*operands) -> np.ndarray:
    """Elementwise "not all the same" with indeterminate propagation, see balanced.xor."""
    if not operands:
        return np.asarray(empty_result("xor", balanced.FALSE), dtype=TRIT_DTYPE)
    trits = [as_trits(a) for a in operands]
    unknown = reduce(np.logical_or, (t == balanced.UNKNOWN for t in trits))
    result = both(or_(*trits), not_(and_(*trits)))
    return np.where(unknown, balanced.UNKNOWN, result).astype(TRIT_DTYPE)


def xnor(*operands) -> np.ndarray:
    if not operands:
        return np.asarray(empty_result("xnor", balanced.TRUE), dtype=TRIT_DTYPE)
    return not_(xor(*operands))


def resolve(condition, if_positive, if_negative=None, if_zero=None) -> np.ndarray:
    """Elementwise three-way selection; branches may be scalars or broadcastable arrays.

    Branches of differing dtypes (including omitted branches, which select None)
    yield an object array holding the branch values unchanged.
    """
    condition = as_trits(condition)
    choices = [if_positive, if_negative, if_zero]
    dtypes = {np.asarray(choice).dtype for choice in choices}
    if any(choice is None for choice in choices) or len(dtypes) > 1:
        choices = [_object_branch(choice, condition.shape) for choice in choices]
    return np.select(
        [condition == balanced.TRUE, condition == balanced.FALSE],
        choices[:2],
        default=choices[2],
    )


def _object_branch(choice: Any, shape: tuple) -> np.ndarray:
    branch = np.empty(shape, dtype=object)
    branch[...] = choice
    return branch


def to_boolean(a) -> np.ndarray:
    """Elementwise Logic of Paradox collapse: only -1 is False."""
    return as_trits(a) != balanced.FALSE


def from_ternary(values: Any) -> np.ndarray:
    """Convert an array-like of True/False/None to trits."""
    array = np.asarray(values, dtype=object)
    return np.vectorize(balanced.from_ternary, otypes=[TRIT_DTYPE])(array)


def to_ternary(a) -> np.ndarray:
    """Convert a trit array to an object array of True/False/None."""
    trits = as_trits(a)
    return np.vectorize(balanced.to_ternary, otypes=[object])(trits)
