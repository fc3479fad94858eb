"""
Three-valued logic over the ternary encoding: True, False and None.

None is the indeterminate value. Operands are matched by identity
(`is True` / `is False`), so indeterminate never coerces to or from False.
Each connective maps its operands onto trits, applies the balanced
connective and maps the result back.
"""
from typing import Optional, TypeVar

from . import balanced
from .balanced import from_ternary, to_ternary

ternary = Optional[bool]

T = TypeVar("T")


def not_(a: ternary) -> ternary:
    """Logical NOT: True and False swap, None stays None."""
    return to_ternary(balanced.not_(from_ternary(a)))


def both(a: ternary, b: ternary) -> ternary:
    """Logical AND of two ternary values.

    Returns:
        False if any operand is False,
        otherwise None if any operand is None,
        otherwise True
    """
    return to_ternary(balanced.both(from_ternary(a), from_ternary(b)))


def either(a: ternary, b: ternary) -> ternary:
    """Logical OR of two ternary values.

    Returns:
        True if any operand is True,
        otherwise None if any operand is None,
        otherwise False
    """
    return to_ternary(balanced.either(from_ternary(a), from_ternary(b)))


def differ(a: ternary, b: ternary) -> ternary:
    """Logical inequality (XOR) of two ternary values.

    Returns:
        True if the operands are different booleans,
        None if any operand is None,
        otherwise False
    """
    return to_ternary(balanced.differ(from_ternary(a), from_ternary(b)))


def same(a: ternary, b: ternary) -> ternary:
    """Logical equality (XNOR) of two ternary values.

    Returns:
        True if the operands are the same boolean,
        None if any operand is None,
        otherwise False
    """
    return to_ternary(balanced.same(from_ternary(a), from_ternary(b)))


def and_(*operands: ternary) -> ternary:
    """Logical AND of one or more ternary values."""
    return to_ternary(balanced.and_(*map(from_ternary, operands)))


def or_(*operands: ternary) -> ternary:
    """Logical OR of one or more ternary values."""
    return to_ternary(balanced.or_(*map(from_ternary, operands)))


def xor(*operands: ternary) -> ternary:
    """Logical inequality of one or more ternary values.

    True only if the operands are not all the same boolean.

    Returns:
        None if any operand is None,
        otherwise False if all operands are the same boolean,
        otherwise True
    """
    return to_ternary(balanced.xor(*map(from_ternary, operands)))


def xnor(*operands: ternary) -> ternary:
    """Logical equality of one or more ternary values.

    Returns:
        None if any operand is None,
        otherwise True if all operands are the same boolean,
        otherwise False
    """
    return to_ternary(balanced.xnor(*map(from_ternary, operands)))


# Logical equality, alias of xnor
eq = xnor


def resolve(condition: ternary, if_true: T, if_false: Optional[T] = None, if_unknown: Optional[T] = None) -> Optional[T]:
    """Ternary conditional: pick one of three values based on `condition`.

    Indeterminate is its own outcome here (Kleene / Łukasiewicz reading).

    Returns:
        if_true when condition is True,
        if_false when condition is False,
        if_unknown otherwise
    """
    return balanced.resolve(from_ternary(condition), if_true, if_false, if_unknown)


def collapse(condition: ternary, if_true: T, if_false: Optional[T] = None) -> Optional[T]:
    """Collapse `condition` to two outcomes using Priest's Logic of Paradox.

    None counts as both true and false and, forced to choose, resolves to true.

    Returns:
        if_false when condition is False, if_true otherwise
    """
    return balanced.collapse(from_ternary(condition), if_true, if_false)


def to_boolean(a: ternary) -> bool:
    """Collapse a ternary value to a bool: True and None give True, False gives False."""
    return collapse(a, True, False)


# Older name of resolve
cond = resolve
