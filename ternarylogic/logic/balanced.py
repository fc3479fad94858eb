"""
Three-valued logic over the balanced encoding.

A trit is one of the integers -1 (false), 0 (indeterminate) and +1 (true).
The integer order is the truth order false < indeterminate < true, so
conjunction and disjunction are simply min and max. The other encodings of
the package are defined as bijections onto this one.
"""
from typing import Literal, Optional, TypeVar

from .nary import fold, empty_result

Trit = Literal[-1, 0, 1]

FALSE: Trit = -1
UNKNOWN: Trit = 0
TRUE: Trit = 1

TRITS: tuple[Trit, ...] = (FALSE, UNKNOWN, TRUE)

T = TypeVar("T")


def not_(a: Trit) -> Trit:
    """Logical complement of a trit: true and false swap, indeterminate stays."""
    return -a


def both(a: Trit, b: Trit) -> Trit:
    """Logical conjunction of two trits.

    Returns:
        -1 if any operand is -1, otherwise 0 if any operand is 0, otherwise 1
    """
    return min(a, b)


def either(a: Trit, b: Trit) -> Trit:
    """Logical disjunction of two trits.

    Returns:
        1 if any operand is 1, otherwise 0 if any operand is 0, otherwise -1
    """
    return max(a, b)


def differ(a: Trit, b: Trit) -> Trit:
    """Logical inequality of two trits.

    Returns:
        1 if the operands are different determinate values,
        0 if any operand is 0,
        otherwise -1
    """
    return both(either(a, b), not_(both(a, b)))


def same(a: Trit, b: Trit) -> Trit:
    """Logical equality of two trits, the complement of `differ`."""
    return not_(differ(a, b))


def and_(*operands: Trit) -> Trit:
    """Logical conjunction of one or more trits, a left fold of `both`."""
    return fold("and_", both, operands, TRUE)


def or_(*operands: Trit) -> Trit:
    """Logical disjunction of one or more trits, a left fold of `either`."""
    return fold("or_", either, operands, FALSE)


def xor(*operands: Trit) -> Trit:
    """Logical inequality of one or more trits.

    This is "not all the same", not parity: xor(1, 1, 1) is -1 and
    xor(1, -1, 1) is 1.

    Returns:
        0 if any operand is 0,
        otherwise -1 if all operands are the same value,
        otherwise 1
    """
    if not operands:
        return empty_result("xor", FALSE)
    if any(a == UNKNOWN for a in operands):
        return UNKNOWN
    return both(or_(*operands), not_(and_(*operands)))


def xnor(*operands: Trit) -> Trit:
    """Logical equality of one or more trits: 1 only if all operands are the same determinate value."""
    if not operands:
        return empty_result("xnor", TRUE)
    return not_(xor(*operands))


# Mnemonic alias
eq = xnor


def resolve(condition: Trit, if_positive: T, if_negative: Optional[T] = None, if_zero: Optional[T] = None) -> Optional[T]:
    """Evaluates a trit and returns the argument matching its value.

    Returns:
        if_positive for 1, if_negative for -1, if_zero for 0
    """
    if condition == TRUE:
        return if_positive
    if condition == FALSE:
        return if_negative
    return if_zero


def collapse(condition: Trit, if_positive: T, if_negative: Optional[T] = None) -> Optional[T]:
    """Collapses a trit using Priest's Logic of Paradox.

    Returns:
        if_negative for -1, if_positive for 1 and 0
    """
    return if_negative if condition == FALSE else if_positive


def to_boolean(a: Trit) -> bool:
    """Collapses a trit to a bool: only -1 is False."""
    return collapse(a, True, False)


def to_ternary(a: Trit) -> Optional[bool]:
    """Converts a trit to the ternary encoding: 1 -> True, -1 -> False, 0 -> None."""
    if a == TRUE:
        return True
    if a == FALSE:
        return False
    return None


def from_ternary(a: Optional[bool]) -> Trit:
    """Converts a ternary value to a trit: True -> 1, False -> -1, None -> 0."""
    if a is True:
        return TRUE
    if a is False:
        return FALSE
    return UNKNOWN
