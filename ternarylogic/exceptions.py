"""
Exceptions raised at the boundaries of the ternary logic algebra.

The connectives themselves are total; these are only raised on conversion of
out-of-domain values and on n-ary calls without operands.
"""


class TernaryLogicError(Exception):
    """Base exception for all ternarylogic errors."""
    pass


class DomainError(TernaryLogicError, ValueError):
    """A value lies outside the three-element truth domain."""
    def __init__(self, value, encoding: str):
        self.value = value
        self.encoding = encoding
        super().__init__(f"{value!r} is not a {encoding} truth value")


class EmptyOperandsError(TernaryLogicError, ValueError):
    """An n-ary operator was called with zero operands."""
    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"{operator}() requires at least one operand")
