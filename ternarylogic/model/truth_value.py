"""
Truth value enumeration, the named encoding of the three-valued domain.
"""
from enum import Enum
from functools import total_ordering
from typing import Optional

from ..exceptions import DomainError
from ..logic import balanced


@total_ordering
class TruthValue(Enum):
    """
    Enumeration of the three truth values.

    THREE-VALUED LOGIC:
    - TRUE: Definitely true
    - FALSE: Definitely false
    - UNKNOWN: Indeterminate (unknown, not yet decided, or paradoxical)

    Member values are the balanced trits, so FALSE < UNKNOWN < TRUE.
    """
    FALSE = balanced.FALSE
    UNKNOWN = balanced.UNKNOWN
    TRUE = balanced.TRUE

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> 'TruthValue':
        """Convert a boolean or None to a TruthValue.

        Args:
            value: Boolean value (or None for UNKNOWN)

        Returns:
            Corresponding TruthValue

        Raises:
            DomainError: If value is not True, False or None
        """
        if value is None:
            return cls.UNKNOWN
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        raise DomainError(value, "ternary")

    @classmethod
    def from_trit(cls, value: int) -> 'TruthValue':
        """Convert a trit (-1, 0 or 1) to a TruthValue.

        Raises:
            DomainError: If value is not a trit
        """
        if isinstance(value, bool) or value not in balanced.TRITS:
            raise DomainError(value, "balanced")
        return cls(value)

    def to_bool(self) -> Optional[bool]:
        """Convert TruthValue to a boolean or None.

        Returns:
            True for TRUE, False for FALSE, None for UNKNOWN
        """
        return balanced.to_ternary(self.value)

    def to_trit(self) -> int:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, TruthValue):
            return NotImplemented
        return self.value < other.value

    def __invert__(self) -> 'TruthValue':
        return TruthValue(balanced.not_(self.value))

    def __and__(self, other):
        if not isinstance(other, TruthValue):
            return NotImplemented
        return TruthValue(balanced.both(self.value, other.value))

    def __or__(self, other):
        if not isinstance(other, TruthValue):
            return NotImplemented
        return TruthValue(balanced.either(self.value, other.value))

    def __xor__(self, other):
        if not isinstance(other, TruthValue):
            return NotImplemented
        return TruthValue(balanced.differ(self.value, other.value))

    def __bool__(self) -> bool:
        raise TypeError(
            f"{self!r} cannot be converted to bool implicitly; use to_bool() or logic.ternary.to_boolean()"
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"TruthValue.{self.name}"
