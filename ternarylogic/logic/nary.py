"""
Left folds shared by the n-ary operators of every encoding.

The empty-operand policy is read from the in-memory Config singleton, which
is created (and any TERNARYLOGIC_CONFIG file loaded) when ternarylogic.config
is imported. Calling an operator never touches the filesystem.
"""

import logging
from functools import reduce
from typing import Callable, Sequence, TypeVar

from ..config import get_config, EmptyOperandsPolicy
from ..exceptions import EmptyOperandsError

logger = logging.getLogger(__name__)

V = TypeVar("V")


def empty_result(operator: str, identity: V) -> V:
    """Apply the configured empty-operands policy for `operator`.

    Returns `identity` under the IDENTITY policy, raises EmptyOperandsError otherwise.
    """
    policy = get_config().get_empty_operands_policy()
    if policy is EmptyOperandsPolicy.IDENTITY:
        logger.debug(f"{operator}() called without operands, returning identity {identity!r}")
        return identity
    raise EmptyOperandsError(operator)


def fold(operator: str, binary: Callable[[V, V], V], operands: Sequence[V], identity: V) -> V:
    """Left fold of `binary` over `operands`.

    Every operand is visited; there is no early exit once the result is decided.
    """
    if not operands:
        return empty_result(operator, identity)
    return reduce(binary, operands)
