"""
Three-valued logic for Python.

The default API works on the ternary encoding: True, False and None, where
None is the indeterminate value. See ternarylogic.logic.balanced for the
same algebra over the trits -1, 0 and 1.

Usage:
    from ternarylogic import both, either, resolve

    result = either(both(income, debt), both(assets, history))
    resolve(result, "Approve", "Reject", "Needs review")
"""

__version__ = "0.1.0"

from .logic.ternary import (
    ternary,
    not_,
    both,
    either,
    differ,
    same,
    and_,
    or_,
    xor,
    xnor,
    eq,
    resolve,
    cond,
    collapse,
    to_boolean,
)
from .logic.balanced import Trit, to_ternary, from_ternary
from .model.truth_value import TruthValue
from .logic.coercion import truth_value, Ternary
from .config import Config, EmptyOperandsPolicy, get_config, configure_logging
from .exceptions import TernaryLogicError, DomainError, EmptyOperandsError

__all__ = [
    '__version__',

    # Ternary connectives
    'ternary',
    'not_',
    'both',
    'either',
    'differ',
    'same',
    'and_',
    'or_',
    'xor',
    'xnor',
    'eq',
    'resolve',
    'cond',
    'collapse',
    'to_boolean',

    # Encodings
    'Trit',
    'to_ternary',
    'from_ternary',
    'TruthValue',

    # Coercion
    'truth_value',
    'Ternary',

    # Config
    'Config',
    'EmptyOperandsPolicy',
    'get_config',
    'configure_logging',

    # Exceptions
    'TernaryLogicError',
    'DomainError',
    'EmptyOperandsError',
]
