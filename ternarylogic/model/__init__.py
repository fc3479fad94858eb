"""
Named encoding of the three-valued truth domain.
"""
from .truth_value import TruthValue

__all__ = ['TruthValue']
