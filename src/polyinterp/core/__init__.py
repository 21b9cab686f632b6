"""
Core data structures of the interpolation engine.

This module contains the method enumeration, the exception hierarchy, the
symbol registry used for symbolic output and the InterpolationEngine facade
that ties the algorithms together.
"""

from .exceptions import InterpolationError, InvalidInputError, UnknownMethodError
from .methods import InterpolationMethod, method_to_string
from .symbol_registry import SymbolRegistry
from .engine import InterpolationEngine

__all__ = [
    "InterpolationEngine",
    "InterpolationMethod",
    "method_to_string",
    "SymbolRegistry",
    "InterpolationError",
    "InvalidInputError",
    "UnknownMethodError"
]
