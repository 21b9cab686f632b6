"""
Numerical algorithms behind the interpolation engine.

This module provides the forward and divided difference tables, the five
interpolation formula builders, the symbolic expression renderer and the
sampling helper used to produce synthetic node sets.
"""

from .difference_tables import difference_table, divided_differences
from .formulas import build_evaluator, evaluate_many, lagrange, newton_separated, newton_finite, stirling, bessel
from .expression_renderer import render_expression, to_sympy, UNSUPPORTED_EXPRESSION
from .sampling import generate_func_values

__all__ = [
    "difference_table",
    "divided_differences",
    "build_evaluator",
    "evaluate_many",
    "lagrange",
    "newton_separated",
    "newton_finite",
    "stirling",
    "bessel",
    "render_expression",
    "to_sympy",
    "UNSUPPORTED_EXPRESSION",
    "generate_func_values"
]
