import logging
from typing import List, Optional

import numpy as np
import sympy as sp

from polyinterp.algorithms.difference_tables import ArrayLike, divided_differences
from polyinterp.core.methods import InterpolationMethod
from polyinterp.core.symbol_registry import SymbolRegistry
from polyinterp.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

UNSUPPORTED_EXPRESSION = ProcessingConstants.UNSUPPORTED_EXPRESSION


def format_number(value: float) -> str:
    """Shortest round-trippable literal for a float, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return "0" if text == "-0" else text


def _factor(symbol: str, node: float) -> str:
    if node < 0:
        return f"({symbol} + {format_number(-node)})"
    return f"({symbol} - {format_number(node)})"


def _join_term(coefficient: float, factors: List[str]) -> str:
    return " * ".join([format_number(coefficient)] + factors)


def lagrange_expression(x_array: ArrayLike, y_array: ArrayLike,
                        symbol: str = ProcessingConstants.DEFAULT_SYMBOL) -> str:
    """
    Render the Lagrange polynomial as a sum of products.

    Each term is the folded coefficient y_i / prod_{j != i}(x_i - x_j) followed
    by the factors (x - x_j), so substituting a value for the symbol gives the
    interpolated value.
    """
    x = np.asarray(x_array, dtype=np.float64)
    y = np.asarray(y_array, dtype=np.float64)
    terms = []
    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(len(x)):
            denominator = 1.0
            factors = []
            for j in range(len(x)):
                if i != j:
                    denominator *= x[i] - x[j]
                    factors.append(_factor(symbol, x[j]))
            terms.append(_join_term(y[i] / denominator, factors))
    logger.debug("Rendered Lagrange expression with %d terms", len(terms))
    return " + ".join(terms)


def newton_separated_expression(x_array: ArrayLike, y_array: ArrayLike,
                                symbol: str = ProcessingConstants.DEFAULT_SYMBOL,
                                divided: Optional[np.ndarray] = None) -> str:
    """Render the Newton divided-difference polynomial D0 + D1 * (x - x0) + ..."""
    x = np.asarray(x_array, dtype=np.float64)
    coefficients = divided_differences(x, y_array) if divided is None else divided
    terms = []
    factors = []
    for i, coefficient in enumerate(coefficients):
        if i > 0:
            factors.append(_factor(symbol, x[i - 1]))
        terms.append(_join_term(coefficient, list(factors)))
    logger.debug("Rendered Newton expression with %d terms", len(terms))
    return " + ".join(terms)


def render_expression(method: InterpolationMethod, x_array: ArrayLike, y_array: ArrayLike,
                      symbol: str = ProcessingConstants.DEFAULT_SYMBOL,
                      divided: Optional[np.ndarray] = None) -> str:
    """
    Symbolic form of the interpolating polynomial for one method.

    Only the Lagrange and Newton divided-difference forms have a renderer.
    The finite-difference and central-difference methods return
    UNSUPPORTED_EXPRESSION rather than raising.
    """
    if method is InterpolationMethod.LAGRANGE:
        return lagrange_expression(x_array, y_array, symbol)
    if method is InterpolationMethod.NEWTON_SEPARATED:
        return newton_separated_expression(x_array, y_array, symbol, divided)
    logger.warning("No symbolic form available for %s interpolation, returning '%s'",
                   getattr(method, 'display_name', method), UNSUPPORTED_EXPRESSION)
    return UNSUPPORTED_EXPRESSION


def to_sympy(expression: str, symbol: str = ProcessingConstants.DEFAULT_SYMBOL) -> Optional[sp.Expr]:
    """Parse a rendered expression back into SymPy, None for the unsupported marker."""
    if expression == UNSUPPORTED_EXPRESSION:
        logger.debug("Expression is the unsupported marker, nothing to parse")
        return None
    variable = SymbolRegistry.get(symbol)
    try:
        return sp.sympify(expression, locals={symbol: variable})
    except (sp.SympifyError, SyntaxError, TypeError) as e:
        logger.error("Failed to parse expression '%s': %s", expression, e)
        raise ValueError(f"Invalid polynomial expression: {expression}") from e
