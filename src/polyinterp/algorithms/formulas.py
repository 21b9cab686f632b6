"""
Evaluator builders for the five classical interpolation formulas.

Every builder is a pure function of the node arrays and returns a closure
mapping a query point to the interpolated value. Inputs are not validated:
duplicate x-values, unequal spacing or too few nodes produce inf/nan or
meaningless values instead of exceptions.
"""
import logging
from math import factorial
from typing import Callable, Iterable, Optional

import numpy as np

from polyinterp.algorithms.difference_tables import ArrayLike, difference_table, divided_differences
from polyinterp.core.exceptions import UnknownMethodError
from polyinterp.core.methods import InterpolationMethod
from polyinterp.data.constants import ErrorMessages

logger = logging.getLogger(__name__)

Evaluator = Callable[[float], float]


def _as_nodes(x_array: ArrayLike, y_array: ArrayLike):
    return np.array(x_array, dtype=np.float64), np.array(y_array, dtype=np.float64)


def _table_entry(table: np.ndarray, rows: Iterable[int], order: int) -> Optional[float]:
    """Mean of the difference-table entries of one order at the given rows.

    Rows outside the meaningful triangle (i < 0 or i + order >= n) are skipped;
    None means no requested entry exists.
    """
    n = table.shape[0]
    values = [table[i, order] for i in rows if 0 <= i and i + order < n]
    if not values:
        return None
    return sum(values) / len(values)


def lagrange(x_array: ArrayLike, y_array: ArrayLike) -> Evaluator:
    """Lagrange form: sum of y_i times the i-th basis polynomial."""
    x, y = _as_nodes(x_array, y_array)
    n = len(x)
    logger.debug("Building Lagrange evaluator over %d nodes", n)

    def evaluate(v: float) -> float:
        v = float(v)
        if n == 0:
            return float('nan')
        total = 0.0
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            for i in range(n):
                basis = 1.0
                for j in range(n):
                    if i != j:
                        basis *= (v - x[j]) / (x[i] - x[j])
                total += y[i] * basis
        return float(total)

    return evaluate


def newton_separated(x_array: ArrayLike, y_array: ArrayLike,
                     divided: Optional[np.ndarray] = None) -> Evaluator:
    """Newton form over divided differences, evaluated with a running product."""
    x, y = _as_nodes(x_array, y_array)
    coefficients = divided_differences(x, y) if divided is None else np.array(divided, dtype=np.float64)
    n = len(x)
    logger.debug("Building Newton (divided differences) evaluator over %d nodes", n)

    def evaluate(v: float) -> float:
        v = float(v)
        if n == 0:
            return float('nan')
        total = coefficients[0]
        product = 1.0
        with np.errstate(invalid='ignore', over='ignore'):
            for i in range(1, n):
                product *= v - x[i - 1]
                total += coefficients[i] * product
        return float(total)

    return evaluate


def newton_finite(x_array: ArrayLike, y_array: ArrayLike,
                  table: Optional[np.ndarray] = None) -> Evaluator:
    """
    Newton forward-difference formula for equally spaced nodes.

    f(v) = y_0 + sum_k prod_{i<k}(v - x_i) * delta^k y_0 / (k! h^k), with
    h = x[1] - x[0].
    """
    x, y = _as_nodes(x_array, y_array)
    table = difference_table(y) if table is None else table
    n = len(x) - 1
    step = x[1] - x[0] if n >= 1 else 1.0
    logger.debug("Building Newton (finite differences) evaluator: %d nodes, h=%s", n + 1, step)

    def evaluate(v: float) -> float:
        v = float(v)
        if n < 0:
            return float('nan')
        result = table[0, 0]
        product = 1.0
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            for k in range(1, n + 1):
                product *= v - x[k - 1]
                result += product * table[0, k] / (factorial(k) * step ** k)
        return float(result)

    return evaluate


def stirling(x_array: ArrayLike, y_array: ArrayLike,
             table: Optional[np.ndarray] = None) -> Evaluator:
    """
    Stirling central-difference formula around x[center], center = (size - 1) // 2.

    Odd orders average the two differences flanking the center row, even
    orders take the single central difference. The running coefficient is
    t * prod(t^2 - m^2) / k! for odd k and t^2 * prod(t^2 - m^2) / k! for even
    k, which is the value of the usual t^2/2 recursion without its division
    by t. When only one of an odd pair lies inside the table it is used alone.
    """
    x, y = _as_nodes(x_array, y_array)
    table = difference_table(y) if table is None else table
    n = len(x) - 1
    if n < 1:
        logger.debug("Stirling evaluator over %d node(s) degenerates to a constant", n + 1)
        return lambda v: float(y[0]) if len(y) else float('nan')
    center = n // 2
    origin = x[center]
    step = x[center + 1] - x[center]
    first = _table_entry(table, (center - 1, center), 1) or 0.0
    second = _table_entry(table, (center - 1,), 2) or 0.0
    corrections = []
    for k in range(3, n + 1):
        m = k // 2
        rows = (center - m - 1, center - m) if k % 2 else (center - m,)
        entry = _table_entry(table, rows, k)
        if entry is None:
            break
        corrections.append(entry)
    logger.debug("Building Stirling evaluator: %d nodes, center=%d, h=%s, %d correction orders",
                 n + 1, center, step, len(corrections))

    def evaluate(v: float) -> float:
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            t = (float(v) - origin) / step
            result = table[center, 0] + t * first + t * t / 2 * second
            central = 1.0
            for k, entry in enumerate(corrections, start=3):
                if k % 2:
                    m = k // 2
                    central *= t * t - m * m
                    term = t * central / factorial(k)
                else:
                    term = t * t * central / factorial(k)
                result += term * entry
        return float(result)

    return evaluate


def bessel(x_array: ArrayLike, y_array: ArrayLike,
           table: Optional[np.ndarray] = None) -> Evaluator:
    """
    Bessel central-difference formula anchored at the midpoint of x[center], x[center + 1].

    Even orders average two differences, odd orders take one. The running
    coefficient is prod_{j=1-m}^{m}(t - j) / k! for even k = 2m and the same
    product times (t - 1/2) for odd k, i.e. the usual t(t-1)/2 recursion
    without its division by (t - 1/2).
    """
    x, y = _as_nodes(x_array, y_array)
    table = difference_table(y) if table is None else table
    n = len(x) - 1
    if n < 1:
        logger.debug("Bessel evaluator over %d node(s) degenerates to a constant", n + 1)
        return lambda v: float(y[0]) if len(y) else float('nan')
    center = n // 2
    origin = x[center]
    step = x[center + 1] - x[center]
    midpoint = (table[center, 0] + table[center + 1, 0]) / 2
    first = _table_entry(table, (center,), 1) or 0.0
    second = _table_entry(table, (center - 1, center), 2) or 0.0
    corrections = []
    for k in range(3, n + 1):
        m = k // 2
        rows = (center - m,) if k % 2 else (center - m, center - m + 1)
        entry = _table_entry(table, rows, k)
        if entry is None:
            break
        corrections.append(entry)
    logger.debug("Building Bessel evaluator: %d nodes, center=%d, h=%s, %d correction orders",
                 n + 1, center, step, len(corrections))

    def evaluate(v: float) -> float:
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            t = (float(v) - origin) / step
            symmetric = t * (t - 1)
            result = midpoint + (t - 0.5) * first + symmetric / 2 * second
            for k, entry in enumerate(corrections, start=3):
                m = k // 2
                if k % 2:
                    term = (t - 0.5) * symmetric / factorial(k)
                else:
                    symmetric *= (t + m - 1) * (t - m)
                    term = symmetric / factorial(k)
                result += term * entry
        return float(result)

    return evaluate


_BUILDERS = {
    InterpolationMethod.LAGRANGE: lambda x, y, table, divided: lagrange(x, y),
    InterpolationMethod.NEWTON_SEPARATED: lambda x, y, table, divided: newton_separated(x, y, divided),
    InterpolationMethod.NEWTON_FINITE: lambda x, y, table, divided: newton_finite(x, y, table),
    InterpolationMethod.STIRLING: lambda x, y, table, divided: stirling(x, y, table),
    InterpolationMethod.BESSEL: lambda x, y, table, divided: bessel(x, y, table),
}


def build_evaluator(method: InterpolationMethod, x_array: ArrayLike, y_array: ArrayLike,
                    table: Optional[np.ndarray] = None,
                    divided: Optional[np.ndarray] = None) -> Evaluator:
    """
    Build the evaluator for one method.
    Args:
        method: Interpolation formula to use
        x_array: Node abscissae in construction order
        y_array: Node values
        table: Precomputed forward-difference table, built on demand if omitted
        divided: Precomputed divided differences, built on demand if omitted
    Returns:
        Callable mapping a query point to the interpolated value
    Raises:
        UnknownMethodError: If method is not an InterpolationMethod member
    """
    builder = _BUILDERS.get(method) if isinstance(method, InterpolationMethod) else None
    if builder is None:
        raise UnknownMethodError(ErrorMessages.UNKNOWN_METHOD.format(method=method))
    logger.debug("Dispatching evaluator construction to %s", method.display_name)
    return builder(x_array, y_array, table, divided)


def evaluate_many(evaluator: Evaluator, values) -> np.ndarray:
    """Apply an evaluator to every query point of an array, keeping its shape."""
    points = np.asarray(values, dtype=np.float64)
    results = np.fromiter((evaluator(v) for v in points.ravel()), dtype=np.float64, count=points.size)
    return results.reshape(points.shape)
