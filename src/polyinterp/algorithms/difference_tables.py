import logging
from typing import Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


def difference_table(y_array: ArrayLike) -> np.ndarray:
    """
    Build the forward-difference pyramid of the node values.

    The table is position-major: entry [i, 0] is y[i] and entry [i, k] is the
    k-th order forward difference starting at position i, so
    table[i, k] = table[i + 1, k - 1] - table[i, k - 1].
    Only entries with i + k < n are meaningful, everything else is 0.
    Args:
        y_array: Node values in construction order
    Returns:
        n x n float64 array
    """
    y = np.asarray(y_array, dtype=np.float64)
    n = len(y)
    table = np.zeros((n, n), dtype=np.float64)
    if n == 0:
        logger.debug("Empty value array, returning 0x0 difference table")
        return table
    table[:, 0] = y
    with np.errstate(invalid='ignore', over='ignore'):
        for k in range(1, n):
            # column k has n - k meaningful rows
            table[:n - k, k] = table[1:n - k + 1, k - 1] - table[:n - k, k - 1]
    logger.debug("Built %dx%d forward difference table", n, n)
    return table


def divided_differences(x_array: ArrayLike, y_array: ArrayLike) -> np.ndarray:
    """
    Newton divided-difference coefficients anchored at node 0.

    Uses the in-place recurrence D[j] = (D[j] - D[j-1]) / (x[j] - x[j-k]),
    sweeping j downwards for each order k. Coinciding x-values yield inf/nan
    coefficients instead of an exception.
    """
    x = np.asarray(x_array, dtype=np.float64)
    coefficients = np.array(y_array, dtype=np.float64)
    n = len(coefficients)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for k in range(1, n):
            for j in range(n - 1, k - 1, -1):
                coefficients[j] = (coefficients[j] - coefficients[j - 1]) / (x[j] - x[j - k])
    if n and not np.all(np.isfinite(coefficients)):
        logger.debug("Divided differences contain non-finite values: %s", coefficients.tolist())
    logger.debug("Computed %d divided difference coefficients", n)
    return coefficients
