"""Input-contract checks for interpolation node sets."""

import logging
from typing import Sequence, Union

import numpy as np

from polyinterp.core.exceptions import InvalidInputError
from polyinterp.core.methods import InterpolationMethod
from polyinterp.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)

_MINIMUM_NODES = {
    InterpolationMethod.LAGRANGE: ProcessingConstants.MIN_DATA_POINTS,
    InterpolationMethod.NEWTON_SEPARATED: ProcessingConstants.MIN_DATA_POINTS,
    InterpolationMethod.NEWTON_FINITE: ProcessingConstants.MIN_DATA_POINTS,
    InterpolationMethod.STIRLING: ProcessingConstants.MIN_CENTRAL_DIFFERENCE_POINTS,
    InterpolationMethod.BESSEL: ProcessingConstants.MIN_CENTRAL_DIFFERENCE_POINTS,
}


def minimum_nodes(method: Union[InterpolationMethod, str]) -> int:
    """Smallest node count for which the method's formula is meaningful."""
    return _MINIMUM_NODES[InterpolationMethod.from_string(method)]


def is_strictly_increasing(x_array: Sequence[float]) -> bool:
    """True when every step between consecutive x-values is positive."""
    steps = np.diff(np.asarray(x_array, dtype=np.float64))
    return bool(np.all(steps > ProcessingConstants.MONOTONICITY_THRESHOLD))


def is_uniformly_spaced(x_array: Sequence[float],
                        tolerance: float = ProcessingConstants.SPACING_TOLERANCE) -> bool:
    """True when all steps equal the first one within a relative tolerance."""
    steps = np.diff(np.asarray(x_array, dtype=np.float64))
    if len(steps) < 2:
        return True
    return bool(np.allclose(steps, steps[0], rtol=tolerance, atol=ProcessingConstants.FLOATING_POINT_TOLERANCE))


def _non_finite_indices(array: np.ndarray) -> list:
    return np.flatnonzero(~np.isfinite(array)).tolist()


def validate_nodes(method: Union[InterpolationMethod, str], x_array: Sequence[float],
                   y_array: Sequence[float], strict_spacing: bool = False) -> None:
    """
    Check a node set against the input contract of an interpolation method.
    Args:
        method: Interpolation method the nodes are meant for
        x_array: Node abscissae in construction order
        y_array: Node values
        strict_spacing: Treat unequal spacing as an error for the finite and
            central difference formulas instead of logging a warning
    Raises:
        InvalidInputError: For empty or mismatched arrays, non-finite values,
            too few nodes, duplicate x-values or (strict) unequal spacing
        UnknownMethodError: If the method tag is not recognized
    """
    method = InterpolationMethod.from_string(method)
    x = np.asarray(x_array, dtype=np.float64)
    y = np.asarray(y_array, dtype=np.float64)
    logger.debug("Validating %d nodes for %s interpolation", len(x), method.display_name)
    if x.ndim != 1 or y.ndim != 1:
        raise InvalidInputError(f"Node arrays must be one-dimensional, got shapes {x.shape} and {y.shape}")
    if len(x) == 0 or len(y) == 0:
        raise InvalidInputError("Node arrays cannot be empty")
    if len(x) != len(y):
        raise InvalidInputError(ErrorMessages.LENGTH_MISMATCH.format(x_len=len(x), y_len=len(y)))
    for name, array in (("x", x), ("y", y)):
        bad = _non_finite_indices(array)
        if bad:
            raise InvalidInputError(ErrorMessages.NON_FINITE_VALUES.format(name=name, indices=bad))
    required = _MINIMUM_NODES[method]
    if len(x) < required:
        raise InvalidInputError(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
            count=len(x), method=method.display_name, min_points=required))
    unique, counts = np.unique(x, return_counts=True)
    if np.any(counts > 1):
        raise InvalidInputError(ErrorMessages.DUPLICATE_NODES.format(
            values=unique[counts > 1].tolist(), method=method.display_name))
    if not is_strictly_increasing(x):
        logger.warning("x-values are not strictly increasing; formulas use the given order as is")
    if method.assumes_equal_spacing and not is_uniformly_spaced(x):
        steps = np.diff(x)
        message = ErrorMessages.NON_UNIFORM_SPACING.format(
            method=method.display_name, min_step=float(np.min(steps)), max_step=float(np.max(steps)))
        if strict_spacing:
            raise InvalidInputError(message)
        logger.warning("%s; results may be inaccurate", message)
    logger.debug("Node validation passed for %s", method.display_name)
