import logging
from typing import Callable, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def generate_func_values(func: Callable[[float], float], start: float, end: float,
                         nodes: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a reference function at evenly spaced nodes over [start, end].
    Args:
        func: Real function to sample
        start: First node
        end: Last node
        nodes: Number of nodes, at least 2
    Returns:
        Tuple of (x_array, y_array) with x[i] = start + i * (end - start) / (nodes - 1)
    Raises:
        ZeroDivisionError: If nodes == 1
    """
    step = (end - start) / (nodes - 1)
    x_array = np.array([start + step * i for i in range(nodes)], dtype=np.float64)
    y_array = np.array([func(float(value)) for value in x_array], dtype=np.float64)
    logger.debug("Sampled %d nodes over [%s, %s] with step %s", nodes, start, end, step)
    return x_array, y_array
