import math

import numpy as np
import pytest

from polyinterp.algorithms.sampling import generate_func_values


class TestGenerateFuncValues:
    """Test cases for sampling a reference function."""
    def test_sine_on_half_period(self):
        x, y = generate_func_values(math.sin, 0.0, math.pi, 5)
        np.testing.assert_allclose(x, [0.0, math.pi / 4, math.pi / 2, 3 * math.pi / 4, math.pi])
        np.testing.assert_allclose(y, [0.0, math.sqrt(0.5), 1.0, math.sqrt(0.5), 0.0], atol=1e-12)

    def test_returns_float64_arrays(self):
        x, y = generate_func_values(lambda v: v * v, 1, 3, 3)
        assert x.dtype == np.float64 and y.dtype == np.float64
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(y, [1.0, 4.0, 9.0])

    def test_reversed_interval(self):
        """start > end gives decreasing nodes."""
        x, _ = generate_func_values(math.exp, 1.0, 0.0, 3)
        np.testing.assert_allclose(x, [1.0, 0.5, 0.0])

    def test_single_node_divides_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            generate_func_values(math.sin, 0.0, 1.0, 1)
