"""Unit tests for forward and divided difference tables."""

import numpy as np
import pytest
from polyinterp.algorithms.difference_tables import difference_table, divided_differences

class TestDifferenceTable:
    """Test cases for the forward-difference pyramid."""
    def test_cubic_table_values(self, cubic_nodes):
        """Test position-major layout on y = x^3 + 1."""
        _, y = cubic_nodes
        table = difference_table(y)
        expected = np.array([
            [1.0, 1.0, 6.0, 6.0],
            [2.0, 7.0, 12.0, 0.0],
            [9.0, 19.0, 0.0, 0.0],
            [28.0, 0.0, 0.0, 0.0],
        ])
        np.testing.assert_array_equal(table, expected)

    def test_first_column_is_input(self, sine_nodes):
        """Column 0 always equals the y-sequence exactly."""
        _, y = sine_nodes
        np.testing.assert_array_equal(difference_table(y)[:, 0], y)

    def test_recurrence_holds_inside_triangle(self, irregular_nodes):
        """Every meaningful entry is the difference of two lower-order entries."""
        _, y = irregular_nodes
        table = difference_table(y)
        n = len(y)
        for k in range(1, n):
            for i in range(n - k):
                assert table[i, k] == pytest.approx(table[i + 1, k - 1] - table[i, k - 1])

    def test_entries_outside_triangle_are_zero(self, irregular_nodes):
        """Entries with i + k >= n are defined as 0."""
        _, y = irregular_nodes
        table = difference_table(y)
        n = len(y)
        for i in range(n):
            for k in range(n):
                if i + k >= n:
                    assert table[i, k] == 0.0

    def test_single_value(self):
        """A size-1 table holds only the y value."""
        np.testing.assert_array_equal(difference_table([4.2]), np.array([[4.2]]))

    def test_constant_differences_of_polynomial(self):
        """The k-th differences of a degree-k polynomial are constant."""
        x = np.arange(6, dtype=float)
        y = 2 * x ** 2 - 3 * x + 1
        table = difference_table(y)
        np.testing.assert_allclose(table[:4, 2], 4.0)
        np.testing.assert_allclose(table[:3, 3], 0.0)

    def test_input_is_not_modified(self):
        """The table is a pure function of y."""
        y = [1.0, 4.0, 9.0]
        difference_table(y)
        assert y == [1.0, 4.0, 9.0]


class TestDividedDifferences:
    """Test cases for Newton divided-difference coefficients."""
    def test_cubic_coefficients(self, cubic_nodes):
        """Test coefficients of y = x^3 + 1 anchored at x = 0."""
        x, y = cubic_nodes
        np.testing.assert_allclose(divided_differences(x, y), [1.0, 1.0, 3.0, 1.0])

    def test_first_coefficient_is_first_value(self, irregular_nodes):
        """D[0] equals y[0] exactly."""
        x, y = irregular_nodes
        assert divided_differences(x, y)[0] == y[0]

    def test_leading_coefficient_of_polynomial(self, irregular_nodes):
        """The top-order coefficient is the leading polynomial coefficient."""
        x, _ = irregular_nodes
        y = 0.5 * x ** 4 - x + 2
        coefficients = divided_differences(x, y)
        assert coefficients[-1] == pytest.approx(0.5)

    def test_duplicate_x_propagates_non_finite(self):
        """Coinciding x-values produce inf/nan instead of raising."""
        coefficients = divided_differences([0.0, 1.0, 1.0], [1.0, 2.0, 3.0])
        assert not np.all(np.isfinite(coefficients))

    def test_inputs_are_not_modified(self):
        """The y input is copied before the in-place recurrence."""
        y = np.array([1.0, 2.0, 9.0])
        divided_differences(np.array([0.0, 1.0, 2.0]), y)
        np.testing.assert_array_equal(y, [1.0, 2.0, 9.0])
