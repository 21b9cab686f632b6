"""Shared pytest fixtures for polyinterp tests."""
import math

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from polyinterp.algorithms.sampling import generate_func_values


@pytest.fixture
def cubic_nodes():
    """Nodes of y = x^3 + 1 at x = 0..3."""
    return np.array([0.0, 1.0, 2.0, 3.0]), np.array([1.0, 2.0, 9.0, 28.0])


@pytest.fixture
def sine_nodes():
    """Five equally spaced samples of sin on [0, pi]."""
    return generate_func_values(math.sin, 0.0, math.pi, 5)


@pytest.fixture
def irregular_nodes():
    """Unequally spaced nodes for the divided-difference formulas."""
    return np.array([-1.5, 0.0, 0.4, 2.0, 3.5]), np.array([2.0, -1.0, 0.5, 4.0, -3.0])


@pytest.fixture
def node_file(tmp_path):
    """Plain node file: query point line followed by 'x y' lines."""
    path = tmp_path / "points.txt"
    path.write_text("1.5\n0 1\n1 2\n2 9\n3 28\n")
    return path


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file in tmp_path and return its path."""
    def _write(content: str, name: str = "job.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
