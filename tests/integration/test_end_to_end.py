"""End-to-end runs from job files to interpolated values and artifacts."""
import math

import numpy as np
import pytest

import polyinterp
from polyinterp.visualization import InterpolationVisualizer


class TestEndToEnd:
    """Complete interpolation jobs through the public API."""
    @pytest.mark.parametrize("method", polyinterp.get_supported_methods())
    def test_node_file_job(self, method, write_yaml, node_file):
        """The cubic node file interpolates to 4.375 at its own query point for every method."""
        path = write_yaml(f"method: {method}\nnode_file: {node_file.name}\n")
        assert polyinterp.evaluate_from_yaml(path) == {1.5: pytest.approx(4.375)}

    def test_sampled_function_job(self, write_yaml):
        path = write_yaml(
            "method: bessel\n"
            "query_point: [0.3, 1.0, 2.9]\n"
            "function:\n"
            "  expression: exp(x) * cos(x)\n"
            "  start: 0\n"
            "  end: 3\n"
            "  nodes: 9\n"
            "validation:\n"
            "  strict_spacing: true\n")
        results = polyinterp.evaluate_from_yaml(path)
        for point, value in results.items():
            assert value == pytest.approx(math.exp(point) * math.cos(point), abs=1e-3)

    def test_csv_job_with_expression_and_plots(self, write_yaml, tmp_path):
        x = np.linspace(-2.0, 2.0, 6)
        rows = "\n".join(f"{a},{a ** 2 - 1}" for a in x)
        (tmp_path / "samples.csv").write_text("position,value\n" + rows + "\n")
        path = write_yaml(
            "method: newton_separated\n"
            "query_point: 0.5\n"
            "file:\n"
            "  file_path: samples.csv\n"
            "  x_column: position\n"
            "  y_column: value\n")
        engine = polyinterp.create_engine_from_yaml(path)
        assert engine(0.5) == pytest.approx(-0.75)
        expr = engine.to_sympy()
        symbol = next(iter(expr.free_symbols))
        assert float(expr.subs(symbol, 1.25)) == pytest.approx(1.25 ** 2 - 1)

        visualizer = InterpolationVisualizer(num_points=40)
        assert visualizer.plot(engine, tmp_path / "out" / "curve.png", query_points=[0.5]).exists()
        assert visualizer.plot_difference_table(engine, tmp_path / "out" / "table.png").exists()

    def test_validated_and_raw_engines_agree(self, sine_nodes):
        raw = polyinterp.InterpolationEngine("stirling", *sine_nodes)
        checked = polyinterp.create_engine("stirling", *sine_nodes, strict_spacing=True)
        for v in (0.1, 1.0, 2.2, 3.0):
            assert raw(v) == checked(v)

    def test_package_exports(self):
        assert polyinterp.UNSUPPORTED_EXPRESSION == "Unsupported"
        assert isinstance(polyinterp.__version__, str)
        np.testing.assert_allclose(polyinterp.difference_table([1.0, 4.0, 9.0])[:, 1], [3.0, 5.0, 0.0])
