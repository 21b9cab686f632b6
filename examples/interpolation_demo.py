"""Demonstration script for polynomial interpolation."""
import logging
import math
from pathlib import Path

from polyinterp import InterpolationEngine, InterpolationMethod, create_engine, generate_func_values
from polyinterp.parsing.api import create_engine_from_yaml, evaluate_from_yaml
from polyinterp.visualization import InterpolationVisualizer


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_methods(output_dir: Path):
    """Compare all formulas on samples of sin over one half period."""
    x, y = generate_func_values(math.sin, 0.0, math.pi, 7)
    engines = [create_engine(method, x, y, strict_spacing=True) for method in InterpolationMethod]
    query = 1.0
    print(f"\n{'=' * 80}")
    print(f"sin({query}) = {math.sin(query):.12f}")
    print(f"{'=' * 80}")
    for engine in engines:
        value = engine(query)
        print(f"{engine.method.display_name:<18} {value:.12f}  error={abs(value - math.sin(query)):.2e}")
        expression = engine.to_expression()
        print(f"  expression: {expression}")
    visualizer = InterpolationVisualizer()
    visualizer.plot(engines, output_dir / "sin_methods.png", query_points=[query], reference=math.sin,
                    title="Interpolating sin on [0, pi]")
    visualizer.plot_difference_table(engines[0], output_dir / "sin_difference_table.png")


def demonstrate_yaml_jobs(output_dir: Path):
    """Run the bundled YAML job and print the difference table."""
    job = Path(__file__).parent / "cubic_job.yaml"
    if not job.exists():
        raise FileNotFoundError(f"Example job file not found: {job}")
    print(f"\n{'=' * 80}")
    print(f"JOB: {job.name}")
    print(f"{'=' * 80}")
    for point, value in evaluate_from_yaml(job).items():
        print(f"f({point}) = {value}")
    engine = create_engine_from_yaml(job)
    print("Difference table:")
    print(engine.difference_table())
    print(f"Divided differences: {engine.divided_differences()}")
    InterpolationVisualizer().plot(engine, output_dir / "cubic_job.png", query_points=[1.5])


def demonstrate_unchecked_engine():
    """An engine built without validation reports bad nodes as non-finite values."""
    engine = InterpolationEngine("lagrange", [0.0, 1.0, 1.0], [1.0, 2.0, 3.0])
    print(f"\n{engine!r} with a duplicate node evaluates to {engine(0.5)} at 0.5")


if __name__ == "__main__":
    setup_logging()
    plots = Path(__file__).parent / "interpolation_plots"
    demonstrate_methods(plots)
    demonstrate_yaml_jobs(plots)
    demonstrate_unchecked_engine()
