import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from polyinterp.algorithms.formulas import evaluate_many
from polyinterp.core.engine import InterpolationEngine
from polyinterp.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class InterpolationVisualizer:
    """Renders interpolation engines and their difference tables to image files."""

    METHOD_COLORS = {
        'lagrange': '#1f77b4',
        'newton_separated': '#ff7f0e',
        'newton_finite': '#2ca02c',
        'stirling': '#d62728',
        'bessel': '#9467bd',
    }

    # --- Constructor ---
    def __init__(self, num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS,
                 padding_factor: float = ProcessingConstants.X_PADDING_FACTOR) -> None:
        self.num_points = num_points
        self.padding_factor = padding_factor
        self.setup_style()
        logger.debug("InterpolationVisualizer initialized with %d points per curve", num_points)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.family': 'sans-serif',
            'font.size': 9,
            'axes.titlesize': 11,
            'axes.spines.top': False,
            'axes.spines.right': False,
            'axes.grid': True,
            'grid.alpha': 0.25,
            'grid.linestyle': ':',
            'lines.linewidth': 1.6,
            'legend.frameon': False,
            'savefig.dpi': 150,
            'savefig.facecolor': 'white',
        })

    # --- Public API Methods ---
    def sample_range(self, engines: Sequence[InterpolationEngine],
                     query_points: Iterable[float] = ()) -> np.ndarray:
        """Evenly spaced points covering every node and query point, with padding."""
        values = np.concatenate([engine.x for engine in engines] +
                                [np.asarray(list(query_points), dtype=np.float64)])
        lower, upper = float(np.min(values)), float(np.max(values))
        padding = (upper - lower) * self.padding_factor
        return np.linspace(lower - padding, upper + padding, self.num_points)

    def plot(self, engines: Union[InterpolationEngine, Sequence[InterpolationEngine]],
             output_path: Union[str, Path],
             query_points: Iterable[float] = (),
             reference: Optional[Callable[[float], float]] = None,
             title: Optional[str] = None) -> Path:
        """
        Plot interpolants, their nodes and optional query points to an image file.
        Args:
            engines: One engine or several engines to compare
            output_path: Target file, the suffix selects the format
            query_points: Points to mark on every interpolant
            reference: Function the nodes were sampled from, drawn dashed
            title: Figure title, defaults to the method names
        Returns:
            Path of the saved figure
        """
        if isinstance(engines, InterpolationEngine):
            engines = [engines]
        if not engines:
            raise ValueError("At least one interpolation engine is required for plotting")
        query_points = [float(q) for q in query_points]
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        samples = self.sample_range(engines, query_points)
        logger.info("Plotting %d interpolant(s) to %s", len(engines), output_path)
        fig, ax = plt.subplots(figsize=(10, 6))
        try:
            for engine in engines:
                color = self.METHOD_COLORS.get(engine.method.value, '#8c564b')
                label = engine.method.display_name
                ax.plot(samples, evaluate_many(engine.interpolate(), samples),
                        color=color, linewidth=1.8, label=label)
                if query_points:
                    ax.scatter(query_points, evaluate_many(engine.interpolate(), query_points),
                               color=color, marker='x', s=60, zorder=4, label=f"{label} query")
            if reference is not None:
                ax.plot(samples, [reference(float(v)) for v in samples],
                        color='#7f7f7f', linestyle='--', linewidth=1.2, label='Reference')
            nodes = engines[0]
            ax.scatter(nodes.x, nodes.y, color='black', s=36, zorder=5, label='Nodes')
            ax.set_title(title or " vs ".join(e.method.display_name for e in engines),
                         fontweight='bold')
            ax.set_xlabel("x")
            ax.set_ylabel("y")
            ax.legend(loc='best', framealpha=0.9)
            fig.savefig(str(output_path), bbox_inches="tight")
            logger.info("Interpolation plot saved as %s", output_path)
        finally:
            plt.close(fig)
        return output_path

    def plot_difference_table(self, engine: InterpolationEngine, output_path: Union[str, Path],
                              precision: int = 6) -> Path:
        """Render the forward-difference table as a matplotlib table figure."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        table = engine.difference_table()
        n = engine.size
        cells = [[f"{engine.x[i]:.{precision}g}"] +
                 [f"{table[i, k]:.{precision}g}" if i + k < n else "" for k in range(n)]
                 for i in range(n)]
        columns = ["x", "y"] + [f"Δ^{k}y" for k in range(1, n)]
        fig, ax = plt.subplots(figsize=(max(4, 1.3 * (n + 1)), max(2, 0.4 * (n + 2))))
        try:
            ax.axis('off')
            rendered = ax.table(cellText=cells, colLabels=columns, loc='center', cellLoc='center')
            rendered.auto_set_font_size(False)
            rendered.set_fontsize(9)
            ax.set_title(f"Difference table ({engine.method.display_name})", fontweight='bold')
            fig.savefig(str(output_path), bbox_inches="tight")
            logger.info("Difference table saved as %s", output_path)
        finally:
            plt.close(fig)
        return output_path
