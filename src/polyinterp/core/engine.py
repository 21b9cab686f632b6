import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np
import sympy as sp

from polyinterp.algorithms.difference_tables import difference_table, divided_differences
from polyinterp.algorithms.expression_renderer import render_expression, to_sympy
from polyinterp.algorithms.formulas import build_evaluator, evaluate_many
from polyinterp.core.methods import InterpolationMethod
from polyinterp.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class InterpolationEngine:
    """
    Interpolation calculator over one fixed node set and one method.

    The node arrays and both derived tables (forward differences and
    divided differences) are computed at construction and stored read-only,
    so an instance never changes after __init__ and can be read from several
    threads. No input validation happens here: duplicate x-values or too few
    nodes surface as nan/inf results, mismatched lengths may raise IndexError.
    Use polyinterp.parsing.api.create_engine for a validated construction.
    """

    def __init__(self, method: Union[InterpolationMethod, str],
                 x: Sequence[float], y: Sequence[float]) -> None:
        self._method = InterpolationMethod.from_string(method)
        self._x = _frozen(np.array(x, dtype=np.float64))
        self._y = _frozen(np.array(y, dtype=np.float64))
        self._table = _frozen(difference_table(self._y))
        self._divided = _frozen(divided_differences(self._x, self._y))
        self._evaluator = build_evaluator(self._method, self._x, self._y,
                                          table=self._table, divided=self._divided)
        logger.info("Created %s interpolation engine over %d nodes",
                    self._method.display_name, len(self._x))

    # --- Properties ---
    @property
    def method(self) -> InterpolationMethod:
        return self._method

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def size(self) -> int:
        return len(self._x)

    @property
    def supports_expression(self) -> bool:
        """False for the methods whose to_latex() returns the unsupported marker."""
        return self._method.has_symbolic_form

    # --- Public API ---
    def get_nodes(self) -> List[Tuple[float, float]]:
        """Nodes as (x, y) pairs in construction order."""
        return [(float(a), float(b)) for a, b in zip(self._x, self._y)]

    def difference_table(self) -> np.ndarray:
        """Copy of the position-major forward-difference table."""
        return self._table.copy()

    def divided_differences(self) -> np.ndarray:
        """Copy of the Newton divided-difference coefficients."""
        return self._divided.copy()

    def interpolate(self) -> Callable[[float], float]:
        """Evaluator of the configured formula."""
        return self._evaluator

    def evaluate(self, v: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Interpolated value at one query point, or elementwise over an array."""
        if np.ndim(v) == 0:
            return self._evaluator(v)
        return evaluate_many(self._evaluator, v)

    def __call__(self, v: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        return self.evaluate(v)

    def to_latex(self, symbol: str = ProcessingConstants.DEFAULT_SYMBOL) -> str:
        """Symbolic expression of the interpolant, or the unsupported marker."""
        return render_expression(self._method, self._x, self._y, symbol, divided=self._divided)

    to_expression = to_latex

    def to_sympy(self, symbol: str = ProcessingConstants.DEFAULT_SYMBOL) -> Optional[sp.Expr]:
        """The rendered expression parsed into SymPy, None where no symbolic form exists."""
        return to_sympy(self.to_latex(symbol), symbol)

    def __repr__(self) -> str:
        return f"InterpolationEngine(method={self._method.display_name!r}, nodes={len(self._x)})"
