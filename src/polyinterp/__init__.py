"""
polyinterp - Classical polynomial interpolation with symbolic output.

This library builds Lagrange, Newton (divided and finite differences),
Stirling and Bessel interpolants from discrete (x, y) samples, evaluates them
at arbitrary query points, renders the Lagrange and Newton forms as algebraic
expressions and exposes the forward-difference table.

Key Features:
- Five interpolation formulas behind one immutable engine
- Forward and divided difference tables
- Symbolic expressions with SymPy round-tripping
- Node ingestion from text, CSV and Excel files
- YAML job files with optional input validation
- Matplotlib plots of interpolants and difference tables

Main Components:
- Core: InterpolationEngine, method enumeration and exceptions
- Algorithms: Difference tables, formulas, expression rendering, sampling
- Parsing: YAML configuration, file ingestion and validation
- Visualization: Interpolant and difference table plotting
- Data: Processing constants
"""

try:
    from ._version import version as __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("polyinterp")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.engine import InterpolationEngine
from .core.methods import InterpolationMethod, method_to_string
from .core.exceptions import InterpolationError, InvalidInputError, UnknownMethodError

# Algorithms
from .algorithms.difference_tables import difference_table, divided_differences
from .algorithms.sampling import generate_func_values
from .algorithms.expression_renderer import UNSUPPORTED_EXPRESSION

# Main API functions
from .parsing.api import (
    create_engine,
    create_engine_from_yaml,
    evaluate_from_yaml,
    get_supported_methods,
    validate_yaml_file
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'InterpolationEngine',
    'InterpolationMethod',
    'method_to_string',
    'InterpolationError',
    'InvalidInputError',
    'UnknownMethodError',

    # Algorithms
    'difference_table',
    'divided_differences',
    'generate_func_values',
    'UNSUPPORTED_EXPRESSION',

    # Main API
    'create_engine',
    'create_engine_from_yaml',
    'evaluate_from_yaml',
    'get_supported_methods',
    'validate_yaml_file'
]
