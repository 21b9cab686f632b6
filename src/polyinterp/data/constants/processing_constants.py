from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the interpolation library."""
    # Tolerance and precision
    FLOATING_POINT_TOLERANCE: Final[float] = 1e-12
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    # Relative tolerance for equal node spacing
    SPACING_TOLERANCE: Final[float] = 1e-6
    # Minimum node counts per formula family
    MIN_DATA_POINTS: Final[int] = 2
    MIN_CENTRAL_DIFFERENCE_POINTS: Final[int] = 4
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 1000
    X_PADDING_FACTOR: Final[float] = 0.05
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0
    # Symbolic rendering
    UNSUPPORTED_EXPRESSION: Final[str] = "Unsupported"
    DEFAULT_SYMBOL: Final[str] = "x"


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INSUFFICIENT_DATA_POINTS: Final[str] = "Insufficient data points ({count}) for {method}, minimum required: {min_points}"
    LENGTH_MISMATCH: Final[str] = "Array length mismatch: x({x_len}) != y({y_len})"
    NON_FINITE_VALUES: Final[str] = "{name} contains non-finite values at indices {indices}"
    DUPLICATE_NODES: Final[str] = "Duplicate x-values {values} make the {method} formula undefined"
    NON_UNIFORM_SPACING: Final[str] = "{method} interpolation assumes equally spaced nodes, got steps in [{min_step}, {max_step}]"
    UNKNOWN_METHOD: Final[str] = "Unknown interpolation method: {method}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
