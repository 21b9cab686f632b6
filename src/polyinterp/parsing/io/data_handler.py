import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Union

import numpy as np
import pandas as pd

from polyinterp.parsing.config.yaml_keys import FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY
from polyinterp.data.constants import ProcessingConstants, FileConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeFileData:
    """Contents of a plain node file: the query point and the node arrays."""
    query_point: float
    x: np.ndarray
    y: np.ndarray


def parse_node_file(file_path: Union[str, Path]) -> NodeFileData:
    """
    Read a plain whitespace-separated node file.

    The first non-empty line holds the query point, every following
    non-empty line one node as 'x y'.
    Args:
        file_path: Path to the node file
    Returns:
        NodeFileData with the query point and float64 node arrays
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the query point or a node line cannot be parsed
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Node file not found: {file_path}")
    logger.debug("Parsing node file: %s", file_path)
    query_point = None
    x_values, y_values = [], []
    with open(file_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
        for line_number, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            expected = 1 if query_point is None else 2
            if len(fields) != expected:
                raise ValueError(f"Expected {expected} value(s) in {file_path} at line {line_number}, "
                                 f"got {len(fields)}: '{line.strip()}'")
            try:
                values = [float(field) for field in fields]
            except ValueError as e:
                raise ValueError(f"Invalid number in {file_path} at line {line_number}: "
                                 f"'{line.strip()}'") from e
            if query_point is None:
                query_point = values[0]
            else:
                x_values.append(values[0])
                y_values.append(values[1])
    if query_point is None:
        raise ValueError(f"Node file is empty: {file_path}")
    logger.info("Loaded %d nodes and query point %s from %s", len(x_values), query_point, file_path)
    return NodeFileData(query_point=query_point,
                        x=np.asarray(x_values, dtype=np.float64),
                        y=np.asarray(y_values, dtype=np.float64))


def load_node_data(file_config: Dict[str, Union[str, int]],
                   base_dir: Union[str, Path, None] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Read node columns from a CSV, Excel or whitespace-separated text file.
    Args:
        file_config: Dictionary with keys:
            - file_path: Path to the data file, relative paths resolved against base_dir
            - x_column: Column name or index of the node abscissae
            - y_column: Column name or index of the node values
        base_dir: Directory for relative file paths
    Returns:
        Tuple of (x_array, y_array); row order is kept as in the file
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: For missing keys, unsupported or oversized files and unusable columns
    """
    _validate_file_config(file_config)
    file_path = Path(file_config[FILE_PATH_KEY])
    if base_dir is not None and not file_path.is_absolute():
        file_path = Path(base_dir) / file_path
    x_col = file_config[X_COLUMN_KEY]
    y_col = file_config[Y_COLUMN_KEY]
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")
    extension = file_path.suffix.lower()
    if extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    size_mb = file_path.stat().st_size / (1024 * 1024)
    if size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"File size ({size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    logger.debug("Reading node columns %r/%r from %s", x_col, y_col, file_path)
    try:
        df = _read_table(file_path, extension, x_col, y_col)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in file: {file_path}") from e
    except (OSError, ImportError, pd.errors.ParserError) as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    x_array = _numeric_column(df, x_col, "x", file_path)
    y_array = _numeric_column(df, y_col, "y", file_path)
    x_array, y_array = _drop_missing_rows(x_array, y_array, file_path)
    logger.info("Loaded %d nodes from %s", len(x_array), file_path)
    return x_array, y_array


def _validate_file_config(file_config: Dict) -> None:
    required_keys = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY}
    missing_keys = required_keys - set(file_config.keys())
    if missing_keys:
        raise ValueError(f"Missing required file configuration keys: {sorted(missing_keys)}")
    if not file_config[FILE_PATH_KEY]:
        raise ValueError("File path cannot be empty")


def _read_table(file_path: Path, extension: str, x_col: Union[str, int],
                y_col: Union[str, int]) -> pd.DataFrame:
    """Columns given by name imply a header row, integer indices imply none."""
    header = 0 if isinstance(x_col, str) or isinstance(y_col, str) else None
    if extension == '.xlsx':
        return pd.read_excel(file_path, header=header, na_values=FileConstants.NA_VALUES)
    if extension == '.csv':
        return pd.read_csv(file_path, header=header, na_values=FileConstants.NA_VALUES,
                           encoding=FileConstants.DEFAULT_ENCODING)
    return pd.read_csv(file_path, sep=r'\s+', header=header, na_values=FileConstants.NA_VALUES,
                       encoding=FileConstants.DEFAULT_ENCODING, engine='python')


def _numeric_column(df: pd.DataFrame, column: Union[str, int], label: str, file_path: Path) -> np.ndarray:
    if isinstance(column, str):
        if column not in df.columns:
            available = ', '.join(df.columns.astype(str))
            raise ValueError(f"{label} column '{column}' not found in file {file_path}. "
                             f"Available columns: {available}")
        series = df[column]
    else:
        if not 0 <= column < len(df.columns):
            raise ValueError(f"{label} column index {column} out of bounds "
                             f"(file has {len(df.columns)} columns)")
        series = df.iloc[:, column]
    return np.asarray(pd.to_numeric(series, errors='coerce'), dtype=np.float64)


def _drop_missing_rows(x_array: np.ndarray, y_array: np.ndarray,
                       file_path: Path) -> Tuple[np.ndarray, np.ndarray]:
    missing = np.isnan(x_array) | np.isnan(y_array)
    if not np.any(missing):
        return x_array, y_array
    percentage = np.count_nonzero(missing) / len(missing) * 100
    if percentage > ProcessingConstants.MAX_MISSING_VALUE_PERCENTAGE:
        raise ValueError(f"Too many missing values ({percentage:.1f}%) in file: {file_path}. "
                         "Please clean the data or check file format.")
    logger.warning("Dropping %d rows (%.1f%%) with missing values in %s",
                   np.count_nonzero(missing), percentage, file_path)
    return x_array[~missing], y_array[~missing]
