import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import numpy as np
import sympy as sp
from ruamel.yaml import YAML, constructor, error

from polyinterp.algorithms.sampling import generate_func_values
from polyinterp.core.engine import InterpolationEngine
from polyinterp.core.methods import InterpolationMethod
from polyinterp.core.symbol_registry import SymbolRegistry
from polyinterp.data.constants import FileConstants, ProcessingConstants
from polyinterp.parsing.io.data_handler import load_node_data, parse_node_file
from polyinterp.parsing.validation.node_validator import validate_nodes
from polyinterp.parsing.config.yaml_keys import (
    METHOD_KEY, QUERY_POINT_KEY, NODES_KEY, X_KEY, Y_KEY, FILE_KEY, NODE_FILE_KEY,
    FUNCTION_KEY, EXPRESSION_KEY, START_KEY, END_KEY, NODE_COUNT_KEY, SYMBOL_KEY,
    VALIDATION_KEY, ENABLED_KEY, STRICT_SPACING_KEY, DATA_SOURCE_KEYS
)

logger = logging.getLogger(__name__)


def read_job_document(path: Path) -> Any:
    """
    Load one YAML job document with the safe loader.

    Duplicate keys are rejected.
    Raises:
        FileNotFoundError: If the job file doesn't exist
        ValueError: For duplicate keys and malformed YAML
    """
    loader = YAML(typ='safe')
    loader.allow_duplicate_keys = False
    try:
        with open(path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as stream:
            document = loader.load(stream)
    except FileNotFoundError as e:
        logger.error("Interpolation job file not found: %s", path)
        raise FileNotFoundError(f"YAML file not found: {path}") from e
    except constructor.DuplicateKeyError as e:
        logger.error("Repeated key in job file %s: %s", path, e)
        raise ValueError(f"Duplicate key in {path}: {e}") from e
    except error.YAMLError as e:
        logger.error("Job file %s is not valid YAML: %s", path, e)
        raise ValueError(f"YAML syntax error in {path}: {e}") from e
    logger.debug("Read job document from %s", path)
    return document


class InterpolationYAMLParser:
    """Parser for interpolation job files in YAML format."""

    VALID_TOP_LEVEL_KEYS = {METHOD_KEY, QUERY_POINT_KEY, VALIDATION_KEY, *DATA_SOURCE_KEYS}

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        self.config_path = Path(yaml_path)
        self.base_dir = self.config_path.parent
        self.config = read_job_document(self.config_path)
        self._check_structure()
        self.method = InterpolationMethod.from_string(self.config[METHOD_KEY])
        self.source_key = next(key for key in DATA_SOURCE_KEYS if key in self.config)
        logger.info("InterpolationYAMLParser initialized: method=%s, source=%s",
                    self.method.display_name, self.source_key)

    # --- Public API ---
    @property
    def validation_enabled(self) -> bool:
        return bool(self.config.get(VALIDATION_KEY, {}).get(ENABLED_KEY, True))

    @property
    def strict_spacing(self) -> bool:
        return bool(self.config.get(VALIDATION_KEY, {}).get(STRICT_SPACING_KEY, False))

    @property
    def query_points(self) -> List[float]:
        """Query points from the configuration, falling back to the node file's own."""
        raw = self.config.get(QUERY_POINT_KEY)
        if raw is None and self.source_key == NODE_FILE_KEY:
            return [self._read_node_file().query_point]
        if raw is None:
            return []
        values = raw if isinstance(raw, list) else [raw]
        return [float(value) for value in values]

    def load_nodes(self) -> Tuple[np.ndarray, np.ndarray]:
        """Resolve the configured data source into (x, y) arrays."""
        logger.debug("Loading nodes from source '%s'", self.source_key)
        if self.source_key == NODES_KEY:
            nodes = self.config[NODES_KEY]
            return np.asarray(nodes[X_KEY], dtype=np.float64), np.asarray(nodes[Y_KEY], dtype=np.float64)
        if self.source_key == FILE_KEY:
            return load_node_data(self.config[FILE_KEY], base_dir=self.base_dir)
        if self.source_key == NODE_FILE_KEY:
            data = self._read_node_file()
            return data.x, data.y
        return self._sample_function(self.config[FUNCTION_KEY])

    def create_engine(self) -> InterpolationEngine:
        """Build the engine, running node validation first unless disabled."""
        logger.info("Creating %s engine from configuration: %s", self.method.display_name, self.config_path)
        x_array, y_array = self.load_nodes()
        if self.validation_enabled:
            validate_nodes(self.method, x_array, y_array, strict_spacing=self.strict_spacing)
        else:
            logger.debug("Node validation disabled in %s", self.config_path)
        return InterpolationEngine(self.method, x_array, y_array)

    # --- Data sources ---
    def _read_node_file(self):
        path = Path(self.config[NODE_FILE_KEY])
        if not path.is_absolute():
            path = self.base_dir / path
        return parse_node_file(path)

    @staticmethod
    def _sample_function(function_config: Dict[str, Any]) -> Tuple[np.ndarray, np.ndarray]:
        symbol_name = function_config.get(SYMBOL_KEY, ProcessingConstants.DEFAULT_SYMBOL)
        symbol = SymbolRegistry.get(symbol_name)
        try:
            expression = sp.sympify(function_config[EXPRESSION_KEY], locals={symbol_name: symbol})
        except (sp.SympifyError, SyntaxError, TypeError) as e:
            raise ValueError(f"Invalid function expression '{function_config[EXPRESSION_KEY]}': {str(e)}") from e
        unknown = expression.free_symbols - {symbol}
        if unknown:
            raise ValueError(f"Function expression may only depend on '{symbol_name}', "
                             f"found: {', '.join(sorted(str(s) for s in unknown))}")
        func = sp.lambdify(symbol, expression, modules='numpy')
        logger.debug("Sampling function %s", expression)
        return generate_func_values(lambda v: float(func(v)), float(function_config[START_KEY]),
                                    float(function_config[END_KEY]), int(function_config[NODE_COUNT_KEY]))

    # --- Structure checks ---
    def _check_structure(self) -> None:
        if not isinstance(self.config, dict):
            raise ValueError(f"{self.config_path} must contain a mapping of job settings, "
                             f"got {type(self.config).__name__}")
        unknown = sorted(set(self.config) - self.VALID_TOP_LEVEL_KEYS)
        if unknown:
            hints = []
            for key in unknown:
                close = get_close_matches(key, self.VALID_TOP_LEVEL_KEYS, n=1, cutoff=0.6)
                hints.append(f"'{key}' (did you mean '{close[0]}'?)" if close else f"'{key}'")
            raise ValueError(f"Unknown fields in {self.config_path}: {', '.join(hints)}")
        if METHOD_KEY not in self.config:
            raise ValueError(f"Missing required field: {METHOD_KEY}")
        InterpolationMethod.from_string(self.config[METHOD_KEY])
        sources = [key for key in DATA_SOURCE_KEYS if key in self.config]
        if len(sources) != 1:
            raise ValueError(f"Exactly one node source is required ({', '.join(DATA_SOURCE_KEYS)}), "
                             f"found {len(sources)}: {sources}")
        self._check_source(sources[0], self.config[sources[0]])
        self._check_query_point(self.config.get(QUERY_POINT_KEY))
        self._check_validation_options(self.config.get(VALIDATION_KEY, {}))
        logger.debug("Job file %s passed structure checks", self.config_path)

    @staticmethod
    def _check_source(key: str, value: Any) -> None:
        if key == NODE_FILE_KEY:
            if not isinstance(value, str) or not value:
                raise ValueError(f"'{NODE_FILE_KEY}' must be a non-empty file path")
            return
        if not isinstance(value, dict):
            raise ValueError(f"'{key}' must be a mapping")
        required = {
            NODES_KEY: {X_KEY, Y_KEY},
            FUNCTION_KEY: {EXPRESSION_KEY, START_KEY, END_KEY, NODE_COUNT_KEY},
        }.get(key, set())
        missing = required - set(value)
        if missing:
            raise ValueError(f"Missing fields in '{key}': {', '.join(sorted(missing))}")
        if key == NODES_KEY:
            for axis in (X_KEY, Y_KEY):
                column = value[axis]
                if not isinstance(column, list) or not all(_is_number(v) for v in column):
                    raise ValueError(f"'{key}.{axis}' must be a list of numbers")
        elif key == FUNCTION_KEY:
            count = value[NODE_COUNT_KEY]
            if not isinstance(count, int) or count < ProcessingConstants.MIN_DATA_POINTS:
                raise ValueError(f"'{key}.{NODE_COUNT_KEY}' must be an integer >= "
                                 f"{ProcessingConstants.MIN_DATA_POINTS}, got {count}")
            if not (_is_number(value[START_KEY]) and _is_number(value[END_KEY])):
                raise ValueError(f"'{key}.{START_KEY}' and '{key}.{END_KEY}' must be numbers")
            if not value[START_KEY] < value[END_KEY]:
                raise ValueError(f"'{key}.{START_KEY}' must be less than '{key}.{END_KEY}'")

    @staticmethod
    def _check_query_point(value: Any) -> None:
        if value is None:
            return
        values = value if isinstance(value, list) else [value]
        if not all(_is_number(v) for v in values):
            raise ValueError(f"'{QUERY_POINT_KEY}' must be a number or a list of numbers, got {value}")

    @staticmethod
    def _check_validation_options(options: Any) -> None:
        if not isinstance(options, dict):
            raise ValueError(f"'{VALIDATION_KEY}' must be a mapping")
        extra = set(options) - {ENABLED_KEY, STRICT_SPACING_KEY}
        if extra:
            raise ValueError(f"Unknown validation options: {sorted(extra)}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
