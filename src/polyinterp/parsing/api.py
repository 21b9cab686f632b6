import logging
from pathlib import Path
from typing import Dict, Sequence, Union

from polyinterp.core.engine import InterpolationEngine
from polyinterp.core.methods import InterpolationMethod
from polyinterp.parsing.config.interpolation_yaml_parser import InterpolationYAMLParser
from polyinterp.parsing.validation.node_validator import validate_nodes

logger = logging.getLogger(__name__)


def create_engine(method: Union[InterpolationMethod, str], x: Sequence[float], y: Sequence[float],
                  validate: bool = True, strict_spacing: bool = False) -> InterpolationEngine:
    """
    Create an interpolation engine, checking the nodes against the method's input contract.

    InterpolationEngine itself accepts any input and lets bad nodes surface as
    nan/inf results. This entry point rejects them up front instead.
    Args:
        method: Interpolation method or its configuration key, e.g. 'bessel'
        x: Node abscissae in construction order
        y: Node values
        validate: Run validate_nodes before construction (default: True)
        strict_spacing: Reject unequally spaced nodes for the finite and
            central difference methods instead of only logging a warning
    Returns:
        The interpolation engine
    Raises:
        InvalidInputError: If validation is enabled and the nodes violate the contract
        UnknownMethodError: If the method is not recognized
    Examples:
        engine = create_engine('newton_separated', [0, 1, 2, 3], [1, 2, 9, 28])
        engine.interpolate()(1.5)  # 4.375
    """
    method = InterpolationMethod.from_string(method)
    if validate:
        validate_nodes(method, x, y, strict_spacing=strict_spacing)
    return InterpolationEngine(method, x, y)


def create_engine_from_yaml(yaml_path: Union[str, Path]) -> InterpolationEngine:
    """
    Create an interpolation engine from a YAML job file.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        The interpolation engine described by the file
    """
    logger.info("Creating interpolation engine from: %s", yaml_path)
    try:
        parser = InterpolationYAMLParser(yaml_path)
        return parser.create_engine()
    except Exception as e:
        logger.error("Failed to create interpolation engine from %s: %s", yaml_path, e, exc_info=True)
        raise


def evaluate_from_yaml(yaml_path: Union[str, Path]) -> Dict[float, float]:
    """
    Evaluate the configured interpolant at every configured query point.
    Returns:
        Mapping of query point to interpolated value
    Raises:
        ValueError: If the configuration defines no query point
    """
    parser = InterpolationYAMLParser(yaml_path)
    query_points = parser.query_points
    if not query_points:
        raise ValueError(f"No query point configured in {yaml_path}")
    engine = parser.create_engine()
    evaluator = engine.interpolate()
    results = {point: evaluator(point) for point in query_points}
    logger.info("Evaluated %s interpolant at %d query point(s)", engine.method.display_name, len(results))
    return results


def get_supported_methods() -> list:
    """Configuration keys of all supported interpolation methods."""
    return [method.value for method in InterpolationMethod]


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML job file without loading its nodes.
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        InterpolationYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
