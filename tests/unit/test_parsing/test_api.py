import logging

import pytest

from polyinterp.core.exceptions import InvalidInputError, UnknownMethodError
from polyinterp.core.methods import InterpolationMethod
from polyinterp.parsing.api import (create_engine, create_engine_from_yaml, evaluate_from_yaml,
                                    get_supported_methods, validate_yaml_file)


class TestCreateEngine:
    """Test cases for validated engine construction."""
    def test_valid_nodes(self, cubic_nodes):
        engine = create_engine("newton_separated", *cubic_nodes)
        assert engine.method is InterpolationMethod.NEWTON_SEPARATED
        assert engine.interpolate()(1.5) == pytest.approx(4.375)

    def test_rejects_too_few_nodes(self):
        with pytest.raises(InvalidInputError):
            create_engine("bessel", [0.0, 1.0, 2.0], [0.0, 1.0, 4.0])

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidInputError, match="Duplicate x-values"):
            create_engine("lagrange", [0.0, 1.0, 1.0], [0.0, 1.0, 4.0])

    def test_rejects_length_mismatch(self):
        with pytest.raises(InvalidInputError, match="length mismatch"):
            create_engine("lagrange", [0.0, 1.0, 2.0], [0.0, 1.0])

    def test_validation_can_be_skipped(self):
        engine = create_engine("bessel", [0.0, 1.0, 2.0], [0.0, 1.0, 4.0], validate=False)
        assert engine.size == 3

    def test_unknown_method(self, cubic_nodes):
        with pytest.raises(UnknownMethodError):
            create_engine("spline", *cubic_nodes)

    def test_uneven_spacing_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            create_engine("newton_finite", [0.0, 1.0, 3.0], [0.0, 1.0, 9.0])
        assert "equally spaced" in caplog.text

    def test_uneven_spacing_strict(self):
        with pytest.raises(InvalidInputError):
            create_engine("stirling", [0.0, 1.0, 3.0, 4.0], [0.0, 1.0, 9.0, 16.0], strict_spacing=True)


class TestYAMLEntryPoints:
    """Test cases for the YAML-driven API functions."""
    def test_create_engine_from_yaml(self, write_yaml):
        path = write_yaml("method: lagrange\nnodes: {x: [0, 1], y: [1, 2]}\n")
        assert create_engine_from_yaml(path).to_latex() == "-1 * (x - 1) + 2 * (x - 0)"

    def test_create_engine_from_yaml_propagates_errors(self, write_yaml):
        with pytest.raises(ValueError):
            create_engine_from_yaml(write_yaml("method: lagrange\n"))

    def test_evaluate_from_yaml(self, write_yaml, node_file):
        path = write_yaml(f"method: stirling\nnode_file: {node_file.name}\n")
        assert evaluate_from_yaml(path) == {1.5: pytest.approx(4.375)}

    def test_evaluate_from_yaml_without_query_point(self, write_yaml):
        path = write_yaml("method: lagrange\nnodes: {x: [0, 1], y: [1, 2]}\n")
        with pytest.raises(ValueError, match="No query point"):
            evaluate_from_yaml(path)

    def test_validate_yaml_file(self, write_yaml):
        assert validate_yaml_file(write_yaml("method: bessel\nnodes: {x: [0, 1], y: [1, 2]}\n"))

    def test_validate_yaml_file_invalid(self, write_yaml):
        with pytest.raises(ValueError, match="YAML validation failed"):
            validate_yaml_file(write_yaml("method: bessel\n"))

    def test_validate_yaml_file_malformed(self, write_yaml):
        path = write_yaml("method: lagrange\nnodes: {x: [0, 1], y: [1, 2]\n")
        with pytest.raises(ValueError, match="YAML validation failed"):
            validate_yaml_file(path)

    def test_validate_yaml_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            validate_yaml_file(tmp_path / "absent.yaml")


def test_get_supported_methods():
    assert get_supported_methods() == ["lagrange", "newton_separated", "newton_finite", "stirling", "bessel"]
