"""
Parsing and configuration modules for polyinterp.

This package handles YAML job files, node file ingestion, node validation
and validated engine creation.
"""

from .api import (create_engine, create_engine_from_yaml, evaluate_from_yaml,
                  get_supported_methods, validate_yaml_file)
from .config.interpolation_yaml_parser import InterpolationYAMLParser
from .io.data_handler import NodeFileData, parse_node_file, load_node_data
from .validation.node_validator import validate_nodes, minimum_nodes

__all__ = [
    'create_engine',
    'create_engine_from_yaml',
    'evaluate_from_yaml',
    'get_supported_methods',
    'validate_yaml_file',
    'InterpolationYAMLParser',
    'NodeFileData',
    'parse_node_file',
    'load_node_data',
    'validate_nodes',
    'minimum_nodes'
]
