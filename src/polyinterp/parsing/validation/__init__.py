"""Validation utilities for polyinterp."""

from .node_validator import validate_nodes, minimum_nodes, is_strictly_increasing, is_uniformly_spaced

__all__ = [
    "validate_nodes",
    "minimum_nodes",
    "is_strictly_increasing",
    "is_uniformly_spaced"
]
