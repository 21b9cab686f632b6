"""Configuration parsing and YAML key definitions."""

from .interpolation_yaml_parser import InterpolationYAMLParser, read_job_document
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "InterpolationYAMLParser",
    "read_job_document",
    *_yk.__all__,
]
