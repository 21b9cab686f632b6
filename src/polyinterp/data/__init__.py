"""
Constants shared across polyinterp.

This package provides the tolerances, node-count minimums, error message
templates and file handling limits used by the algorithms and parsers.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
]
