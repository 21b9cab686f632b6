"""Plotting of interpolants and difference tables."""

from .plotters import InterpolationVisualizer

__all__ = ["InterpolationVisualizer"]
