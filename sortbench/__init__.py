"""Timing of insertion, heap, Shell and quick sort on generated or loaded arrays."""

__version__ = "0.1.0"
__all__ = ["__version__"]