"""Execution timer demo: around-advice timing of a single service method."""

__version__ = "1.0.0"
