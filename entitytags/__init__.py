"""Typed, validated tags that identify entities in human- and machine-friendly forms."""

__version__ = "4.0.0"