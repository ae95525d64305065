"""Heuristic text analysis and SVG diagram synthesis for notes."""

__version__ = "0.1.0"
