"""Algorithms and data structures for number theory, matrices, graphs and strings."""

__version__ = "0.1.0"