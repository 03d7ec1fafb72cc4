"""Genetic programming building blocks: operators, k-d tree search, selection, configuration and logging."""

__version__ = "0.1.0"