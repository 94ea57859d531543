"""Genetic-algorithm workout recommender with split rotation."""

__version__ = "0.1.0"
