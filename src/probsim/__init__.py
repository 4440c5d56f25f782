"""Seeded probability distributions and Monte Carlo trial simulation."""

__version__ = "0.1.0"
