"""Tabular input for the simulation composites."""

from .tables import load_entities, read_table

__all__ = ["load_entities", "read_table"]
