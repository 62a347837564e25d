"""Aggregation layer over the PokeAPI catalog."""

__version__ = "0.1.0"
