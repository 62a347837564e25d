"""Normalization, pagination and search over the upstream catalog."""
