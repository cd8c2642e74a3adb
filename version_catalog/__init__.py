"""Catalog of known and local release versions."""

__version__ = "0.1.0"
