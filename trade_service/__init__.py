"""Persistence utilities for the trade service: entities and sort handling."""

__version__ = "1.0.0"
