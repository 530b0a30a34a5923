"""Reproducible card and expansion asset catalog builder."""

__version__ = "1.0.0"
