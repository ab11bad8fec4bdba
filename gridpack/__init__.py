"""Bounded grid of non-overlapping rectangular items."""

__version__ = "0.1.0"
