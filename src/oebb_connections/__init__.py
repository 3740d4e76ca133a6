"""Upcoming ÖBB connections between a fixed set of Vienna stations."""

__version__ = "0.1.0"
