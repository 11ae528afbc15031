"""Collect race result CSV files, read their selected columns and link them to races."""

__version__ = "0.1.0"
__all__ = ["__version__"]