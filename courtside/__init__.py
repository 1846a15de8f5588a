"""Courtside - basketball franchise league economy and calendar core."""

__version__ = "0.1.0"
