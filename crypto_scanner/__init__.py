"""Scan the 24h market ticker stream for strong gainers and broadcast them."""

__version__ = "0.1.0"

__all__ = ["__version__"]