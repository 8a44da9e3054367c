"""Catalogue of films and books read from a binary film file and a text book file."""

__version__ = "0.1.0"
__all__ = ["binary_reader", "cli", "iterators", "loader", "models", "zipping"]