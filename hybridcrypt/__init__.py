"""Toy hybrid text cipher built from a digit-matrix cipher and a binary-tree cipher."""

__version__ = "0.1.0"
__all__ = ["cli", "keys", "matrix", "tree"]