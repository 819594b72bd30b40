"""Linked lists, dancing links (Algorithm X) and an exact-cover Sudoku solver."""

__version__ = "0.1.0"