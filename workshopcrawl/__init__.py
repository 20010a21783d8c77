"""Enumerate Steam Workshop item ids for a game and export them to a text file."""

__version__ = "0.1.0"
