"""Inheritance Chess: pseudo-legal move generation for a console chess board."""

__version__ = "1.0.0"
