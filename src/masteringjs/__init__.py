"""Mastering JS static site renderer."""

__version__ = "0.1.0"
