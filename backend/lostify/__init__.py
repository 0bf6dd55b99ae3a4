"""Lostify - campus lost-and-found backend."""

__version__ = "0.1.0"
