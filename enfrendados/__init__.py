"""Enfrendados: a terminal dice game with a session ranking."""

__version__ = "0.1.0"