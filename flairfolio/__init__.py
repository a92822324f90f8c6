"""Flair, interest and profile collections for the portfolio application."""

__version__ = "0.1.0"
