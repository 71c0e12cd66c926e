"""Colour YAML text for display in a terminal with ANSI escape sequences."""

__version__ = "0.5.0"
__all__ = ["__version__"]