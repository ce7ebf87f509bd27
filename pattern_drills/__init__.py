"""Beginner programming drills: text patterns, simple sorts, small calculators and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]