"""
Larder household food inventory package.

The package tracks pantry stock and a grocery list in insertion-ordered collections and
checks recipes against the pantry to propose the grocery shortfall.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
