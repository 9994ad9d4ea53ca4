# model/__init__.py

"""
Domain objects for parsed formulas. These types carry parse results to the
truth-table generator without pulling in evaluation logic.
"""

from .formula import Formula

__all__ = [
    "Formula",
]
