"""Exhaustive solvers, item tables and reports for the multiple-choice knapsack problem."""

__version__ = "0.1.0"
__all__ = ["__version__"]