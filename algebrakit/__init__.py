"""Algebra helpers: quadratic equations, expression checks, formatting, reports and arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "analysis",
    "arithmetic",
    "expr_check",
    "formatting",
    "fraction",
    "reports",
]