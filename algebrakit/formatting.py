"""Human-readable and LaTeX rendering of polynomials."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

__all__ = ["trim_float", "format_polynomial", "to_latex"]

_LATEX_ESCAPES = str.maketrans({"_": r"\_", "{": r"\{", "}": r"\}"})


def trim_float(v: float) -> str:
    """Format ``v`` with ten decimals, then drop trailing zeros and a bare point."""
    if math.isnan(v):
        text = "NaN"
    elif math.isinf(v):
        text = "+Inf" if v > 0 else "-Inf"
    else:
        text = f"{v:.10f}"
    return text.rstrip("0").rstrip(".")


def _power_name(degree: int) -> str:
    if degree == 0:
        return ""
    if degree == 1:
        return "x"
    return f"x^{degree}"


def _term(
    coef: float,
    variable: str,
    first: bool,
    transform: Callable[[str], str] = lambda s: s,
) -> str:
    if first:
        sign = "-" if coef < 0 else ""
    else:
        sign = " - " if coef < 0 else " + "
    magnitude = abs(coef)
    coef_str = trim_float(magnitude) if variable == "" or magnitude != 1 else ""
    return sign + transform(coef_str) + variable


def format_polynomial(coeffs: Iterable[float]) -> str:
    """Render coefficients, lowest degree first, as e.g. ``-x^2 + 4x - 1``."""
    terms: list[str] = []
    for degree, coef in reversed(list(enumerate(coeffs))):
        if coef == 0:
            continue
        terms.append(_term(coef, _power_name(degree), not terms))
    return "".join(terms) if terms else "0"


def _escape_latex(s: str) -> str:
    return s.translate(_LATEX_ESCAPES)


def to_latex(a: float, b: float, c: float) -> str:
    """Render ``ax^2 + bx + c = 0`` in LaTeX notation."""
    terms: list[str] = []
    for coef, variable in ((a, "x^{2}"), (b, "x"), (c, "")):
        if coef == 0:
            continue
        terms.append(_term(coef, variable, not terms, _escape_latex))
    if not terms:
        return "0 = 0"
    return "".join(terms) + " = 0"