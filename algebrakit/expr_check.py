"""Syntax check for quadratic expressions with integer coefficients."""

from __future__ import annotations

import re

__all__ = [
    "EmptyExprError",
    "InvalidExprSyntaxError",
    "UnsupportedExprPowerError",
    "validate_expr",
]


class EmptyExprError(ValueError):
    """The expression holds nothing but spaces."""


class InvalidExprSyntaxError(ValueError):
    """The expression is not well formed."""


class UnsupportedExprPowerError(ValueError):
    """The expression uses a power above x^2."""


_DIGITS_ONLY = re.compile(r"[0-9]+")
_SIGN = re.compile(r"[+-]")


def _is_count(coef: str) -> bool:
    return coef == "" or _DIGITS_ONLY.fullmatch(coef) is not None


def _classify_term(term: str) -> str:
    if "x" not in term:
        if _DIGITS_ONLY.fullmatch(term):
            return "const"
        raise InvalidExprSyntaxError("invalid expression syntax")

    if term.count("x") != 1:
        raise InvalidExprSyntaxError("invalid expression syntax")

    for suffix, kind in (("x²", "quadratic"), ("x^2", "quadratic"), ("x", "linear")):
        if term.endswith(suffix):
            if _is_count(term[: -len(suffix)]):
                return kind
            break
    raise InvalidExprSyntaxError("invalid expression syntax")


def validate_expr(expr: str) -> str:
    """Check an expression and return it with spaces removed.

    Each of the quadratic, linear and constant terms may occur at most once,
    with non-negative integer coefficients.
    """
    s = expr.replace(" ", "")
    if not s:
        raise EmptyExprError("empty expression")
    if "x³" in s or "x^3" in s:
        raise UnsupportedExprPowerError("only the power x^2 is supported")

    body = s[1:] if s[0] in "+-" else s
    if not body:
        raise InvalidExprSyntaxError("invalid expression syntax")

    seen: set[str] = set()
    for term in _SIGN.split(body):
        if not term:
            raise InvalidExprSyntaxError("invalid expression syntax")
        kind = _classify_term(term)
        if kind in seen:
            raise InvalidExprSyntaxError("invalid expression syntax")
        seen.add(kind)
    return s