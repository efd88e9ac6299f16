"""CSV, JSON and text reports on solved quadratic equations."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from operator import attrgetter

from algebrakit.formatting import trim_float

__all__ = [
    "CSVResult",
    "Result",
    "results_to_csv",
    "generate_report",
    "result_to_json",
    "step_by_step_solution",
]


@dataclass(frozen=True)
class CSVResult:
    """One row of a CSV results table; missing roots are None."""

    id: str
    a: float
    b: float
    c: float
    root1: float | None = None
    root2: float | None = None
    status: str = ""


@dataclass(frozen=True)
class Result:
    """A solved equation as serialised to JSON; ``roots`` None means null."""

    id: str
    a: float
    b: float
    c: float
    roots: Sequence[float] | None = None
    status: str = ""


def _fixed(v: float, places: int) -> str:
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    return f"{v:.{places}f}"


def _escape_csv(value: str) -> str:
    if any(ch in value for ch in '",\n\r'):
        return '"' + value.replace('"', '""') + '"'
    return value


def _optional(value: float | None) -> str:
    return "" if value is None else trim_float(value)


def results_to_csv(results: Iterable[CSVResult]) -> str:
    """Render results sorted by id as CSV with a header and no final newline."""
    lines = ["id,a,b,c,root1,root2,status"]
    for r in sorted(results, key=attrgetter("id")):
        fields = (
            r.id,
            trim_float(r.a),
            trim_float(r.b),
            trim_float(r.c),
            _optional(r.root1),
            _optional(r.root2),
            r.status,
        )
        lines.append(",".join(_escape_csv(f) for f in fields))
    return "\n".join(lines).rstrip("\r\n")


def generate_report(eq_id: str, roots: Sequence[float]) -> str:
    """Describe an equation and its roots in a short multi-line report."""
    roots = list(roots)
    status = "solved"
    discriminant = 0.0
    if len(roots) == 2:
        first, second = roots
        roots_line = f"Roots: x1 = {_fixed(first, 2)}, x2 = {_fixed(second, 2)}"
        delta = first - second
        discriminant = delta * delta
    elif len(roots) == 1:
        roots_line = f"Roots: x1 = {_fixed(roots[0], 2)}"
    else:
        roots_line = "Roots: none"
        status = "no_real_roots"

    return (
        f"Equation: {eq_id}\n"
        "Type: quadratic\n"
        f"{roots_line}\n"
        f"Discriminant: {_fixed(discriminant, 2)}\n"
        f"Status: {status}"
    )


def _json_float(v: float) -> str:
    if not math.isfinite(v):
        raise ValueError(f"unsupported value: {v!r}")
    magnitude = abs(v)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(float(v)).partition("e")
        exp = int(exponent)
        return f"{mantissa}e-{-exp}" if exp < 0 else f"{mantissa}e+{exp:02d}"
    return format(Decimal(repr(float(v))).normalize(), "f")


def _json_string(s: str) -> str:
    encoded = json.dumps(s, ensure_ascii=False)
    return encoded.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def _json_roots(roots: Sequence[float] | None) -> str:
    if roots is None:
        return "null"
    if not roots:
        return "[]"
    items = ",\n".join(f"    {_json_float(r)}" for r in roots)
    return f"[\n{items}\n  ]"


def result_to_json(result: Result) -> bytes:
    """Serialise a result as two-space indented JSON without a final newline.

    Raises ValueError when a number is NaN or infinite.
    """
    fields = (
        ("id", _json_string(result.id)),
        ("a", _json_float(result.a)),
        ("b", _json_float(result.b)),
        ("c", _json_float(result.c)),
        ("roots", _json_roots(result.roots)),
        ("status", _json_string(result.status)),
    )
    body = ",\n".join(f'  "{key}": {value}' for key, value in fields)
    return ("{\n" + body + "\n}").encode("utf-8")


def _divide(num: float, den: float) -> float:
    if den:
        return num / den
    if math.isnan(num) or num == 0:
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _min(x: float, y: float) -> float:
    return math.nan if math.isnan(x) or math.isnan(y) else min(x, y)


def _max(x: float, y: float) -> float:
    return math.nan if math.isnan(x) or math.isnan(y) else max(x, y)


def step_by_step_solution(a: float, b: float, c: float) -> str:
    """Explain, step by step, how the roots of ``ax^2 + bx + c`` are found."""
    b_squared = b * b
    four_ac = 4 * a * c
    d = b_squared - four_ac
    step1 = (
        "Step 1: Calculate discriminant D = b^2 - 4ac = "
        f"{_fixed(b_squared, 0)} - {_fixed(four_ac, 0)} = {_fixed(d, 0)}"
    )

    if d < 0:
        return step1 + "\nStep 2: D < 0 -> no real roots\nAnswer: no real roots"

    if d == 0:
        x = _fixed(_divide(-b, 2 * a), 2)
        return (
            f"{step1}\nStep 2: D = 0 -> one real root\n"
            f"Step 3: x1 = {x}\nAnswer: x = {{{x}}}"
        )

    sqrt_d = math.sqrt(d)
    x1 = _divide(-b + sqrt_d, 2 * a)
    x2 = _divide(-b - sqrt_d, 2 * a)
    return (
        f"{step1}\nStep 2: D > 0 -> two real roots\n"
        f"Step 3: x1 = {_fixed(x1, 0)}\nStep 4: x2 = {_fixed(x2, 0)}\n"
        f"Answer: x = {{{_fixed(_min(x1, x2), 0)}, {_fixed(_max(x1, x2), 0)}}}"
    )