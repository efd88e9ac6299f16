# algebrakit

A small library of algebra helpers built around quadratic equations.

## Installation

```
pip install .
pip install ".[test]"   # with the test tools
```

## What is inside

- `algebrakit.expr_check`: `validate_expr` checks the syntax of an expression such as `"x^2 + 2x + 1"` or `"x² + 2x + 1"` and returns it with spaces removed. Coefficients must be non-negative integers, and each of the quadratic, linear and constant terms may appear at most once. It raises `EmptyExprError`, `InvalidExprSyntaxError` or `UnsupportedExprPowerError` (for `x^3` or `x³`).
- `algebrakit.analysis`:
  - `quadratic_roots` returns the real roots as a list. When `a` is 0 it returns the root of the linear equation, and when `a` and `b` are both 0 it raises `NoEquationError`.
  - `analyze_discriminant` returns the discriminant and the number of real roots.
  - `evaluate` evaluates a polynomial whose coefficients are given lowest degree first.
  - `to_base` writes a non-negative integer in base 2 to 36 with lower-case digits. It raises `InvalidBaseError` or `NegativeValueError`.
  - `triangle_type` returns `"equilateral"`, `"isosceles"` or `"scalene"`, and raises `ImpossibleTriangleError`.
- `algebrakit.formatting`: `format_polynomial` takes coefficients lowest degree first. `to_latex` renders `ax^2 + bx + c = 0` in LaTeX. `trim_float` formats a number with ten decimals and then drops trailing zeros.
- `algebrakit.reports`:
  - `results_to_csv` turns `CSVResult` rows into CSV, sorted by id, with a header and without a final newline.
  - `result_to_json` serialises a `Result` as indented JSON bytes and raises `ValueError` for NaN or infinity.
  - `generate_report` gives a short text report on an equation and its roots.
  - `step_by_step_solution` explains how the roots are found.
- `algebrakit.arithmetic`:
  - `add`, `subtract` and `multiply`.
  - `divide` raises `ZeroDivisionError` when the divisor is zero.
  - `factorial` and `factorial_recursive` accept 0 to 20. They raise `NegativeFactorialError` or `FactorialOverflowError` otherwise.
  - `gcd` and `lcm`.
  - `power` raises `ZeroDivisionError` for zero raised to a negative power.
  - `sqrt` raises `NegativeSqrtError` for negative input.
  - `is_prime` and `next_prime`.
- `algebrakit.fraction`: the immutable `Fraction(num, den)` has `add` and `reduce`. Both return the fraction in lowest terms with a positive denominator.

## Example

```python
from algebrakit.expr_check import validate_expr
from algebrakit.analysis import quadratic_roots
from algebrakit.formatting import format_polynomial, to_latex
from algebrakit.reports import step_by_step_solution
from algebrakit.fraction import Fraction

print(validate_expr("x^2 - 3x + 2"))   # x^2-3x+2
print(quadratic_roots(1, -3, 2))       # [2.0, 1.0]
print(to_latex(1, -3, 2))              # x^{2} - 3x + 2 = 0
print(format_polynomial([-1, 4, -1]))  # -x^2 + 4x - 1
print(step_by_step_solution(1, -3, 2))
print(Fraction(1, 2).add(Fraction(1, 3)))  # Fraction(num=5, den=6)
```

The step-by-step output for `1, -3, 2` is:

```
Step 1: Calculate discriminant D = b^2 - 4ac = 9 - 8 = 1
Step 2: D > 0 -> two real roots
Step 3: x1 = 2
Step 4: x2 = 1
Answer: x = {1, 2}
```

## What it does not do

- `validate_expr` checks an expression but does not turn it into coefficients. Pass the coefficients `a`, `b` and `c` to the other functions yourself.
- The package has no generator of random equations.
- The package has no command-line tool. It is a library to import.

## Running the tests

```
pytest
```