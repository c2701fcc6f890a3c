"""Exact Lagrange interpolation over the rationals.

Points are (x, y) pairs of Python ints. Terms are accumulated as reduced
Fractions, so the result is exact no matter how large intermediate
numerators and denominators grow. Iteration order is fixed: i ascending,
and within each term j ascending skipping i.
"""

from polysecret.errors import DuplicateXValue
from polysecret.fraction import Fraction


def poly_eval_low(coeffs: list, x: int) -> int:
    """Evaluate an integer polynomial at x using Horner's method.

    coeffs = [a_0, a_1, ..., a_d] (lowest degree first)
    Returns a_0 + a_1 * x + ... + a_d * x^d.
    """
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def lagrange_basis_at_zero(xs: list, i: int) -> Fraction:
    """Compute Lagrange basis coefficient L_i(0).

    Returns prod_{j!=i} (0 - x_j) / (x_i - x_j).
    """
    xi = xs[i]
    basis = Fraction(1)
    for j, xj in enumerate(xs):
        if j == i:
            continue
        if xi == xj:
            raise DuplicateXValue(xi)
        basis = basis.mul(Fraction(-xj, xi - xj))
    return basis


def interpolate_at(points: list, target: int) -> Fraction:
    """Evaluate the interpolating polynomial at target.

    L(t) = sum_i y_i * prod_{j!=i} (t - x_j)/(x_i - x_j)
    """
    if not points:
        raise ValueError("Need at least one point")
    k = len(points)
    result = Fraction(0)
    for i in range(k):
        xi, yi = points[i]
        term = Fraction(yi)
        for j in range(k):
            if j == i:
                continue
            xj = points[j][0]
            den = xi - xj
            if den == 0:
                raise DuplicateXValue(xi)
            term = term.mul(Fraction(target - xj, den))
        result = result.add(term)
    return result


def lagrange_at_zero(points: list) -> Fraction:
    """Evaluate the interpolating polynomial at x=0.

    Each term starts from y_i and is multiplied by (-x_j)/(x_i - x_j) for
    every j != i. The caller decides whether a non-integer result is an
    error (see Fraction.to_int).
    """
    return interpolate_at(points, 0)
