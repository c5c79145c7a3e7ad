# file: src/berlewelch/polynomial.py

"""
Polynomial arithmetic over a prime field.

Polynomials are coefficient lists, lowest degree first: [c0, c1, c2]
represents c0 + c1*x + c2*x^2. The zero polynomial is [].
"""

from typing import List, Sequence, Tuple

from .errors import FieldDivisionByZeroError
from .field import PrimeField


def trim(poly: Sequence[int]) -> List[int]:
    """Drop trailing zero coefficients."""
    coeffs = list(poly)
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


def degree(poly: Sequence[int]) -> int:
    """Degree of poly, -1 for the zero polynomial."""
    return len(trim(poly)) - 1


def poly_add(a: Sequence[int], b: Sequence[int], field: PrimeField) -> List[int]:
    length = max(len(a), len(b))
    result = [
        field.add(a[i] if i < len(a) else 0, b[i] if i < len(b) else 0)
        for i in range(length)
    ]
    return trim(result)


def poly_sub(a: Sequence[int], b: Sequence[int], field: PrimeField) -> List[int]:
    length = max(len(a), len(b))
    result = [
        field.sub(a[i] if i < len(a) else 0, b[i] if i < len(b) else 0)
        for i in range(length)
    ]
    return trim(result)


def poly_scale(poly: Sequence[int], scalar: int, field: PrimeField) -> List[int]:
    return trim([field.mul(c, scalar) for c in poly])


def poly_mul(a: Sequence[int], b: Sequence[int], field: PrimeField) -> List[int]:
    a = trim(a)
    b = trim(b)
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b) - 1)
    for i, ca in enumerate(a):
        if ca == 0:
            continue
        for j, cb in enumerate(b):
            result[i + j] = (result[i + j] + ca * cb) % field.prime
    return trim(result)


def poly_eval(poly: Sequence[int], x: int, field: PrimeField) -> int:
    """Evaluate poly at x using Horner's rule."""
    result = 0
    for coeff in reversed(poly):
        result = (result * x + coeff) % field.prime
    return result


def poly_divmod(
    numerator: Sequence[int],
    divisor: Sequence[int],
    field: PrimeField
) -> Tuple[List[int], List[int]]:
    """
    Polynomial long division over the field.

    Args:
        numerator: Dividend coefficients
        divisor: Divisor coefficients (must be nonzero)
        field: Coefficient field

    Returns:
        (quotient, remainder) with degree(remainder) < degree(divisor)

    Raises:
        FieldDivisionByZeroError: If divisor is the zero polynomial
    """
    divisor = trim(divisor)
    if not divisor:
        raise FieldDivisionByZeroError("Polynomial division by zero polynomial")

    remainder = trim(numerator)
    divisor_degree = len(divisor) - 1
    if len(remainder) - 1 < divisor_degree:
        return [], remainder

    lead_inv = field.inverse(divisor[-1])
    quotient = [0] * (len(remainder) - divisor_degree)

    for shift in range(len(quotient) - 1, -1, -1):
        coeff = field.mul(remainder[shift + divisor_degree], lead_inv)
        quotient[shift] = coeff
        if coeff == 0:
            continue
        for i, d in enumerate(divisor):
            remainder[shift + i] = (remainder[shift + i] - coeff * d) % field.prime

    return trim(quotient), trim(remainder[:divisor_degree])


def lagrange_interpolate(
    points: Sequence[int],
    values: Sequence[int],
    field: PrimeField
) -> List[int]:
    """
    Coefficients of the unique polynomial of degree < len(points) through
    (points[i], values[i]).

    Raises:
        ValueError: If lengths differ or points repeat
        InvalidFieldElementError: If any point or value is outside the field
    """
    if len(points) != len(values):
        raise ValueError(
            f"Length mismatch: points={len(points)}, values={len(values)}"
        )
    points = field.check_all(points)
    values = field.check_all(values)
    if len(set(points)) != len(points):
        raise ValueError("Interpolation points must be distinct")

    result: List[int] = []
    for i, (xi, yi) in enumerate(zip(points, values)):
        if yi == 0:
            continue
        basis = [1]
        denominator = 1
        for j, xj in enumerate(points):
            if j == i:
                continue
            basis = poly_mul(basis, [field.neg(xj), 1], field)
            denominator = field.mul(denominator, field.sub(xi, xj))
        scale = field.div(yi, denominator)
        result = poly_add(result, poly_scale(basis, scale, field), field)

    return result
