# file: src/berlewelch/linalg.py

"""
Linear algebra over a prime field.

Gauss-Jordan elimination on numpy int64 matrices. Entries stay in [0, p)
after every row operation, and p < 2**31 keeps products inside int64.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .errors import InconsistentSystemError
from .field import PrimeField

logger = logging.getLogger(__name__)


def _as_matrix(matrix, field: PrimeField) -> np.ndarray:
    raw = np.asarray(matrix, dtype=object).tolist()
    if any(not isinstance(row, list) for row in raw):
        raise ValueError("Matrix must be two-dimensional")
    rows = [field.check_all(row) for row in raw]
    if not rows:
        return np.zeros((0, 0), dtype=np.int64)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("Matrix rows must all have the same length")
    return np.array(rows, dtype=np.int64).reshape(len(rows), width)


def _row_reduce(augmented: np.ndarray, num_cols: int, field: PrimeField) -> Tuple[np.ndarray, List[int]]:
    """
    Reduce augmented in place to reduced row echelon form over the first
    num_cols columns.

    Returns:
        (matrix, pivot_columns)
    """
    p = field.prime
    num_rows = augmented.shape[0]
    pivot_columns = []
    row = 0

    for col in range(num_cols):
        if row >= num_rows:
            break

        # Pivot on the first nonzero entry at or below the current row
        nonzero = np.nonzero(augmented[row:, col])[0]
        if nonzero.size == 0:
            continue
        pivot = row + int(nonzero[0])

        if pivot != row:
            augmented[[row, pivot]] = augmented[[pivot, row]]

        inv = field.inverse(int(augmented[row, col]))
        augmented[row] = (augmented[row] * inv) % p

        factors = augmented[:, col].copy()
        factors[row] = 0
        augmented -= np.outer(factors, augmented[row])
        augmented %= p

        pivot_columns.append(col)
        row += 1

    return augmented, pivot_columns


def rank(matrix, field: PrimeField) -> int:
    """Row rank of matrix over the field."""
    m = _as_matrix(matrix, field)
    if m.size == 0:
        return 0
    _, pivots = _row_reduce(m.copy(), m.shape[1], field)
    return len(pivots)


def solve(matrix, rhs: Sequence[int], field: PrimeField) -> List[int]:
    """
    Solve matrix @ x = rhs over the field.

    Args:
        matrix: (rows, cols) coefficients, nested lists or ndarray
        rhs: Right-hand side of length rows
        field: Coefficient field

    Returns:
        One solution vector of length cols. When the system is
        underdetermined, free variables are set to zero.

    Raises:
        InconsistentSystemError: If no solution exists
        ValueError: If shapes do not match
        InvalidFieldElementError: If an entry is outside the field
    """
    a = _as_matrix(matrix, field)
    b = np.array(field.check_all(rhs), dtype=np.int64)

    num_rows = a.shape[0]
    num_cols = a.shape[1]
    if b.shape[0] != num_rows:
        raise ValueError(
            f"Shape mismatch: matrix has {num_rows} rows, rhs has {b.shape[0]} entries"
        )

    augmented = np.hstack([a, b.reshape(num_rows, 1)])
    reduced, pivots = _row_reduce(augmented, num_cols, field)

    # Rows past the pivots have all-zero coefficients; any nonzero rhs is a contradiction
    if np.any(reduced[len(pivots):, num_cols] != 0):
        raise InconsistentSystemError(
            f"Linear system of {num_rows}x{num_cols} over GF({field.prime}) has no solution"
        )

    if len(pivots) < num_cols:
        logger.debug(
            "Rank-deficient system: rank %d < %d unknowns, free variables set to 0",
            len(pivots), num_cols
        )

    solution = [0] * num_cols
    for row, col in enumerate(pivots):
        solution[col] = int(reduced[row, num_cols])
    return solution
