# file: src/berlewelch/metrics.py

"""
ECC performance metrics.

Provides utilities to count symbol errors, compute Symbol Error Rate (SER)
and redundancy overhead for evaluating codec behaviour.
"""

from typing import Sequence


def count_symbol_errors(original: Sequence[int], received: Sequence[int]) -> int:
    """
    Number of positions where two symbol sequences differ (Hamming distance).

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> count_symbol_errors([1, 2, 3], [1, 5, 3])
        1
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )
    return sum(1 for a, b in zip(original, received) if a != b)


def compute_ser(original: Sequence[int], received: Sequence[int]) -> float:
    """
    Compute Symbol Error Rate (SER) between two symbol sequences.

    SER = (number of symbol errors) / (total number of symbols)

    Returns:
        SER as a float in [0.0, 1.0]
    """
    errors = count_symbol_errors(original, received)
    if len(original) == 0:
        return 0.0
    return errors / len(original)


def is_within_budget(original: Sequence[int], received: Sequence[int], errors: int) -> bool:
    """True if received differs from original in at most `errors` positions."""
    return count_symbol_errors(original, received) <= errors


def compute_redundancy_overhead(
    original_length: int,
    encoded_length: int
) -> float:
    """
    Compute redundancy overhead as a percentage.

    Overhead = ((encoded_length - original_length) / original_length) * 100

    Example:
        >>> compute_redundancy_overhead(2, 6)  # "hi" with e=2
        200.0
    """
    if original_length <= 0:
        raise ValueError(f"original_length must be > 0, got {original_length}")

    if encoded_length < original_length:
        raise ValueError(
            f"encoded_length {encoded_length} < original_length {original_length}"
        )

    overhead = ((encoded_length - original_length) / original_length) * 100.0
    return overhead
