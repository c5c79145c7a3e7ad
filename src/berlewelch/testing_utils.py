# file: src/berlewelch/testing_utils.py

"""
Testing utilities for the codec.

Provides symbol error injection for validation and robustness testing.
Used only in test/evaluation contexts.
"""

import random
from typing import Iterable, List, Optional, Sequence

from .field import DEFAULT_PRIME


def _replacement(rng: random.Random, current: int, prime: int) -> int:
    # Any field value except the current one
    value = rng.randrange(prime - 1)
    return value if value < current else value + 1


def corrupt_positions(
    codeword: Sequence[int],
    positions: Iterable[int],
    prime: int = DEFAULT_PRIME,
    seed: Optional[int] = None
) -> List[int]:
    """
    Replace the symbols at the given positions with different field values.

    Args:
        codeword: Original symbols (not modified)
        positions: Indices to corrupt
        prime: Field modulus
        seed: Random seed for reproducibility (optional)

    Returns:
        New list with every listed position changed
    """
    rng = random.Random(seed)
    corrupted = list(codeword)
    for pos in dict.fromkeys(positions):
        corrupted[pos] = _replacement(rng, corrupted[pos], prime)
    return corrupted


def inject_symbol_errors(
    codeword: Sequence[int],
    num_errors: int,
    prime: int = DEFAULT_PRIME,
    seed: Optional[int] = None
) -> List[int]:
    """
    Corrupt exactly num_errors distinct, randomly chosen positions.

    WARNING: This function introduces non-determinism and should ONLY
    be used in testing/evaluation contexts.

    Example:
        >>> corrupted = inject_symbol_errors([7, 15, 23, 31], 1, seed=42)
        >>> count_symbol_errors([7, 15, 23, 31], corrupted)
        1
    """
    if not 0 <= num_errors <= len(codeword):
        raise ValueError(
            f"num_errors must be in [0, {len(codeword)}], got {num_errors}"
        )

    rng = random.Random(seed)
    positions = rng.sample(range(len(codeword)), num_errors)
    return corrupt_positions(codeword, positions, prime=prime, seed=rng.randrange(2 ** 32))
