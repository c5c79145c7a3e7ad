# file: src/berlewelch/bw_codec.py

"""
Berlekamp-Welch codec implementation.

Encodes a message as evaluations of a polynomial over GF(p) at the points
0, 1, ..., n-1 and decodes by solving the Berlekamp-Welch key equation
Q(x_i) = y_i * E(x_i) as a linear system over the field.
"""

import logging
from typing import List, Sequence

from .errors import (
    CodewordLengthError,
    ECCConfigurationError,
    InconsistentSystemError,
    RedundancyTooLargeError,
    UncorrectableError,
)
from .field import DEFAULT_PRIME, PrimeField
from .linalg import solve
from .polynomial import degree, lagrange_interpolate, poly_divmod, poly_eval

logger = logging.getLogger(__name__)


class BerlekampWelchCodec:
    """
    Berlekamp-Welch codec over a prime field.

    Parameters:
        errors (int): Error budget e (symbols correctable per codeword)
        prime (int): Field modulus p
        systematic (bool): If True the codeword starts with the message
            itself; otherwise the message is the coefficient list of the
            evaluated polynomial

    Invariants:
        - n = k + 2e
        - n <= p (evaluation points must be distinct field elements)
        - Corrects up to e symbol errors
    """

    def __init__(self, errors: int, prime: int = DEFAULT_PRIME, systematic: bool = False):
        if isinstance(errors, bool) or not isinstance(errors, int):
            raise ECCConfigurationError(f"Error budget must be an int, got {type(errors)}")
        if errors < 1:
            raise ECCConfigurationError(f"Error budget must be >= 1, got {errors}")

        self.field = PrimeField(prime)
        self.errors = errors
        self.systematic = bool(systematic)
        self.redundancy = 2 * errors
        self.max_correctable_errors = errors

    @property
    def prime(self) -> int:
        return self.field.prime

    @property
    def max_message_length(self) -> int:
        return max(self.field.size - self.redundancy, 0)

    def codeword_length(self, message_length: int) -> int:
        if message_length == 0:
            return 0
        return message_length + self.redundancy

    def message_length(self, codeword_length: int) -> int:
        if codeword_length == 0:
            return 0
        return codeword_length - self.redundancy

    def encode(self, message: Sequence[int]) -> List[int]:
        """
        Encode a message of field elements.

        Args:
            message: k field elements, each in [0, p)

        Returns:
            Codeword of k + 2e field elements ([] for an empty message)

        Raises:
            InvalidFieldElementError: If a symbol is outside the field
            RedundancyTooLargeError: If k + 2e > p
        """
        message = self.field.check_all(message)
        k = len(message)
        if k == 0:
            return []

        n = k + self.redundancy
        if n > self.field.size:
            raise RedundancyTooLargeError(
                f"Codeword length {n} (k={k}, e={self.errors}) exceeds field size {self.field.size}",
                codeword_length=n,
                prime=self.prime,
            )

        if self.systematic:
            coeffs = lagrange_interpolate(list(range(k)), message, self.field)
        else:
            coeffs = message

        codeword = [poly_eval(coeffs, x, self.field) for x in range(n)]
        logger.debug("Encoded %d symbols into %d over GF(%d)", k, n, self.prime)
        return codeword

    def decode(self, codeword: Sequence[int]) -> List[int]:
        """
        Recover the message from a codeword with at most e corrupted symbols.

        Args:
            codeword: n field elements from encode(), possibly corrupted

        Returns:
            Recovered message of n - 2e field elements ([] for an empty codeword)

        Raises:
            InvalidFieldElementError: If a symbol is outside the field
            CodewordLengthError: If n <= 2e or n > p
            UncorrectableError: If the codeword is not within e errors of
                any valid encoding
        """
        received = self.field.check_all(codeword)
        n = len(received)
        if n == 0:
            return []

        if n <= self.redundancy:
            raise CodewordLengthError(
                f"Codeword length {n} must exceed redundancy 2e={self.redundancy}"
            )
        if n > self.field.size:
            raise CodewordLengthError(
                f"Codeword length {n} exceeds field size {self.field.size}"
            )

        k = n - self.redundancy
        e = self.errors
        p = self.prime

        # Unknowns: q_0..q_{k+e-1} then e_0..e_{e-1}; E is monic of degree e
        matrix = []
        rhs = []
        for x, y in enumerate(received):
            powers = [pow(x, j, p) for j in range(k + e + 1)]
            row = powers[:k + e] + [(-y * powers[j]) % p for j in range(e)]
            matrix.append(row)
            rhs.append((y * powers[e]) % p)

        logger.debug("Solving %dx%d Berlekamp-Welch system over GF(%d)", n, n, p)
        try:
            solution = solve(matrix, rhs, self.field)
        except InconsistentSystemError as exc:
            logger.info("Decoding failed: key equation has no solution")
            raise UncorrectableError(
                f"Codeword is not within {e} errors of a valid encoding",
                reason="singular_system",
                max_correctable=e,
            ) from exc

        numerator = solution[:k + e]
        locator = solution[k + e:] + [1]

        quotient, remainder = poly_divmod(numerator, locator, self.field)
        if remainder:
            logger.info("Decoding failed: Q(x) not divisible by E(x)")
            raise UncorrectableError(
                "Error locator does not divide numerator polynomial",
                reason="nonzero_remainder",
                max_correctable=e,
            )
        if degree(quotient) > k - 1:
            logger.info("Decoding failed: quotient degree %d > %d", degree(quotient), k - 1)
            raise UncorrectableError(
                f"Recovered polynomial has degree {degree(quotient)}, expected < {k}",
                reason="degree_too_large",
                max_correctable=e,
            )

        if self.systematic:
            return [poly_eval(quotient, x, self.field) for x in range(k)]
        return quotient + [0] * (k - len(quotient))

    def get_redundancy_overhead(self, message_length: int) -> float:
        """
        Calculate redundancy overhead as a fraction.

        Returns:
            Overhead ratio: (2e / k)
        """
        if message_length <= 0:
            raise ValueError(f"message_length must be > 0, got {message_length}")
        return self.redundancy / message_length

    def get_code_rate(self, message_length: int) -> float:
        """
        Calculate code rate.

        Returns:
            Code rate: k / n
        """
        if message_length <= 0:
            raise ValueError(f"message_length must be > 0, got {message_length}")
        return message_length / self.codeword_length(message_length)
