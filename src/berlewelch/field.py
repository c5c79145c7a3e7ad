# file: src/berlewelch/field.py

"""
Prime field arithmetic.

Field elements are plain integers kept in [0, p). The modulus is a
parameter of PrimeField so the codec can be reused with other alphabets.
"""

from typing import Iterable, List

from .errors import (
    ECCConfigurationError,
    FieldDivisionByZeroError,
    InvalidFieldElementError,
)

DEFAULT_PRIME = 67

# Products of two elements must fit in a signed 64-bit integer
MAX_PRIME = 2 ** 31


def is_prime(value: int) -> bool:
    """Trial division primality test (moduli here are small)."""
    if value < 2:
        return False
    if value % 2 == 0:
        return value == 2
    divisor = 3
    while divisor * divisor <= value:
        if value % divisor == 0:
            return False
        divisor += 2
    return True


class PrimeField:
    """
    The integers modulo a prime p.

    Parameters:
        prime (int): Field modulus (must be prime and below 2**31)

    Invariants:
        - Every value returned by an arithmetic method lies in [0, p)
        - check() rejects out-of-range values instead of reducing them
    """

    def __init__(self, prime: int = DEFAULT_PRIME):
        if isinstance(prime, bool) or not isinstance(prime, int):
            raise ECCConfigurationError(f"Field modulus must be an int, got {type(prime)}")
        if not is_prime(prime):
            raise ECCConfigurationError(f"Field modulus {prime} is not prime")
        if prime >= MAX_PRIME:
            raise ECCConfigurationError(
                f"Field modulus {prime} exceeds supported limit {MAX_PRIME}"
            )

        self.prime = prime
        self.size = prime

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.prime == other.prime

    def __hash__(self) -> int:
        return hash(self.prime)

    def reduce(self, value: int) -> int:
        """Construct an element from any integer (true modulo, never negative)."""
        return int(value) % self.prime

    def check(self, value) -> int:
        """
        Validate a value supplied at a public boundary.

        Raises:
            InvalidFieldElementError: If value is not an int in [0, p)
        """
        # numpy integers are accepted, bools are not
        if isinstance(value, bool) or not hasattr(value, "__index__"):
            raise InvalidFieldElementError(
                f"Field element must be an integer, got {type(value).__name__}",
                value=value,
                prime=self.prime,
            )
        value = int(value)
        if not 0 <= value < self.prime:
            raise InvalidFieldElementError(
                f"Value {value} is outside GF({self.prime})",
                value=value,
                prime=self.prime,
            )
        return value

    def check_all(self, values: Iterable) -> List[int]:
        return [self.check(v) for v in values]

    def elements(self) -> range:
        return range(self.prime)

    # Operands must already be field elements; use reduce() to construct one

    def add(self, a: int, b: int) -> int:
        return (self.check(a) + self.check(b)) % self.prime

    def sub(self, a: int, b: int) -> int:
        return (self.check(a) - self.check(b)) % self.prime

    def neg(self, a: int) -> int:
        return (-self.check(a)) % self.prime

    def mul(self, a: int, b: int) -> int:
        return (self.check(a) * self.check(b)) % self.prime

    def pow(self, a: int, exponent: int) -> int:
        a = self.check(a)
        if exponent < 0:
            return pow(self.inverse(a), -exponent, self.prime)
        return pow(a, exponent, self.prime)

    def inverse(self, a: int) -> int:
        """
        Multiplicative inverse via Fermat's little theorem: a^(p-2) mod p.

        Raises:
            InvalidFieldElementError: If a is outside [0, p)
            FieldDivisionByZeroError: If a is zero
        """
        a = self.check(a)
        if a == 0:
            raise FieldDivisionByZeroError(f"Zero has no inverse in GF({self.prime})")
        return pow(a, self.prime - 2, self.prime)

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inverse(b))
