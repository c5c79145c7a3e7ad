# file: src/berlewelch/errors.py

"""
ECC-specific exception hierarchy.

All exceptions inherit from ECCError for unified handling.
"""


class ECCError(Exception):
    """Base exception for all ECC-related errors."""
    pass


class ECCEncodingError(ECCError):
    """Raised when encoding fails."""
    pass


class ECCDecodingError(ECCError):
    """Raised when decoding fails."""
    pass


class ECCConfigurationError(ECCError):
    """Raised when ECC configuration is invalid."""
    pass


class InvalidFieldElementError(ECCError, ValueError):
    """Raised when a value outside [0, p) reaches a public entry point."""

    def __init__(self, message: str, value=None, prime: int = None):
        super().__init__(message)
        self.value = value
        self.prime = prime


class FieldDivisionByZeroError(ECCError, ZeroDivisionError):
    """Raised when the inverse of zero is requested."""
    pass


class InconsistentSystemError(ECCError):
    """Raised when a linear system over the field has no solution."""
    pass


class RedundancyTooLargeError(ECCEncodingError):
    """Raised when k + 2e exceeds the number of field elements."""

    def __init__(self, message: str, codeword_length: int = None, prime: int = None):
        super().__init__(message)
        self.codeword_length = codeword_length
        self.prime = prime


class InvalidMessageError(ECCEncodingError):
    """Raised when text contains characters outside the alphabet."""
    pass


class CodewordLengthError(ECCDecodingError):
    """Raised when a codeword length cannot belong to the error budget."""
    pass


class UncorrectableError(ECCDecodingError):
    """Raised when error correction capability is exceeded."""
    
    def __init__(self, message: str, reason: str = None, max_correctable: int = None):
        super().__init__(message)
        self.reason = reason
        self.max_correctable = max_correctable
