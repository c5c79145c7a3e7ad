# file: src/berlewelch/__init__.py

"""
Berlekamp-Welch Error Correction

Encodes short messages over a prime field so that up to e corrupted
symbols can be corrected, and decodes them with the Berlekamp-Welch
linear-algebra procedure.

Public API:
    - encode(errors, message) -> list[int]
    - decode(errors, codeword) -> list[int]
    - ecc_encode(message, config) / ecc_decode(codeword, config)
    - encode_text(errors, text) / decode_text(errors, text)
"""

from .encoder import encode, ecc_encode
from .decoder import decode, ecc_decode
from .bw_codec import BerlekampWelchCodec
from .field import PrimeField, DEFAULT_PRIME
from .alphabet import encode_text, decode_text, is_valid_message
from .config import load_config
from .metrics import count_symbol_errors, compute_ser, compute_redundancy_overhead
from .errors import (
    ECCError,
    ECCEncodingError,
    ECCDecodingError,
    ECCConfigurationError,
    InvalidFieldElementError,
    RedundancyTooLargeError,
    UncorrectableError,
    CodewordLengthError,
    FieldDivisionByZeroError,
    InconsistentSystemError,
    InvalidMessageError,
)

__version__ = "1.0.0"

__all__ = [
    "encode",
    "decode",
    "ecc_encode",
    "ecc_decode",
    "BerlekampWelchCodec",
    "PrimeField",
    "DEFAULT_PRIME",
    "encode_text",
    "decode_text",
    "is_valid_message",
    "load_config",
    "count_symbol_errors",
    "compute_ser",
    "compute_redundancy_overhead",
    "ECCError",
    "ECCEncodingError",
    "ECCDecodingError",
    "ECCConfigurationError",
    "InvalidFieldElementError",
    "RedundancyTooLargeError",
    "UncorrectableError",
    "CodewordLengthError",
    "FieldDivisionByZeroError",
    "InconsistentSystemError",
    "InvalidMessageError",
]
