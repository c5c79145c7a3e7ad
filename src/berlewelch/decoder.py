# file: src/berlewelch/decoder.py

"""
ECC decoding entry points.

Provides decode() and the config-driven ecc_decode() with explicit failure
handling: an uncorrectable codeword raises, it is never guessed at.
"""

from typing import Any, Dict, List, Sequence

from .bw_codec import BerlekampWelchCodec
from .config import get_codec_params
from .errors import ECCConfigurationError
from .field import DEFAULT_PRIME


def decode(
    errors: int,
    codeword: Sequence[int],
    prime: int = DEFAULT_PRIME,
    systematic: bool = False
) -> List[int]:
    """
    Recover the message from a codeword produced by encode().

    The error budget and layout must match the ones used for encoding.
    A mismatched budget is not detectable and may either fail or return
    a wrong message.

    Args:
        errors: Error budget e used at encode time
        codeword: n field elements, at most e of them corrupted
        prime: Field modulus
        systematic: Layout used at encode time

    Returns:
        Message of n - 2e field elements ([] for an empty codeword)

    Raises:
        ECCConfigurationError: If errors < 1 or prime is not a prime
        InvalidFieldElementError: If a symbol is outside the field
        CodewordLengthError: If n <= 2e or n > prime
        UncorrectableError: If more errors occurred than can be corrected

    Error Handling:
        - If errors <= e: always returns the original message
        - If errors > e: raises UncorrectableError, or in rare cases returns
          another message whose own encoding is within e symbols of the input
    """
    codec = BerlekampWelchCodec(errors, prime=prime, systematic=systematic)
    return codec.decode(codeword)


def ecc_decode(codeword: Sequence[int], config: Dict[str, Any]) -> List[int]:
    """
    Decode a codeword with parameters taken from configuration.

    See ecc_encode() for the configuration schema.
    """
    try:
        ecc_type = config['ecc']['type']
    except (KeyError, TypeError) as e:
        raise ECCConfigurationError(f"Missing required config key: {e}") from e

    if ecc_type != 'berlekamp_welch':
        raise ECCConfigurationError(f"Unknown ECC type: {ecc_type}")

    errors, prime, systematic = get_codec_params(config)
    return decode(errors, codeword, prime=prime, systematic=systematic)
