# file: src/berlewelch/encoder.py

"""
ECC encoding entry points.

Provides encode() for direct use and ecc_encode() driven by a config dict.
"""

from typing import Any, Dict, List, Sequence

from .bw_codec import BerlekampWelchCodec
from .config import get_codec_params
from .errors import ECCConfigurationError
from .field import DEFAULT_PRIME


def encode(
    errors: int,
    message: Sequence[int],
    prime: int = DEFAULT_PRIME,
    systematic: bool = False
) -> List[int]:
    """
    Encode a message so that up to `errors` corrupted symbols can be corrected.

    Args:
        errors: Error budget e (>= 1)
        message: k field elements in [0, prime)
        prime: Field modulus
        systematic: Place the message itself at the start of the codeword

    Returns:
        Codeword of k + 2e field elements ([] for an empty message)

    Raises:
        ECCConfigurationError: If errors < 1 or prime is not a prime
        InvalidFieldElementError: If a message symbol is outside the field
        RedundancyTooLargeError: If k + 2e > prime

    Example:
        >>> encode(1, [7, 8])
        [7, 15, 23, 31]
    """
    codec = BerlekampWelchCodec(errors, prime=prime, systematic=systematic)
    return codec.encode(message)


def ecc_encode(message: Sequence[int], config: Dict[str, Any]) -> List[int]:
    """
    Encode a message with parameters taken from configuration.

    Args:
        message: Field elements to protect
        config: Configuration dictionary with 'ecc' section

    Returns:
        Codeword

    Raises:
        ECCConfigurationError: If configuration is invalid

    Configuration Schema:
        config['ecc']['type']: 'berlekamp_welch' (required)
        config['ecc']['berlekamp_welch']['errors']: Error budget (default: 2)
        config['ecc']['berlekamp_welch']['prime']: Field modulus (default: 67)
        config['ecc']['berlekamp_welch']['systematic']: Layout (default: False)
    """
    try:
        ecc_type = config['ecc']['type']
    except (KeyError, TypeError) as e:
        raise ECCConfigurationError(f"Missing required config key: {e}") from e

    if ecc_type != 'berlekamp_welch':
        raise ECCConfigurationError(f"Unknown ECC type: {ecc_type}")

    errors, prime, systematic = get_codec_params(config)
    return encode(errors, message, prime=prime, systematic=systematic)
