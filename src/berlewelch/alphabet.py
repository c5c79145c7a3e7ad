# file: src/berlewelch/alphabet.py

"""
Text alphabet for the 67-symbol demonstration field.

Maps a-z, A-Z, 0-9 and the punctuation "_-.,/" onto field values 0..66 and
back, and wraps encode/decode so they can be driven with plain strings.
"""

import string
from typing import List, Sequence

from .decoder import decode
from .encoder import encode
from .errors import InvalidFieldElementError, InvalidMessageError

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "_-.,/"
ALPHABET_SIZE = len(ALPHABET)

_SYMBOL_OF = {char: index for index, char in enumerate(ALPHABET)}


def is_valid_message(text: str) -> bool:
    """True if text is non-empty and uses only alphabet characters."""
    return bool(text) and all(char in _SYMBOL_OF for char in text)


def text_to_symbols(text: str) -> List[int]:
    try:
        return [_SYMBOL_OF[char] for char in text]
    except KeyError as e:
        raise InvalidMessageError(f"Unexpected character {e.args[0]!r} in message") from e


def symbols_to_text(symbols: Sequence[int]) -> str:
    chars = []
    for value in symbols:
        if isinstance(value, bool) or not 0 <= value < ALPHABET_SIZE:
            raise InvalidFieldElementError(
                f"Symbol {value!r} has no character in the alphabet",
                value=value,
                prime=ALPHABET_SIZE,
            )
        chars.append(ALPHABET[value])
    return "".join(chars)


def encode_text(errors: int, text: str, systematic: bool = False) -> str:
    """
    Encode text into an error-resistant string of len(text) + 2*errors characters.

    Example:
        >>> encode_text(1, "hi", systematic=True)
        'hijk'
    """
    if not text:
        return ""
    codeword = encode(errors, text_to_symbols(text), prime=ALPHABET_SIZE, systematic=systematic)
    return symbols_to_text(codeword)


def decode_text(errors: int, text: str, systematic: bool = False) -> str:
    """
    Recover the original text from a possibly corrupted encoded string.

    Raises:
        InvalidMessageError: If text contains characters outside the alphabet
        UncorrectableError: If the corruption exceeds the error budget
    """
    symbols = decode(errors, text_to_symbols(text), prime=ALPHABET_SIZE, systematic=systematic)
    return symbols_to_text(symbols)
