# file: tests/test_ecc.py

"""
Unit tests for the Berlekamp-Welch encoder and decoder.

Test coverage:
    - Encode/decode round-trip
    - Error correction capability
    - Failure modes and exceptions
    - Metrics computation
    - Edge cases (empty messages, maximum redundancy, etc.)
    - Configuration-driven entry points
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from berlewelch import (
    encode,
    decode,
    ecc_encode,
    ecc_decode,
    count_symbol_errors,
    compute_ser,
    compute_redundancy_overhead,
    CodewordLengthError,
    ECCConfigurationError,
    InvalidFieldElementError,
    RedundancyTooLargeError,
    UncorrectableError,
)
from berlewelch.bw_codec import BerlekampWelchCodec
from berlewelch.metrics import is_within_budget
from berlewelch.testing_utils import corrupt_positions, inject_symbol_errors


# Default test configuration
DEFAULT_CONFIG = {
    'ecc': {
        'type': 'berlekamp_welch',
        'berlekamp_welch': {
            'prime': 67,
            'errors': 2,
            'systematic': False,
        }
    }
}

# "hi" in the 67-symbol alphabet
HI = [7, 8]
HI_CODEWORD = [7, 15, 23, 31]


def random_message(rng, length, prime=67):
    return [rng.randrange(prime) for _ in range(length)]


class TestBerlekampWelchCodec:
    """Test codec construction and parameters."""

    def test_initialization_valid(self):
        """Test valid codec initialization."""
        codec = BerlekampWelchCodec(errors=3)
        assert codec.errors == 3
        assert codec.prime == 67
        assert codec.redundancy == 6
        assert codec.max_correctable_errors == 3
        assert codec.max_message_length == 61

    def test_initialization_zero_errors(self):
        """Test that e < 1 raises error."""
        with pytest.raises(ECCConfigurationError, match=">= 1"):
            BerlekampWelchCodec(errors=0)

    def test_initialization_non_prime(self):
        """Test that a composite modulus is rejected."""
        with pytest.raises(ECCConfigurationError, match="not prime"):
            BerlekampWelchCodec(errors=1, prime=64)

    def test_lengths(self):
        """Test codeword/message length helpers."""
        codec = BerlekampWelchCodec(errors=2)
        assert codec.codeword_length(5) == 9
        assert codec.message_length(9) == 5
        assert codec.codeword_length(0) == 0
        assert codec.message_length(0) == 0

    def test_get_code_rate(self):
        """Test code rate calculation."""
        codec = BerlekampWelchCodec(errors=1)
        assert codec.get_code_rate(2) == 0.5

    def test_get_redundancy_overhead(self):
        """Test redundancy overhead calculation."""
        codec = BerlekampWelchCodec(errors=2)
        assert codec.get_redundancy_overhead(8) == 0.5

    def test_encode_does_not_mutate_input(self):
        codec = BerlekampWelchCodec(errors=1)
        message = list(HI)
        codec.encode(message)
        assert message == HI

    def test_decode_does_not_mutate_input(self):
        codec = BerlekampWelchCodec(errors=1)
        corrupted = [7, 15, 0, 31]
        codec.decode(corrupted)
        assert corrupted == [7, 15, 0, 31]


class TestEncode:
    """Test the encode() operation."""

    def test_known_codeword(self):
        """Message is the coefficient list evaluated at 0..n-1."""
        assert encode(1, HI) == HI_CODEWORD

    def test_length_invariant(self):
        rng = random.Random(1)
        for e in range(1, 6):
            for k in range(1, 10):
                assert len(encode(e, random_message(rng, k))) == k + 2 * e

    def test_empty_message(self):
        """Test that the empty message encodes to the empty codeword."""
        for e in (1, 2, 10, 50):
            assert encode(e, []) == []

    def test_systematic_prefix(self):
        """Systematic codewords start with the message itself."""
        message = [3, 1, 4, 1, 5, 9, 2, 6]
        codeword = encode(3, message, systematic=True)
        assert codeword[:len(message)] == message
        assert len(codeword) == len(message) + 6

    def test_redundancy_too_large(self):
        """Test that k + 2e > p raises RedundancyTooLargeError."""
        with pytest.raises(RedundancyTooLargeError) as exc_info:
            encode(1, [0] * 66)
        assert exc_info.value.codeword_length == 68
        assert exc_info.value.prime == 67

    def test_redundancy_at_field_size(self):
        """n == p is the largest codeword the field allows."""
        codeword = encode(1, [1] * 65)
        assert len(codeword) == 67

    def test_invalid_field_element(self):
        """Out-of-range symbols are rejected, not reduced."""
        with pytest.raises(InvalidFieldElementError):
            encode(1, [7, 67])
        with pytest.raises(InvalidFieldElementError):
            encode(1, [-1, 7])

    def test_other_prime(self):
        """The field modulus is a parameter."""
        codeword = encode(2, [1, 2, 3], prime=11)
        assert len(codeword) == 7
        assert all(0 <= value < 11 for value in codeword)
        with pytest.raises(RedundancyTooLargeError):
            encode(4, [1, 2, 3, 4], prime=11)


class TestDecode:
    """Test the decode() operation."""

    def test_roundtrip_no_errors(self):
        rng = random.Random(7)
        for e in range(1, 5):
            for k in range(1, 12):
                message = random_message(rng, k)
                assert decode(e, encode(e, message)) == message

    def test_roundtrip_systematic(self):
        rng = random.Random(8)
        for e in range(1, 4):
            message = random_message(rng, 10)
            codeword = encode(e, message, systematic=True)
            corrupted = inject_symbol_errors(codeword, e, seed=e)
            assert decode(e, corrupted, systematic=True) == message

    def test_correction_within_capability(self):
        """Any corruption of up to e positions is corrected."""
        rng = random.Random(42)
        for e in range(1, 6):
            for trial in range(10):
                message = random_message(rng, rng.randint(1, 15))
                codeword = encode(e, message)
                num_errors = rng.randint(0, e)
                corrupted = inject_symbol_errors(codeword, num_errors, seed=trial)
                assert count_symbol_errors(codeword, corrupted) == num_errors
                assert decode(e, corrupted) == message

    def test_every_single_error_for_hi(self):
        """Exhaustively flip each symbol of "hi" (e=1) to every other value."""
        for position in range(len(HI_CODEWORD)):
            for value in range(67):
                if value == HI_CODEWORD[position]:
                    continue
                corrupted = list(HI_CODEWORD)
                corrupted[position] = value
                assert decode(1, corrupted) == HI

    def test_two_errors_never_inconsistent(self):
        """
        With two errors and e=1 the decoder may fail or return another
        message, but a returned message must re-encode within 1 symbol of
        the received word.
        """
        rng = random.Random(3)
        for first in range(4):
            for second in range(first + 1, 4):
                for _ in range(20):
                    corrupted = corrupt_positions(
                        HI_CODEWORD, [first, second], seed=rng.randrange(10 ** 6)
                    )
                    try:
                        recovered = decode(1, corrupted)
                    except UncorrectableError:
                        continue
                    assert is_within_budget(encode(1, recovered), corrupted, 1)

    def test_uncorrectable_codeword(self):
        """No three of (0, 0, 1, 3) lie on a line, so no message is within 1 error."""
        with pytest.raises(UncorrectableError) as exc_info:
            decode(1, [0, 0, 1, 3])
        assert exc_info.value.max_correctable == 1
        assert exc_info.value.reason in ("singular_system", "nonzero_remainder", "degree_too_large")

    def test_empty_codeword(self):
        """The empty codeword decodes to the empty message."""
        assert decode(1, []) == []
        assert decode(5, []) == []

    def test_codeword_too_short(self):
        """Length-mismatch is a precondition failure, not padding."""
        with pytest.raises(CodewordLengthError):
            decode(1, [1, 2])
        with pytest.raises(CodewordLengthError):
            decode(3, [1, 2, 3, 4, 5])

    def test_codeword_too_long(self):
        with pytest.raises(CodewordLengthError):
            decode(1, [0] * 68)

    def test_invalid_field_element(self):
        with pytest.raises(InvalidFieldElementError):
            decode(1, [7, 15, 23, 100])

    def test_maximum_length_codeword(self):
        """Correction at the largest codeword the field allows."""
        rng = random.Random(11)
        message = random_message(rng, 61)
        codeword = encode(3, message)
        assert len(codeword) == 67
        corrupted = inject_symbol_errors(codeword, 3, seed=5)
        assert decode(3, corrupted) == message

    def test_all_errors_in_check_region(self):
        message = [10, 20, 30, 40]
        codeword = encode(2, message)
        corrupted = corrupt_positions(codeword, [6, 7], seed=1)
        assert decode(2, corrupted) == message

    def test_concurrent_calls(self):
        """Encode and decode are independent pure functions."""
        rng = random.Random(99)
        messages = [random_message(rng, 8) for _ in range(32)]

        def roundtrip(message):
            corrupted = inject_symbol_errors(encode(2, message), 2, seed=len(message))
            return decode(2, corrupted)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(roundtrip, messages))

        assert results == messages


class TestECCEncodeDecode:
    """Test config-driven ecc_encode/ecc_decode interface."""

    def test_encode_decode_roundtrip(self):
        """Test full encode/decode cycle."""
        original = [1, 2, 3, 4, 5]

        encoded = ecc_encode(original, DEFAULT_CONFIG)
        decoded = ecc_decode(encoded, DEFAULT_CONFIG)

        assert len(encoded) == 9
        assert decoded == original

    def test_encode_with_different_config(self):
        """Test encoding with custom parameters."""
        config = {
            'ecc': {
                'type': 'berlekamp_welch',
                'berlekamp_welch': {
                    'prime': 101,
                    'errors': 5,
                    'systematic': True,
                }
            }
        }

        original = [100, 0, 50]
        encoded = ecc_encode(original, config)
        corrupted = inject_symbol_errors(encoded, 5, prime=101, seed=4)

        assert encoded[:3] == original
        assert ecc_decode(corrupted, config) == original

    def test_encode_missing_config(self):
        """Test that missing config raises error."""
        with pytest.raises(ECCConfigurationError, match="Missing required"):
            ecc_encode([1], {})

    def test_decode_missing_params(self):
        config = {'ecc': {'type': 'berlekamp_welch'}}
        with pytest.raises(ECCConfigurationError, match="Missing required"):
            ecc_decode([1, 2, 3, 4, 5], config)

    def test_encode_unknown_ecc_type(self):
        """Test that unknown ECC type raises error."""
        config = {
            'ecc': {
                'type': 'reed_solomon',
            }
        }

        with pytest.raises(ECCConfigurationError, match="Unknown ECC type"):
            ecc_encode([1], config)

    def test_invalid_param_type(self):
        config = {
            'ecc': {
                'type': 'berlekamp_welch',
                'berlekamp_welch': {'errors': '2'},
            }
        }
        with pytest.raises(ECCConfigurationError, match="must be an integer"):
            ecc_encode([1], config)

    def test_failure_propagation(self):
        """Test that uncorrectable errors propagate explicitly."""
        config = {
            'ecc': {
                'type': 'berlekamp_welch',
                'berlekamp_welch': {'errors': 1},
            }
        }
        with pytest.raises(UncorrectableError):
            ecc_decode([0, 0, 1, 3], config)


class TestMetrics:
    """Test metrics computation functions."""

    def test_count_symbol_errors(self):
        assert count_symbol_errors([1, 2, 3], [1, 2, 3]) == 0
        assert count_symbol_errors([1, 2, 3], [0, 2, 4]) == 2

    def test_length_mismatch(self):
        """Test that length mismatch raises error."""
        with pytest.raises(ValueError, match="Length mismatch"):
            count_symbol_errors([1], [1, 2])

    def test_compute_ser(self):
        assert compute_ser([0, 0, 0, 0], [1, 0, 2, 0]) == 0.5
        assert compute_ser([], []) == 0.0

    def test_is_within_budget(self):
        assert is_within_budget([1, 2, 3], [1, 9, 3], 1)
        assert not is_within_budget([1, 2, 3], [9, 9, 3], 1)

    def test_compute_redundancy_overhead(self):
        """Test redundancy overhead calculation."""
        assert compute_redundancy_overhead(2, 6) == 200.0

    def test_compute_redundancy_overhead_invalid(self):
        """Test that invalid inputs raise errors."""
        with pytest.raises(ValueError):
            compute_redundancy_overhead(0, 100)

        with pytest.raises(ValueError):
            compute_redundancy_overhead(100, 50)


class TestErrorInjection:
    """Test error injection utilities."""

    def test_inject_symbol_errors_deterministic(self):
        """Test that error injection is deterministic with seed."""
        codeword = encode(3, list(range(20)))

        corrupted1 = inject_symbol_errors(codeword, 3, seed=42)
        corrupted2 = inject_symbol_errors(codeword, 3, seed=42)

        assert corrupted1 == corrupted2

    def test_inject_exact_count(self):
        codeword = encode(4, list(range(30)))
        for num_errors in range(0, 9):
            corrupted = inject_symbol_errors(codeword, num_errors, seed=num_errors)
            assert count_symbol_errors(codeword, corrupted) == num_errors
            assert all(0 <= value < 67 for value in corrupted)

    def test_inject_too_many(self):
        with pytest.raises(ValueError):
            inject_symbol_errors([1, 2], 3)

    def test_corrupt_positions(self):
        corrupted = corrupt_positions([0, 0, 0, 0], [1, 3, 3], seed=0)
        assert corrupted[0] == 0 and corrupted[2] == 0
        assert corrupted[1] != 0 and corrupted[3] != 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
