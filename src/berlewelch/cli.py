# file: src/berlewelch/cli.py

"""
Command-line interface for encoding and decoding text messages.

Usage:
    berlewelch encode --errors 2 HelloWorld
    berlewelch decode --errors 2 <encoded text>
"""

import argparse
import logging
import sys
from typing import List, Optional

from .alphabet import ALPHABET, decode_text, encode_text, is_valid_message
from .config import clamp_errors, get_codec_params, get_error_limits, get_log_level, load_config
from .errors import ECCConfigurationError, ECCError, UncorrectableError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "WARNING"):
    """Configure logging for the command-line tool."""
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="berlewelch",
        description="Berlekamp-Welch error correction for short text messages",
        epilog=f"Messages may only contain the characters: {ALPHABET}",
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file (default: packaged config)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)
    for name, help_text in (('encode', 'Encode an original message'),
                            ('decode', 'Recover the original from an encoded message')):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('--errors', '-e', type=int, default=None,
                         help='Maximum number of correctable errors')
        sub.add_argument('--systematic', action=argparse.BooleanOptionalAction, default=None,
                         help='Encoded message starts with the original text '
                              '(default from config)')
        sub.add_argument('message', type=str, help='Message text')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        default_errors, _, default_systematic = get_codec_params(config)
        min_errors, max_errors = get_error_limits(config)
        log_level = get_log_level(config)
    except ECCConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(args.verbose, log_level)

    requested = args.errors if args.errors is not None else default_errors
    errors = clamp_errors(requested, min_errors, max_errors)
    if errors != requested:
        logger.warning("Error budget %d clamped to %d", requested, errors)
    systematic = default_systematic if args.systematic is None else args.systematic

    if not is_valid_message(args.message):
        print(f"Invalid message: only these characters are allowed: {ALPHABET}", file=sys.stderr)
        return 2

    try:
        if args.command == 'encode':
            print(encode_text(errors, args.message, systematic=systematic))
        else:
            print(decode_text(errors, args.message, systematic=systematic))
    except UncorrectableError as e:
        logger.info("Uncorrectable codeword: %s", e)
        print("Decoding Error", file=sys.stderr)
        return 1
    except ECCError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
