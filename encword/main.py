"""Encode text into RFC 2047 encoded-words for email header fields."""

from __future__ import annotations

import argparse
import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, Namespace, ArgumentTypeError
from collections.abc import Sequence
from string import Template
from typing import Optional

from . import __version__
from .config import EncoderConfig
from .exceptions import EncodingError
from .tables import MAX_USED_CHARACTERS

_log = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _EncwordArgumentParser(description=__doc__)
    parser.add_argument('--debug', action='store_true',
                        help='increase printed output for debugging')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('--logging-cfg', metavar='PATH',
                        help='config file for logging')
    parser.add_argument('--usage', choices=['text', 'word'], default='text',
                        help='replace a text token or a phrase word entity')
    parser.add_argument('--used-characters', metavar='NUM', default=0,
                        type=_get_used_characters,
                        help='characters already used up in the line')
    parser.add_argument('--charset', metavar='NAME',
                        help='the charset to transcode the text with')
    parser.add_argument('--encoding', choices=['B', 'Q'], type=str.upper,
                        help='the encoding of the encoded-words')
    parser.add_argument('--force', action='store_true',
                        help='encode even if the text does not need it')
    parser.add_argument('--check', action='store_true',
                        help='only check if the text needs to be encoded')
    parser.add_argument('text', nargs='*',
                        help='the text to encode, or read from stdin')
    args = parser.parse_args(argv)

    if args.logging_cfg:
        logging.config.fileConfig(args.logging_cfg)
    else:
        logging.basicConfig(level=logging.WARNING)
    if args.debug:
        logging.getLogger(__package__).setLevel(logging.DEBUG)

    try:
        config = EncoderConfig.from_args(args)
    except EncodingError as exc:
        parser.error(str(exc))
    text = _read_text(args)
    _log.debug('Read %d characters of text', len(text))
    if args.check:
        needs_encoding = config.needs_encoding(text)
        print('yes' if needs_encoding else 'no')
        return 0 if needs_encoding else 1
    try:
        print(config.encode(text))
    except (EncodingError, UnicodeEncodeError) as exc:
        parser.error(str(exc))
    return 0


def _read_text(args: Namespace) -> str:
    if args.text:
        return ' '.join(args.text)
    else:
        return sys.stdin.read().rstrip('\r\n')


def _get_used_characters(used: str) -> int:
    try:
        ret = int(used)
    except ValueError as exc:
        raise ArgumentTypeError(f'Invalid number: {used}') from exc
    if not 0 <= ret <= MAX_USED_CHARACTERS:
        raise ArgumentTypeError(
            f'Must be between 0 and {MAX_USED_CHARACTERS}: {used}')
    return ret


class _EncwordArgumentParser(ArgumentParser):

    def __init__(self, **extra) -> None:
        formatter_class = argparse.ArgumentDefaultsHelpFormatter
        super().__init__(fromfile_prefix_chars='@',
                         formatter_class=formatter_class,
                         **extra)

    def convert_arg_line_to_args(self, arg_line: str) -> list[str]:
        try:
            return [Template(arg_line).substitute(os.environ)]
        except KeyError as exc:
            raise EnvironmentError(
                f'Missing environment variable: ${exc.args[0]}') from exc
