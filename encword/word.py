"""Produces the body and envelope of RFC 2047 encoded-words.

See Also:
    `RFC 2047 4 <https://tools.ietf.org/html/rfc2047#section-4>`_

"""

from __future__ import annotations

import enum
import logging
from typing import Optional, Union

from .charset import transcode
from .exceptions import InvalidArgument, EncodedWordTooLong
from .tables import BASE64_TABLE, BASE64_PAD, ENCODE_Q_REGULAR, \
    ENCODE_Q_RESTRICTED, ENC_WORD_PREFIX, ENC_WORD_SUFFIX, \
    ENCODED_WORD_MAX_LENGTH

__all__ = ['Encoding', 'Usage', 'select_encoding', 'encode_b', 'encode_q',
           'b_encoded_length', 'q_encoded_length', 'word_prefix',
           'build_word']

_log = logging.getLogger(__name__)


class Encoding(enum.Enum):
    """The two encodings an encoded-word may use."""

    #: Identical to the base64 encoding of RFC 2045.
    B = 'B'

    #: Similar to the quoted-printable encoding of RFC 2045.
    Q = 'Q'

    @classmethod
    def of(cls, value: Union[Encoding, str]) -> Encoding:
        """Return the encoding for a value, which may be given by its letter
        in either case.

        Args:
            value: The encoding or its letter.

        Raises:
            :exc:`~encword.exceptions.InvalidArgument`

        """
        if isinstance(value, Encoding):
            return value
        try:
            return cls(value.upper())
        except (AttributeError, ValueError) as exc:
            raise InvalidArgument(f'Invalid encoding: {value!r}') from exc


class Usage(enum.Enum):
    """Indicates the intended usage of an encoded-word, which decides what
    must be escaped by the Q encoding.

    """

    #: Replaces a ``text`` token in any ``Subject`` or ``Comments`` header.
    TEXT_TOKEN = enum.auto()

    #: Replaces a ``word`` entity within a ``phrase``, for example the
    #: display name preceding an address in a ``From`` or ``To`` header.
    WORD_ENTITY = enum.auto()

    @classmethod
    def of(cls, value: Union[Usage, str]) -> Usage:
        """Return the usage for a value, which may be its name in either case
        or one of the short names ``text`` and ``word``.

        Args:
            value: The usage or its name.

        Raises:
            :exc:`~encword.exceptions.InvalidArgument`

        """
        if isinstance(value, Usage):
            return value
        try:
            name = value.upper()
            return cls[_usage_aliases.get(name, name)]
        except (AttributeError, KeyError) as exc:
            raise InvalidArgument(f'Invalid usage: {value!r}') from exc

    @property
    def q_table(self) -> tuple[bool, ...]:
        """The table of bytes below ``0x80`` that the Q encoding escapes."""
        if self == Usage.TEXT_TOKEN:
            return ENCODE_Q_REGULAR
        else:
            return ENCODE_Q_RESTRICTED


_usage_aliases = {'TEXT': 'TEXT_TOKEN', 'WORD': 'WORD_ENTITY'}


def select_encoding(data: bytes, usage: Usage) -> Encoding:
    """Choose the encoding that is likely to produce the shorter result. Once
    more than 30% of the bytes would need escaping in the Q encoding, the
    fixed expansion of the B encoding wins.

    Args:
        data: The transcoded text.
        usage: The intended usage of the encoded-word.

    """
    if not data:
        return Encoding.Q
    q_table = usage.q_table
    escaped = sum(1 for byte in data if byte >= 0x80 or q_table[byte])
    percentage = escaped * 100 // len(data)
    return Encoding.B if percentage > 30 else Encoding.Q


def encode_b(data: bytes) -> str:
    """Encode the bytes with the B encoding.

    Args:
        data: The bytes to encode.

    """
    ret: list[str] = []
    end = len(data)
    idx = 0
    while idx < end - 2:
        group = data[idx] << 16 | data[idx + 1] << 8 | data[idx + 2]
        ret.extend(chr(BASE64_TABLE[group >> shift & 0x3f])
                   for shift in (18, 12, 6, 0))
        idx += 3
    if idx == end - 2:
        group = data[idx] << 16 | data[idx + 1] << 8
        ret.extend(chr(BASE64_TABLE[group >> shift & 0x3f])
                   for shift in (18, 12, 6))
        ret.append(BASE64_PAD)
    elif idx == end - 1:
        group = data[idx] << 16
        ret.extend(chr(BASE64_TABLE[group >> shift & 0x3f])
                   for shift in (18, 12))
        ret.append(BASE64_PAD * 2)
    return ''.join(ret)


def encode_q(data: bytes, usage: Usage) -> str:
    """Encode the bytes with the Q encoding.

    Args:
        data: The bytes to encode.
        usage: The intended usage of the encoded-word.

    """
    q_table = usage.q_table
    ret: list[str] = []
    for byte in data:
        if byte == 0x20:
            ret.append('_')
        elif byte >= 0x80 or q_table[byte]:
            ret.append('=%02X' % byte)
        else:
            ret.append(chr(byte))
    return ''.join(ret)


def b_encoded_length(data: bytes) -> int:
    """The length of :func:`encode_b` without encoding."""
    return (len(data) + 2) // 3 * 4


def q_encoded_length(data: bytes, usage: Usage) -> int:
    """The length of :func:`encode_q` without encoding."""
    q_table = usage.q_table
    return sum(3 if byte != 0x20 and (byte >= 0x80 or q_table[byte]) else 1
               for byte in data)


def word_prefix(mime_charset: str, encoding: Encoding) -> str:
    """Build the start of an encoded-word, up to its encoded text.

    Args:
        mime_charset: The MIME name of the charset.
        encoding: The encoding of the text.

    """
    return f'{ENC_WORD_PREFIX}{mime_charset}?{encoding.value}?'


def build_word(prefix: str, text: str, encoding: Encoding,
               usage: Optional[Usage], used_characters: int, charset: str,
               data: bytes) -> str:
    """Build the encoded-word for the text. If it does not fit in the line,
    the text is split in half and each half is built on its own, the second
    starting a new line, joined with a space.

    Args:
        prefix: The encoded-word prefix, from :func:`word_prefix`.
        text: The text being encoded.
        encoding: The encoding used by the prefix.
        usage: The intended usage of the encoded-word, required by the
            Q encoding.
        used_characters: Number of characters already used up in the line.
        charset: The charset used to transcode the text.
        data: The text transcoded with the charset.

    Raises:
        :exc:`~encword.exceptions.EncodedWordTooLong`

    """
    if encoding == Encoding.B:
        encoded_length = b_encoded_length(data)
    elif usage is None:
        raise InvalidArgument('The Q encoding requires a usage.')
    else:
        encoded_length = q_encoded_length(data, usage)
    total_length = len(prefix) + encoded_length + len(ENC_WORD_SUFFIX)
    if not text or total_length <= ENCODED_WORD_MAX_LENGTH - used_characters:
        if encoding == Encoding.Q and usage is not None:
            body = encode_q(data, usage)
        else:
            body = encode_b(data)
        return prefix + body + ENC_WORD_SUFFIX
    elif len(text) == 1 and used_characters == 0:
        raise EncodedWordTooLong(text, total_length)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug('Splitting %d characters, encoded-word length %d '
                   'exceeds %d', len(text), total_length,
                   ENCODED_WORD_MAX_LENGTH - used_characters)
    half = len(text) // 2
    part1, part2 = text[:half], text[half:]
    word1 = build_word(prefix, part1, encoding, usage, used_characters,
                       charset, transcode(part1, charset))
    word2 = build_word(prefix, part2, encoding, usage, 0,
                       charset, transcode(part2, charset))
    return word1 + ' ' + word2
