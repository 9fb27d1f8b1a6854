"""Encodes text into RFC 2047 encoded-words for use in email header fields.

The charset is the smallest of ``US-ASCII``, ``ISO-8859-1``, and ``UTF-8``
able to represent the text, and the encoding is whichever of ``B`` or ``Q``
is likely to be shorter, unless either is given explicitly. Text that does
not fit in one encoded-word is split into several separated by a space.

See Also:
    `RFC 2047 <https://tools.ietf.org/html/rfc2047>`_

"""

from __future__ import annotations

from typing import Optional, Union

from .charset import select_charset, mime_charset, transcode
from .exceptions import InvalidArgument
from .tables import MAX_USED_CHARACTERS
from .word import Encoding, Usage, select_encoding, word_prefix, build_word

__all__ = ['needs_encoding', 'encode_if_necessary', 'encode_encoded_word']


def _check_args(text: Optional[str], used_characters: int) -> None:
    if text is None:
        raise InvalidArgument('Text must not be None.')
    elif not 0 <= used_characters <= MAX_USED_CHARACTERS:
        raise InvalidArgument(
            f'Used characters must be between 0 and {MAX_USED_CHARACTERS}: '
            f'{used_characters!r}')


def needs_encoding(text: str, used_characters: int = 0) -> bool:
    """Determines if the text has to be encoded into an encoded-word, which
    is the case when it contains characters outside of printable ASCII, or a
    word (a run of characters other than space or tab) that would be longer
    than 78 characters, including the characters already used in the line.

    Args:
        text: The text to analyze.
        used_characters: Number of characters already used up in the line,
            between 0 and 50.

    Raises:
        :exc:`~encword.exceptions.InvalidArgument`

    """
    _check_args(text, used_characters)
    non_whitespace = used_characters
    for char in text:
        if char in ' \t':
            non_whitespace = 0
        else:
            non_whitespace += 1
            if non_whitespace > 78:
                return True
            charpoint = ord(char)
            if charpoint < 32 or charpoint >= 127:
                return True
    return False


def encode_if_necessary(text: str, usage: Union[Usage, str],
                        used_characters: int = 0) -> str:
    """Encodes the text into one or more encoded-words, but only if
    :func:`needs_encoding` says it has to be.

    Args:
        text: The text to encode.
        usage: Whether the encoded-word replaces a text token or a word
            entity.
        used_characters: Number of characters already used up in the line,
            between 0 and 50.

    Raises:
        :exc:`~encword.exceptions.InvalidArgument`

    """
    if needs_encoding(text, used_characters):
        return encode_encoded_word(text, usage, used_characters)
    else:
        return text


def encode_encoded_word(text: str, usage: Union[Usage, str],
                        used_characters: int = 0,
                        charset: Optional[str] = None,
                        encoding: Union[Encoding, str, None] = None) -> str:
    """Encodes the text into an encoded-word, or a sequence of encoded-words
    separated by a space if it does not fit in a single one.

    Args:
        text: The text to encode.
        usage: Whether the encoded-word replaces a text token or a word
            entity.
        used_characters: Number of characters already used up in the line,
            between 0 and 50.
        charset: The charset used to transcode the text, chosen
            automatically if not given.
        encoding: The encoding of the encoded-word, chosen automatically if
            not given.

    Raises:
        :exc:`~encword.exceptions.InvalidArgument`
        :exc:`~encword.exceptions.UnsupportedCharset`
        :exc:`~encword.exceptions.EncodedWordTooLong`

    """
    _check_args(text, used_characters)
    usage = Usage.of(usage)
    if charset is None:
        charset = select_charset(text)
    mime_name = mime_charset(charset)
    data = transcode(text, charset)
    if encoding is None:
        encoding = select_encoding(data, usage)
    else:
        encoding = Encoding.of(encoding)
    prefix = word_prefix(mime_name, encoding)
    return build_word(prefix, text, encoding, usage, used_characters,
                      charset, data)
