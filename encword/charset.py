"""Chooses the charset used to transcode text for an encoded-word, and
resolves charsets to the names registered for use in MIME.

See Also:
    `IANA Character Sets
    <https://www.iana.org/assignments/character-sets/>`_

"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Final

from .exceptions import UnsupportedCharset

__all__ = ['US_ASCII', 'ISO_8859_1', 'UTF_8', 'select_charset',
           'mime_charset', 'transcode']

#: Used when every character is printable or control ASCII.
US_ASCII: Final = 'us-ascii'

#: Maps code points ``0x00`` to ``0xFF`` directly to the same byte values.
ISO_8859_1: Final = 'iso-8859-1'

#: Represents any text, used when nothing smaller will do.
UTF_8: Final = 'utf-8'

_mime_names: Mapping[str, str] = {
    'ascii': 'US-ASCII',
    'utf-8': 'UTF-8',
    'utf-7': 'UTF-7',
    'utf-16': 'UTF-16',
    'utf-16-be': 'UTF-16BE',
    'utf-16-le': 'UTF-16LE',
    'utf-32': 'UTF-32',
    'utf-32-be': 'UTF-32BE',
    'utf-32-le': 'UTF-32LE',
    'iso8859-1': 'ISO-8859-1',
    'iso8859-2': 'ISO-8859-2',
    'iso8859-3': 'ISO-8859-3',
    'iso8859-4': 'ISO-8859-4',
    'iso8859-5': 'ISO-8859-5',
    'iso8859-6': 'ISO-8859-6',
    'iso8859-7': 'ISO-8859-7',
    'iso8859-8': 'ISO-8859-8',
    'iso8859-9': 'ISO-8859-9',
    'iso8859-10': 'ISO-8859-10',
    'iso8859-13': 'ISO-8859-13',
    'iso8859-14': 'ISO-8859-14',
    'iso8859-15': 'ISO-8859-15',
    'iso8859-16': 'ISO-8859-16',
    'cp1250': 'windows-1250',
    'cp1251': 'windows-1251',
    'cp1252': 'windows-1252',
    'cp1253': 'windows-1253',
    'cp1254': 'windows-1254',
    'cp1255': 'windows-1255',
    'cp1256': 'windows-1256',
    'cp1257': 'windows-1257',
    'cp1258': 'windows-1258',
    'cp437': 'IBM437',
    'cp850': 'IBM850',
    'cp852': 'IBM852',
    'cp866': 'IBM866',
    'koi8-r': 'KOI8-R',
    'koi8-u': 'KOI8-U',
    'mac-roman': 'macintosh',
    'tis-620': 'TIS-620',
    'shift_jis': 'Shift_JIS',
    'euc_jp': 'EUC-JP',
    'iso2022_jp': 'ISO-2022-JP',
    'iso2022_jp_2': 'ISO-2022-JP-2',
    'euc_kr': 'EUC-KR',
    'iso2022_kr': 'ISO-2022-KR',
    'big5': 'Big5',
    'big5hkscs': 'Big5-HKSCS',
    'gb2312': 'GB2312',
    'gbk': 'GBK',
    'gb18030': 'GB18030',
    'hz': 'HZ-GB-2312'}


def select_charset(text: str) -> str:
    """Return the smallest of ``US-ASCII``, ``ISO-8859-1``, or ``UTF-8`` that
    can represent the text without loss.

    Args:
        text: The text to be encoded.

    """
    is_usascii = True
    for char in text:
        charpoint = ord(char)
        if charpoint > 0xff:
            return UTF_8
        elif charpoint > 0x7f:
            is_usascii = False
    return US_ASCII if is_usascii else ISO_8859_1


def mime_charset(charset: str) -> str:
    """Return the name registered for use in MIME of a charset known to the
    Python codec registry.

    Args:
        charset: The charset name, or any alias of it.

    Raises:
        :exc:`~encword.exceptions.UnsupportedCharset`

    """
    try:
        codec = codecs.lookup(charset)
    except LookupError as exc:
        raise UnsupportedCharset(charset) from exc
    try:
        return _mime_names[codec.name]
    except KeyError as exc:
        raise UnsupportedCharset(charset) from exc


def transcode(text: str, charset: str) -> bytes:
    """Encode the text into bytes using the charset.

    Args:
        text: The text to encode.
        charset: The charset name.

    Raises:
        UnicodeEncodeError: The charset cannot represent the text.

    """
    return text.encode(charset)
