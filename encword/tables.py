"""Constant lookup tables used to produce encoded-words.

See Also:
    `RFC 2047 <https://tools.ietf.org/html/rfc2047>`_

"""

from __future__ import annotations

from typing import Final

__all__ = ['BASE64_TABLE', 'BASE64_PAD', 'ENCODE_Q_REGULAR',
           'ENCODE_Q_RESTRICTED', 'ENC_WORD_PREFIX', 'ENC_WORD_SUFFIX',
           'ENCODED_WORD_MAX_LENGTH', 'MAX_USED_CHARACTERS']

#: The standard base64 alphabet, indexed by 6-bit value.
BASE64_TABLE: Final = b'ABCDEFGHIJKLMNOPQRSTUVWXYZ' \
                      b'abcdefghijklmnopqrstuvwxyz' \
                      b'0123456789+/'

#: Pads the final base64 unit to four characters.
BASE64_PAD: Final = '='

#: Starts every encoded-word.
ENC_WORD_PREFIX: Final = '=?'

#: Ends every encoded-word.
ENC_WORD_SUFFIX: Final = '?='

#: The maximum length of an encoded-word, from RFC 2047 section 2.
ENCODED_WORD_MAX_LENGTH: Final = 75

#: The maximum number of characters a caller may have used up on the line.
MAX_USED_CHARACTERS: Final = 50


def _init_q_table(specials: str) -> tuple[bool, ...]:
    return tuple(i < 32 or i >= 127 or chr(i) in specials
                 for i in range(128))


#: Q encoding escapes for a ``text`` token, e.g. in a ``Subject`` header.
ENCODE_Q_REGULAR: Final = _init_q_table('=_?')

#: Q encoding escapes for a ``word`` entity inside a ``phrase``, which must
#: also escape the RFC 2822 specials.
ENCODE_Q_RESTRICTED: Final = _init_q_table(
    '=_?"#$%&\'(),.:;<>@[\\]^`{|}~')
