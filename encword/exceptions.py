"""Module containing the exceptions that may be raised by encword."""

from __future__ import annotations

from typing import Final

__all__ = ['EncodingError', 'InvalidArgument', 'UnsupportedCharset',
           'EncodedWordTooLong']


class EncodingError(Exception):
    """The base exception for all errors raised while producing
    encoded-words.

    """
    pass


class InvalidArgument(EncodingError, ValueError):
    """Indicates an argument was rejected before any encoding work began, for
    example a missing text or a used characters count out of range.

    """
    pass


class UnsupportedCharset(EncodingError, ValueError):
    """The charset is unknown, or has no name registered for use in MIME
    headers.

    Args:
        charset: The charset name given by the caller.

    """

    __slots__ = ['charset']

    def __init__(self, charset: str) -> None:
        super().__init__(f'Unsupported charset: {charset!r}')
        self.charset: Final = charset


class EncodedWordTooLong(EncodingError, ValueError):
    """A single character could not fit within one encoded-word, so the text
    could not be split any further.

    Args:
        text: The text that could not be split.
        length: The length the encoded-word would have had.

    """

    __slots__ = ['text', 'length']

    def __init__(self, text: str, length: int) -> None:
        super().__init__(f'Encoded-word of {length} characters exceeds '
                         f'the limit for {text!r}')
        self.text: Final = text
        self.length: Final = length
