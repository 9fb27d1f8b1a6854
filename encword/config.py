
from __future__ import annotations

from argparse import Namespace
from collections.abc import Mapping
from typing import Any, Final, Optional, TypeVar, Union

from .charset import mime_charset
from .encoder import encode_encoded_word, needs_encoding
from .exceptions import InvalidArgument
from .tables import MAX_USED_CHARACTERS
from .word import Encoding, Usage

__all__ = ['ConfigT', 'EncoderConfig']

#: Type variable with an upper bound of :class:`EncoderConfig`.
ConfigT = TypeVar('ConfigT', bound='EncoderConfig')


class EncoderConfig:
    """Configurable settings that control how text is encoded into
    encoded-words.

    Args:
        usage: Whether the encoded-words replace text tokens or word
            entities.
        used_characters: Number of characters already used up in the line
            before the encoded text.
        charset: The charset used to transcode text, chosen automatically if
            not given.
        encoding: The encoding of the encoded-words, chosen automatically if
            not given.
        force: Encode text even if it does not need to be encoded.
        debug: If true, the caller wants extra output for debugging.

    Raises:
        :exc:`~encword.exceptions.InvalidArgument`
        :exc:`~encword.exceptions.UnsupportedCharset`

    """

    def __init__(self, *,
                 usage: Union[Usage, str] = Usage.TEXT_TOKEN,
                 used_characters: int = 0,
                 charset: Optional[str] = None,
                 encoding: Union[Encoding, str, None] = None,
                 force: bool = False,
                 debug: bool = False) -> None:
        super().__init__()
        if not 0 <= used_characters <= MAX_USED_CHARACTERS:
            raise InvalidArgument(
                f'Used characters must be between 0 and '
                f'{MAX_USED_CHARACTERS}: {used_characters!r}')
        if charset is not None:
            mime_charset(charset)
        self.usage: Final = Usage.of(usage)
        self.used_characters: Final = used_characters
        self.charset: Final = charset
        self.encoding: Final = None if encoding is None \
            else Encoding.of(encoding)
        self.force: Final = force
        self.debug: Final = debug

    @classmethod
    def parse_args(cls, args: Namespace) -> Mapping[str, Any]:
        """Given command-line arguments, return a dictionary of keywords that
        should be passed in to the :class:`EncoderConfig` (or sub-class)
        constructor. Sub-classes should override this method as needed.

        Args:
            args: The arguments parsed from the command-line.

        """
        return {}

    @classmethod
    def from_args(cls: type[ConfigT], args: Namespace,
                  **overrides: Any) -> ConfigT:
        """Build and return a new :class:`EncoderConfig` using command-line
        arguments.

        Args:
            args: The arguments parsed from the command-line.
            overrides: Override keyword arguments to the config constructor.

        """
        parsed_args = cls.parse_args(args)
        kwargs: dict[str, Any] = {
            'usage': args.usage,
            'used_characters': args.used_characters,
            'charset': args.charset,
            'encoding': args.encoding,
            'force': args.force,
            'debug': args.debug}
        kwargs.update(parsed_args)
        kwargs.update(overrides)
        return cls(**kwargs)

    def needs_encoding(self, text: str) -> bool:
        """Check if the text has to be encoded.

        See Also:
            :func:`~encword.encoder.needs_encoding`

        Args:
            text: The text to check.

        """
        return needs_encoding(text, self.used_characters)

    def encode(self, text: str) -> str:
        """Encode the text using the configured settings. Unless
        :attr:`.force` is set, the text is only encoded if it has to be, and
        the configured charset and encoding only apply when it is.

        Args:
            text: The text to encode.

        """
        if self.force or self.needs_encoding(text):
            return encode_encoded_word(text, self.usage, self.used_characters,
                                       self.charset, self.encoding)
        else:
            return text
