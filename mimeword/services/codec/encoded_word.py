"""
EncodedWordCodec: instance form of the RFC 2047 encoded-word codec.

The configuration (scheme, charset, split policy) is fixed at construction. Changing
the split policy yields a new codec via `with_split`, so one instance can be shared
by concurrent callers.
"""

from mimeword.config.codec.models import CodecConfig, Scheme
from mimeword.services.charsets.base import Charset, CharsetProvider
from mimeword.services.codec.decoder import decode_s
from mimeword.services.codec.encoder import as_charset, encode_s
from mimeword.services.codec.errors import InvalidArgument
from mimeword.services.codec.predicate import must_encode
from mimeword.services.codec.strategies import get_scheme_strategy


class EncodedWordCodec:
    """Encodes text to and decodes text from encoded-words with a fixed configuration."""

    def __init__(
        self,
        scheme: Scheme | str,
        charset: Charset | str,
        split: bool = True,
        provider: CharsetProvider | None = None,
    ):
        if charset is None:
            raise InvalidArgument("charset")
        if scheme is None:
            raise InvalidArgument("scheme")
        self._scheme = get_scheme_strategy(scheme).scheme
        self._charset = as_charset(charset, provider)
        self._split = bool(split)
        self._provider = provider

    @classmethod
    def from_config(cls, config: CodecConfig, provider: CharsetProvider | None = None) -> "EncodedWordCodec":
        """Build a codec from a validated CodecConfig. Raises UnknownCharset for bad names."""
        return cls(config.scheme, config.charset, split=config.split, provider=provider)

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    @property
    def charset(self) -> Charset:
        return self._charset

    @property
    def split(self) -> bool:
        """Whether long text is split into 30 character encoded-words."""
        return self._split

    def with_split(self, split: bool) -> "EncodedWordCodec":
        """Return a codec identical to this one except for the split policy."""
        return EncodedWordCodec(self._scheme, self._charset, split=split, provider=self._provider)

    def encode(self, text: str) -> str:
        """Encode text if it contains non-ASCII characters, otherwise return it unchanged."""
        if text is None:
            raise InvalidArgument("text")
        if not must_encode(text):
            return text
        return encode_s(self._scheme, self._charset, self._split, text)

    def decode(self, text: str) -> str:
        """Decode an encoded-word; invalid words are returned unchanged."""
        if text is None:
            raise InvalidArgument("text")
        return decode_s(text, self._provider)

    @staticmethod
    def must_encode(text: str) -> bool:
        return must_encode(text)

    def __repr__(self) -> str:
        return (
            f"EncodedWordCodec(scheme={self._scheme.value!r}, "
            f"charset={self._charset.name!r}, split={self._split!r})"
        )
