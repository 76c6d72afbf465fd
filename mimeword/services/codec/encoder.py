"""
Encode pipeline: must-encode check -> chunk splitter -> per-chunk Q/B encoder -> folding joiner.
Pure function of its arguments.
"""

from mimeword.config.codec.models import Scheme
from mimeword.services.charsets.base import Charset, CharsetProvider
from mimeword.services.charsets.codecs_provider import get_charset_provider
from mimeword.services.codec.errors import InvalidArgument
from mimeword.services.codec.predicate import must_encode
from mimeword.services.codec.splitter import fold_words, split_chunks
from mimeword.services.codec.strategies import get_scheme_strategy


def as_charset(charset: Charset | str, provider: CharsetProvider | None = None) -> Charset:
    """Return a Charset handle, resolving a name through the provider. Raises UnknownCharset."""
    if charset is None:
        raise InvalidArgument("charset")
    if isinstance(charset, Charset):
        return charset
    return (provider or get_charset_provider()).resolve(charset)


def encode_words(scheme: Scheme | str, charset: Charset, split: bool, text: str) -> list[str]:
    """Encode text into encoded-words, one per chunk, in source order."""
    strategy = get_scheme_strategy(scheme)
    return [strategy.wrap(charset.name, charset.to_bytes(chunk)) for chunk in split_chunks(text, split)]


def encode_s(
    scheme: Scheme | str,
    charset: Charset | str,
    split: bool,
    text: str,
    provider: CharsetProvider | None = None,
) -> str:
    """
    Encode text as RFC 2047 encoded-words if it contains non-ASCII characters,
    otherwise return it unchanged. Multiple words are folded with CRLF SPACE.
    Raises InvalidArgument when scheme, charset or text is None.
    """
    if scheme is None:
        raise InvalidArgument("scheme")
    if charset is None:
        raise InvalidArgument("charset")
    if text is None:
        raise InvalidArgument("text")
    if not must_encode(text):
        return text
    handle = as_charset(charset, provider)
    return fold_words(encode_words(scheme, handle, split, text))
