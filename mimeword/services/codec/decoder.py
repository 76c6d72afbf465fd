"""
Decode pipeline: tokenize -> resolve charset -> scheme dispatch -> charset convert.
Any failed step returns the original word unchanged (RFC 2047 §6.3); nothing is raised
for malformed input and no partial decode is returned.
"""

from mimeword.config.logging import get_logger
from mimeword.services.charsets.base import Charset, CharsetProvider
from mimeword.services.charsets.codecs_provider import get_charset_provider
from mimeword.services.codec.errors import InvalidArgument, UnknownCharset
from mimeword.services.codec.steps import Step, fail, succeed
from mimeword.services.codec.strategies import get_scheme_strategy, scheme_from_letter

logger = get_logger(__name__)

# '=' charset[*language] scheme encoded-text '='
_TOKEN_COUNT = 5


def tokenize(word: str) -> Step[tuple[str, str, str]]:
    """Split on '?' into (charset, scheme letter, encoded-text). Language tag is discarded."""
    parts = word.split("?")
    if len(parts) != _TOKEN_COUNT:
        return fail(f"expected {_TOKEN_COUNT} '?' tokens, got {len(parts)}")
    charset_name = parts[1].split("*", 1)[0]
    return succeed((charset_name, parts[2], parts[3]))


def resolve_charset(provider: CharsetProvider, name: str) -> Step[Charset]:
    try:
        return succeed(provider.resolve(name))
    except UnknownCharset as e:
        return fail(str(e))


def convert_to_text(charset: Charset, data: bytes) -> Step[str]:
    try:
        return succeed(charset.to_text(data))
    except ValueError as e:
        # UnicodeDecodeError is a ValueError
        return fail(f"{charset.name} conversion failed: {type(e).__name__}")


def decode_steps(word: str, provider: CharsetProvider) -> Step[str]:
    """Run the decode pipeline, stopping at the first failed step."""
    tokens = tokenize(word)
    if not tokens.ok:
        return tokens
    charset_name, letter, payload = tokens.value

    scheme = scheme_from_letter(letter)
    if scheme is None:
        return fail(f"unknown scheme {letter!r}")

    charset = resolve_charset(provider, charset_name)
    if not charset.ok:
        return charset

    data = get_scheme_strategy(scheme).decode_payload(payload)
    if not data.ok:
        return data

    return convert_to_text(charset.value, data.value)


def decode_s(word: str, provider: CharsetProvider | None = None) -> str:
    """
    Decode a single encoded-word `=?charset[*language]?Q|B?encoded-text?=`.
    Returns the word unchanged when it is not a valid, recognized encoded-word.
    Raises InvalidArgument when word is None.
    """
    if word is None:
        raise InvalidArgument("word")
    outcome = decode_steps(word, provider or get_charset_provider())
    if not outcome.ok:
        logger.debug("Encoded-word left as is", extra={"reason": outcome.reason})
        return word
    return outcome.value
