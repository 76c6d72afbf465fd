"""Must-encode check: only non-ASCII text needs an encoded-word."""

from mimeword.services.codec.errors import InvalidArgument


def must_encode(text: str) -> bool:
    """Return True if any character of text is above 127."""
    if text is None:
        raise InvalidArgument("text")
    return any(ord(c) > 127 for c in text)
