"""Default charset provider backed by Python's codec registry."""

import codecs
from functools import lru_cache

from mimeword.services.charsets.base import Charset, CharsetProvider
from mimeword.services.codec.errors import UnknownCharset

# Preferred MIME names (IANA) keyed by Python's canonical codec name.
PREFERRED_MIME_NAMES: dict[str, str] = {
    "ascii": "us-ascii",
    "utf-8": "utf-8",
    "utf-16": "utf-16",
    "utf-16-be": "utf-16be",
    "utf-16-le": "utf-16le",
    "utf-32": "utf-32",
    "utf-7": "utf-7",
    "koi8-r": "koi8-r",
    "koi8-u": "koi8-u",
    "shift_jis": "shift_jis",
    "euc_jp": "euc-jp",
    "euc_kr": "euc-kr",
    "iso2022_jp": "iso-2022-jp",
    "iso2022_kr": "iso-2022-kr",
    "gb2312": "gb2312",
    "gbk": "gbk",
    "gb18030": "gb18030",
    "big5": "big5",
}


def preferred_mime_name(codec_name: str, label: str) -> str:
    """
    Return the preferred MIME name for a codec, e.g. 'iso8859-1' -> 'iso-8859-1',
    'cp1252' -> 'windows-1252'. Codecs without a known MIME name keep `label`.
    """
    if codec_name in PREFERRED_MIME_NAMES:
        return PREFERRED_MIME_NAMES[codec_name]
    if codec_name.startswith("iso8859-"):
        return "iso-8859-" + codec_name[len("iso8859-"):]
    if codec_name.startswith("cp125") and len(codec_name) == 6:
        return "windows-" + codec_name[2:]
    return label


class CodecCharset(Charset):
    """
    Charset wrapping a registered text codec. `name` is the preferred MIME name
    when one is known (so 'UTF8' and 'latin-1' are written as 'utf-8' and
    'iso-8859-1'); otherwise the caller's label, lower-cased.
    """

    def __init__(self, name: str, codec_info: codecs.CodecInfo):
        self._name = name
        self._codec_info = codec_info

    @property
    def name(self) -> str:
        return self._name

    @property
    def codec_name(self) -> str:
        return self._codec_info.name

    def to_bytes(self, text: str) -> bytes:
        data, _ = self._codec_info.encode(text, "replace")
        return data

    def to_text(self, data: bytes) -> str:
        text, _ = self._codec_info.decode(data, "strict")
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodecCharset):
            return NotImplemented
        return self._name == other._name and self.codec_name == other.codec_name

    def __hash__(self) -> int:
        return hash((self._name, self.codec_name))


class CodecsCharsetProvider(CharsetProvider):
    """
    Resolves names through codecs.lookup. Only text encodings that support the
    'replace' error handler qualify; bytes-to-bytes codecs such as 'base64' or 'zlib',
    and codecs such as 'idna' or 'undefined', are rejected as unknown charsets.
    """

    def resolve(self, name: str) -> Charset:
        if not name or not name.strip():
            raise UnknownCharset(name or "")
        label = name.strip().lower()
        try:
            info = codecs.lookup(label)
        except (LookupError, ValueError) as e:
            # ValueError: names with embedded NUL characters
            raise UnknownCharset(name, cause=e) from e
        if not getattr(info, "_is_text_encoding", True):
            raise UnknownCharset(name)
        try:
            info.encode("", "replace")
        except UnicodeError as e:
            raise UnknownCharset(name, cause=e) from e
        return CodecCharset(preferred_mime_name(info.name, label), info)


@lru_cache
def get_charset_provider() -> CharsetProvider:
    """Return the shared default provider. Stateless; safe to share across callers."""
    return CodecsCharsetProvider()
