"""Q scheme (RFC 2047 §4.2): escaped literals."""

from mimeword.config.codec.models import Scheme
from mimeword.services.codec.steps import Step, fail, succeed
from mimeword.services.codec.strategies.base import BaseSchemeStrategy

# Always escaped. Space is written as =20, never '_'.
_ESCAPED = frozenset(b"=?_ ")
_HEX_DIGITS = frozenset(b"0123456789ABCDEFabcdef")


class QSchemeStrategy(BaseSchemeStrategy):
    """
    Encode: bytes above 127 and '=', '?', '_', space become =XX (upper-case hex);
    everything else is copied as an ASCII character.
    Decode: =XX becomes the byte, '_' becomes space, other bytes pass through.
    """

    @property
    def scheme(self) -> Scheme:
        return Scheme.Q

    def encode_payload(self, data: bytes) -> str:
        return "".join(f"={b:02X}" if b > 127 or b in _ESCAPED else chr(b) for b in data)

    def decode_payload(self, payload: str) -> Step[bytes]:
        try:
            raw = payload.encode("ascii")
        except UnicodeEncodeError:
            return fail("Q payload is not ASCII")
        out = bytearray()
        i = 0
        while i < len(raw):
            b = raw[i]
            if b == 0x3D:
                pair = raw[i + 1 : i + 3]
                if len(pair) != 2 or not all(c in _HEX_DIGITS for c in pair):
                    return fail(f"invalid Q escape at offset {i}")
                out.append(int(pair, 16))
                i += 3
                continue
            out.append(0x20 if b == 0x5F else b)
            i += 1
        return succeed(bytes(out))
