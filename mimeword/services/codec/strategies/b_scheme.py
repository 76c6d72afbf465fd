"""B scheme (RFC 2047 §4.1): standard Base64 with padding."""

import base64

from mimeword.config.codec.models import Scheme
from mimeword.services.codec.steps import Step, fail, succeed
from mimeword.services.codec.strategies.base import BaseSchemeStrategy


class BSchemeStrategy(BaseSchemeStrategy):
    """Base64 payloads. Decoding is strict: bad alphabet or padding is a failed Step."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.B

    def encode_payload(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    def decode_payload(self, payload: str) -> Step[bytes]:
        try:
            return succeed(base64.b64decode(payload, validate=True))
        except ValueError as e:
            return fail(f"invalid Base64 payload: {e}")
