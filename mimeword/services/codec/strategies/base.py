"""Base scheme strategy: bytes <-> encoded-text for one encoded-word scheme."""

from abc import ABC, abstractmethod

from mimeword.config.codec.models import Scheme
from mimeword.services.codec.steps import Step


class BaseSchemeStrategy(ABC):
    """
    Abstract encoded-word scheme. Strategies only handle the byte payload;
    charset conversion happens in the encoder and decoder.
    """

    @property
    @abstractmethod
    def scheme(self) -> Scheme:
        ...

    @abstractmethod
    def encode_payload(self, data: bytes) -> str:
        """Encode charset bytes into ASCII encoded-text."""
        ...

    @abstractmethod
    def decode_payload(self, payload: str) -> Step[bytes]:
        """Decode encoded-text back to bytes. Malformed payloads yield a failed Step."""
        ...

    def wrap(self, charset_name: str, data: bytes) -> str:
        """Build `=?charset?S?encoded-text?=` for one chunk of bytes."""
        return f"=?{charset_name}?{self.scheme.value}?{self.encode_payload(data)}?="
