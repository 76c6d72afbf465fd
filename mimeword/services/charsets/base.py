"""Charset capability and provider contract. Providers are injected into the codec."""

from abc import ABC, abstractmethod


class Charset(ABC):
    """
    Converts between text and bytes under one named charset. `name` is the label
    written into encoded-words, e.g. 'utf-8'.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def to_bytes(self, text: str) -> bytes:
        """Encode text. Unrepresentable characters are replaced, never raised."""
        ...

    @abstractmethod
    def to_text(self, data: bytes) -> str:
        """Decode bytes strictly. Raises UnicodeError (or ValueError) on invalid input."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class CharsetProvider(ABC):
    """Resolves charset names to Charset handles."""

    @abstractmethod
    def resolve(self, name: str) -> Charset:
        """
        Return the Charset for a case-insensitive name.
        Raises UnknownCharset when the name cannot be resolved.
        """
        ...
