"""Shared fixtures: a fake charset provider for testing the pluggable charset seam."""

from __future__ import annotations

import pytest

from mimeword.services.charsets.base import Charset, CharsetProvider
from mimeword.services.codec.errors import UnknownCharset


class XorCharset(Charset):
    """UTF-8 with every byte XOR 0x01. Round-trips, but no real decoder knows it."""

    @property
    def name(self) -> str:
        return "x-xor"

    def to_bytes(self, text: str) -> bytes:
        return bytes(b ^ 0x01 for b in text.encode("utf-8"))

    def to_text(self, data: bytes) -> str:
        return bytes(b ^ 0x01 for b in data).decode("utf-8")


class FakeCharsetProvider(CharsetProvider):
    """Knows only 'x-xor'; everything else is an UnknownCharset."""

    def __init__(self) -> None:
        self.resolved: list[str] = []

    def resolve(self, name: str) -> Charset:
        self.resolved.append(name)
        if name.lower() == "x-xor":
            return XorCharset()
        raise UnknownCharset(name)


@pytest.fixture
def fake_provider() -> FakeCharsetProvider:
    return FakeCharsetProvider()
