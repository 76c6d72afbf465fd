"""Codec configuration models. Read-only; no business logic."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Scheme(str, Enum):
    """Encoded-word sub-encoding (RFC 2047 §4)."""

    Q = "Q"
    B = "B"


class CodecConfig(BaseModel):
    """Immutable encode configuration: scheme, charset name and split policy."""

    model_config = ConfigDict(frozen=True)

    scheme: Scheme = Field(default=Scheme.Q, description="Q|B")
    charset: str = Field(default="utf-8", min_length=1, description="Charset name, e.g. utf-8")
    split: bool = Field(default=True, description="Split text into 30 char encoded-words")

    @field_validator("scheme", mode="before")
    @classmethod
    def _ascii_upper_scheme(cls, v):
        # Locale-free: only the ASCII letters are folded.
        if v == "q":
            return "Q"
        if v == "b":
            return "B"
        return v
