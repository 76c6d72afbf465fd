"""Request/response schemas for POST /encode and POST /must-encode."""

from pydantic import BaseModel, Field

from mimeword.config.codec.models import Scheme


class EncodeRequest(BaseModel):
    """POST /encode request body. Profile from static.json; scheme/charset/split may be overridden."""

    text: str = Field(..., description="Header text to encode")
    profile: str | None = Field(default=None, description="Codec profile name (defaults to settings)")
    scheme: Scheme | None = Field(default=None, description="Optional override: Q|B")
    charset: str | None = Field(default=None, min_length=1, description="Optional override for charset name")
    split: bool | None = Field(default=None, description="Optional override for 30 char splitting")


class EncodeResponse(BaseModel):
    """POST /encode response body."""

    encoded: str = Field(..., description="Encoded text, or the input when no encoding was needed")
    must_encode: bool = Field(..., description="Whether the input contained non-ASCII characters")
    scheme: Scheme
    charset: str
    words: int = Field(..., ge=0, description="Number of encoded-words produced")


class MustEncodeRequest(BaseModel):
    """POST /must-encode request body."""

    text: str


class MustEncodeResponse(BaseModel):
    """POST /must-encode response body."""

    must_encode: bool
