"""Request/response schemas for POST /decode."""

from pydantic import BaseModel, Field


class DecodeRequest(BaseModel):
    """POST /decode request body. A single encoded-word candidate."""

    text: str = Field(..., description="Encoded-word, e.g. =?utf-8?Q?caf=C3=A9?=")


class DecodeResponse(BaseModel):
    """POST /decode response body."""

    decoded: str = Field(..., description="Decoded text, or the input when it was not a valid encoded-word")
    recognized: bool = Field(..., description="False when the input was passed through unchanged")
