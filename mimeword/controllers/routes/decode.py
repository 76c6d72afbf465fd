"""POST /decode: decode one RFC 2047 encoded-word, passing invalid words through."""

from fastapi import APIRouter

from mimeword.controllers.schema.decode import DecodeRequest, DecodeResponse
from mimeword.services.charsets.codecs_provider import get_charset_provider
from mimeword.services.codec.decoder import decode_steps

router = APIRouter(tags=["decoding"])


@router.post("/decode", response_model=DecodeResponse)
async def decode_word(body: DecodeRequest) -> DecodeResponse:
    """Decode `text`. Malformed or unrecognized words come back unchanged with recognized=false."""
    outcome = decode_steps(body.text, get_charset_provider())
    if not outcome.ok:
        return DecodeResponse(decoded=body.text, recognized=False)
    return DecodeResponse(decoded=outcome.value, recognized=True)
