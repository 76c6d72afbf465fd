"""POST /encode and POST /must-encode: encode header text as RFC 2047 encoded-words."""

from fastapi import APIRouter, HTTPException

from mimeword.config.codec.static import resolve_codec_config
from mimeword.config.logging import get_logger
from mimeword.config.settings import get_settings
from mimeword.controllers.schema.encode import (
    EncodeRequest,
    EncodeResponse,
    MustEncodeRequest,
    MustEncodeResponse,
)
from mimeword.services.codec.encoded_word import EncodedWordCodec
from mimeword.services.codec.errors import UnknownCharset
from mimeword.services.codec.predicate import must_encode
from mimeword.services.codec.splitter import split_chunks

logger = get_logger(__name__)

router = APIRouter(tags=["encoding"])


@router.post("/encode", response_model=EncodeResponse)
async def encode_text(body: EncodeRequest) -> EncodeResponse:
    """
    Encode `text` with the requested profile (or the configured default).
    Only scheme/charset/split can be overridden per request.
    """
    profile = body.profile or get_settings().codec_profile
    overrides = body.model_dump(include={"scheme", "charset", "split"}, exclude_none=True)
    try:
        config = resolve_codec_config(profile, overrides)
        codec = EncodedWordCodec.from_config(config)
    except (UnknownCharset, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    needed = must_encode(body.text)
    encoded = codec.encode(body.text)
    words = len(split_chunks(body.text, codec.split)) if needed else 0
    logger.info(
        "Encoded header text",
        extra={"profile": profile, "scheme": codec.scheme.value, "words": words},
    )
    return EncodeResponse(
        encoded=encoded,
        must_encode=needed,
        scheme=codec.scheme,
        charset=codec.charset.name,
        words=words,
    )


@router.post("/must-encode", response_model=MustEncodeResponse)
async def check_must_encode(body: MustEncodeRequest) -> MustEncodeResponse:
    """Report whether `text` contains characters that require an encoded-word."""
    return MustEncodeResponse(must_encode=must_encode(body.text))
