from __future__ import annotations

from .deps import FastAPITokenAuth
from ..common.codec_factory import TokenCodec, create_token_codec_from_settings
from ...settings import CodecSettings


def create_fastapi_token_auth(
    *,
    settings: CodecSettings,
    codec: TokenCodec | None = None,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates a TokenCodec from the settings (unless one is given)
    - Wraps it in FastAPITokenAuth, exposing dependencies like:

        token_auth.get_payload
        token_auth.get_optional_payload
        token_auth.require_fields(...)
    """
    codec = codec or create_token_codec_from_settings(settings)
    return FastAPITokenAuth(codec=codec, settings=settings)


__all__ = ["FastAPITokenAuth", "create_fastapi_token_auth"]
