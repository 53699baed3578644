"""Module-level shortcuts over a default TokenCodec (system clock, random nonces)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, Mapping

from .domain.entities import DecodeResult
from .domain.value_objects import SecretKey
from .integrations.common.codec_factory import TokenCodec, create_token_codec

_default_codec: TokenCodec = create_token_codec()


def encode(
        payload: Mapping[str, Any],
        key: SecretKey | str | bytes,
        *,
        timestamp: int | datetime | None = None,
        nonce: str | None = None,
) -> str:
    return _default_codec.encode(payload, key, timestamp=timestamp, nonce=nonce)


def decode(
        token: str,
        key: SecretKey | str | bytes,
        required_keys: Iterable[str] = (),
        validity_duration: int = 0,
) -> Dict[str, Any]:
    return _default_codec.decode(token, key, required_keys, validity_duration)


def try_decode(
        token: str,
        key: SecretKey | str | bytes,
        required_keys: Iterable[str] = (),
        validity_duration: int = 0,
) -> DecodeResult:
    return _default_codec.try_decode(token, key, required_keys, validity_duration)
