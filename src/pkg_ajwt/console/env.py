from __future__ import annotations

import os

from ..domain.constants import DEFAULT_NONCE_LENGTH
from ..settings import CodecSettings


def settings_from_env() -> CodecSettings:
    def _int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc

    def _split_csv(key: str) -> list[str]:
        raw = os.getenv(key)
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x and x.strip()]

    secret_key = os.getenv("AJWT_SECRET_KEY")
    if not secret_key:
        raise RuntimeError("Missing codec settings: AJWT_SECRET_KEY")

    return CodecSettings(
        secret_key=secret_key,
        validity_duration=_int("AJWT_VALIDITY_DURATION", 0),
        required_keys=_split_csv("AJWT_REQUIRED_KEYS"),
        nonce_length=_int("AJWT_NONCE_LENGTH", DEFAULT_NONCE_LENGTH),
    )
