"""

from pkg_ajwt.integrations.common.codec_factory import create_token_codec

codec = create_token_codec()

token = codec.encode({"user_id": 42}, "shared-secret")
payload = codec.decode(token, "shared-secret", required_keys=["user_id"], validity_duration=300)

result = codec.try_decode(token, "wrong-secret")
if not result.ok:
    print(result.error, result.detail)

"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping

from ...adapters.hmac_signer import HMACSHA512Signer
from ...adapters.json_serializer import JSONPayloadSerializer
from ...adapters.system import RandomNonceGenerator, SystemClock
from ...application.use_cases.decode import DecodeTokenUseCase
from ...application.use_cases.encode import EncodePayloadUseCase
from ...domain.constants import DEFAULT_NONCE_LENGTH
from ...domain.entities import DecodeResult
from ...domain.exceptions import TokenError
from ...domain.ports import Clock, NonceGenerator, PayloadSerializer, Signer
from ...domain.value_objects import SecretKey
from ...settings import CodecSettings


@dataclass(slots=True)
class TokenCodec:
    """
    Framework-agnostic codec facade.

    Integrations (FastAPI, the CLI) adapt this to their own surfaces.
    """

    encode_use_case: EncodePayloadUseCase
    decode_use_case: DecodeTokenUseCase

    # --- Core operations --------------------------------------------------

    def encode(
            self,
            payload: Mapping[str, Any],
            key: SecretKey | str | bytes,
            *,
            timestamp: int | datetime | None = None,
            nonce: str | None = None,
    ) -> str:
        """Payload -> token string (or raise UnencodablePayloadError)."""
        return self.encode_use_case.execute(payload, key, timestamp=timestamp, nonce=nonce)

    def decode(
            self,
            token: str,
            key: SecretKey | str | bytes,
            required_keys: Iterable[str] = (),
            validity_duration: int = 0,
    ) -> Dict[str, Any]:
        """Token -> payload (or raise token errors)."""
        return self.decode_use_case.execute(token, key, required_keys, validity_duration)

    def try_decode(
            self,
            token: str,
            key: SecretKey | str | bytes,
            required_keys: Iterable[str] = (),
            validity_duration: int = 0,
    ) -> DecodeResult:
        """Like `decode`, but token errors come back as a failed DecodeResult."""
        try:
            return DecodeResult.success(self.decode(token, key, required_keys, validity_duration))
        except TokenError as exc:
            return DecodeResult.failure(exc)


def create_token_codec(
        *,
        clock: Clock | None = None,
        nonce_generator: NonceGenerator | None = None,
        nonce_length: int = DEFAULT_NONCE_LENGTH,
        serializer: PayloadSerializer | None = None,
        signer: Signer | None = None,
) -> TokenCodec:
    """
    High-level factory: wires JSON serializer, HMAC-SHA512 signer, system
    clock and random nonces into a TokenCodec. Any piece can be swapped,
    tests typically pass a FixedClock.
    """
    serializer = serializer or JSONPayloadSerializer()
    signer = signer or HMACSHA512Signer()
    clock = clock or SystemClock()
    nonce_generator = nonce_generator or RandomNonceGenerator(length=nonce_length)

    return TokenCodec(
        encode_use_case=EncodePayloadUseCase(
            serializer=serializer,
            signer=signer,
            clock=clock,
            nonce_generator=nonce_generator,
        ),
        decode_use_case=DecodeTokenUseCase(
            serializer=serializer,
            signer=signer,
            clock=clock,
        ),
    )


def create_token_codec_from_settings(
        settings: CodecSettings,
        *,
        clock: Clock | None = None,
) -> TokenCodec:
    """
    High-level factory: CodecSettings -> TokenCodec.

    Nonces are sized by `settings.nonce_length`; the secret and decode
    policy stay on the settings and are passed per call by integrations.
    """
    return create_token_codec(clock=clock, nonce_length=settings.nonce_length)
