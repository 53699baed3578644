from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from ...domain.constants import NONCE_FIELD, TIMESTAMP_FIELD
from ...domain.exceptions import UnencodablePayloadError
from ...domain.ports import Clock, NonceGenerator, PayloadSerializer, Signer
from ...domain.value_objects import SecretKey, Token


def _to_unix_seconds(value: int | datetime) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnencodablePayloadError(
            f"Timestamp must be an int or datetime, got {type(value).__name__}"
        )
    return value


@dataclass(slots=True)
class EncodePayloadUseCase:
    """
    Application use case:
    - add `timestamp` and `nonce` to a copy of the payload
    - serialize, sign and frame it into a token string

    Clock and nonce source are injected so that issuance can be pinned.
    """

    serializer: PayloadSerializer
    signer: Signer
    clock: Clock
    nonce_generator: NonceGenerator

    def execute(
            self,
            payload: Mapping[str, Any],
            key: SecretKey | str | bytes,
            *,
            timestamp: int | datetime | None = None,
            nonce: str | None = None,
    ) -> str:
        """
        Raises:
            UnencodablePayloadError
        """
        secret = SecretKey.coerce(key)

        claims = dict(payload)
        # reserved fields are always ours, caller values are overwritten
        claims[TIMESTAMP_FIELD] = (
            self.clock.now() if timestamp is None else _to_unix_seconds(timestamp)
        )
        claims[NONCE_FIELD] = self.nonce_generator.generate() if nonce is None else str(nonce)

        serialized = self.serializer.serialize(claims)
        signature = self.signer.sign(serialized, secret.value)

        return str(Token.build(serialized, signature))
