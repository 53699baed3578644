from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping

from ...domain.constants import NONCE_FIELD, RESERVED_FIELDS, TIMESTAMP_FIELD
from ...domain.exceptions import InvalidPayloadError, InvalidSignatureError, TokenError
from ...domain.ports import Clock, PayloadSerializer, Signer
from ...domain.value_objects import SecretKey, Token

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case:
    - unframe the token and verify its signature on the raw payload bytes
    - parse the payload, check required fields and the time window
    - hand back the caller fields without `timestamp` / `nonce`

    Every step either passes or raises; nothing is retried and no partial
    payload escapes.
    """

    serializer: PayloadSerializer
    signer: Signer
    clock: Clock

    def execute(
            self,
            token: str,
            key: SecretKey | str | bytes,
            required_keys: Iterable[str] = (),
            validity_duration: int = 0,
    ) -> Dict[str, Any]:
        """
        Decode and verify a token.

        `validity_duration` is the maximum token age in seconds; 0 disables
        expiry but tokens issued in the future are still refused.

        Raises:
            InvalidInputError
            InvalidSignatureError
            InvalidPayloadError
        """
        if validity_duration < 0:
            raise ValueError(f"validity_duration must be >= 0, got {validity_duration}")

        try:
            frame = Token.parse(token)
            serialized = frame.serialized_payload()
            signature = frame.signature()

            # malformed tokens are refused before the key is looked at
            secret = SecretKey.coerce(key)

            if not self.signer.verify(serialized, secret.value, signature):
                raise InvalidSignatureError("Invalid signature")

            payload = self.serializer.deserialize(serialized)
            self._check_required_keys(payload, required_keys)
            self._check_time_window(payload, validity_duration)
        except TokenError as exc:
            logger.debug("Token rejected (%s): %s", exc.kind.value, exc.detail)
            raise

        for name in RESERVED_FIELDS:
            payload.pop(name, None)
        return payload

    # ------------------------------------------------------------------ #
    # Internal: validation steps
    # ------------------------------------------------------------------ #

    def _check_required_keys(self, payload: Mapping[str, Any], required_keys: Iterable[str]) -> None:
        required = set(required_keys) | {TIMESTAMP_FIELD, NONCE_FIELD}
        missing = sorted(name for name in required if name not in payload)
        if missing:
            raise InvalidPayloadError(f"Missing required keys: {', '.join(missing)}")

    def _check_time_window(self, payload: Mapping[str, Any], validity_duration: int) -> None:
        raw = payload[TIMESTAMP_FIELD]
        try:
            issued_at = int(raw)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidPayloadError(f"Timestamp <{raw!r}> is not an integer") from exc

        now = self.clock.now()
        if validity_duration > 0 and now > issued_at + validity_duration:
            raise InvalidPayloadError(f"Timestamp <{issued_at}> has expired")
        if issued_at > now:
            raise InvalidPayloadError(f"Timestamp <{issued_at}> is in the future")
