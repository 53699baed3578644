from __future__ import annotations

from typing import Protocol, Mapping, Any


class PayloadSerializer(Protocol):
    """
    Port for turning a payload mapping into bytes and back.

    Implementations live in the adapters layer (e.g. JSON serializer).
    """

    def serialize(self, payload: Mapping[str, Any]) -> bytes:
        """
        Raises:
          - UnencodablePayloadError
        """
        ...

    def deserialize(self, data: bytes) -> dict[str, Any]:
        """
        Raises:
          - MalformedPayloadError
        """
        ...


class Signer(Protocol):
    """Port for keyed signatures over raw payload bytes."""

    def sign(self, data: bytes, key: bytes) -> bytes:
        ...

    def verify(self, data: bytes, key: bytes, signature: bytes) -> bool:
        ...


class Clock(Protocol):
    """Source of the current time in whole Unix seconds."""

    def now(self) -> int:
        ...


class NonceGenerator(Protocol):
    """Source of random per-token nonce strings."""

    def generate(self) -> str:
        ...
