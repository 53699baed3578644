# src/pkg_ajwt/domain/value_objects.py

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from .constants import TOKEN_SEPARATOR
from .exceptions import InvalidInputError


# --- Key material ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SecretKey:
    """
    Shared HMAC secret.

    Text keys are UTF-8 encoded. The repr is masked so the key never ends
    up in logs or tracebacks.
    """
    value: bytes

    def __init__(self, value: str | bytes | bytearray | memoryview) -> None:
        if isinstance(value, str):
            raw = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
        else:
            raise TypeError(f"Secret key must be str or bytes, got {type(value).__name__}")
        if not raw:
            raise ValueError("Secret key must not be empty")
        object.__setattr__(self, "value", raw)

    @classmethod
    def coerce(cls, key: SecretKey | str | bytes) -> SecretKey:
        if isinstance(key, SecretKey):
            return key
        return cls(key)

    def __repr__(self) -> str:
        return "SecretKey(***)"

    def __bytes__(self) -> bytes:
        return self.value


# --- Wire framing ---------------------------------------------------------


def _b64decode(segment: str, member: str) -> bytes:
    try:
        return base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError(f"Invalid base64 in {member} member") from exc


@dataclass(frozen=True, slots=True)
class Token:
    """
    The two base64 members of a token, exactly as they travel on the wire:

        base64(serialized_payload) "." base64(signature)
    """
    payload_segment: str
    signature_segment: str

    @classmethod
    def build(cls, serialized: bytes, signature: bytes) -> Token:
        return cls(
            payload_segment=base64.b64encode(serialized).decode("ascii"),
            signature_segment=base64.b64encode(signature).decode("ascii"),
        )

    @classmethod
    def parse(cls, raw: str) -> Token:
        """
        Split a token string into its members.

        Raises:
            InvalidInputError if the string does not hold exactly two
            non-empty members.
        """
        members = raw.split(TOKEN_SEPARATOR)
        if len(members) != 2:
            raise InvalidInputError(f"Invalid members count {len(members)}")

        payload_segment, signature_segment = members
        if not payload_segment or not signature_segment:
            raise InvalidInputError("Token members must not be empty")

        return cls(payload_segment=payload_segment, signature_segment=signature_segment)

    def serialized_payload(self) -> bytes:
        return _b64decode(self.payload_segment, "payload")

    def signature(self) -> bytes:
        return _b64decode(self.signature_segment, "signature")

    def __str__(self) -> str:
        return f"{self.payload_segment}{TOKEN_SEPARATOR}{self.signature_segment}"
