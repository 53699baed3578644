from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .domain.constants import DEFAULT_NONCE_LENGTH
from .domain.value_objects import SecretKey


@dataclass(slots=True)
class CodecSettings:
    """
    Shared secret + decode policy.

    Host code decides how to construct this (env, config file, etc.).
    """
    secret_key: str
    validity_duration: int = 0
    required_keys: List[str] = field(default_factory=list)
    nonce_length: int = DEFAULT_NONCE_LENGTH

    def __repr__(self) -> str:
        return (
            f"CodecSettings(secret_key=***, validity_duration={self.validity_duration}, "
            f"required_keys={self.required_keys!r}, nonce_length={self.nonce_length})"
        )

    @property
    def key(self) -> SecretKey:
        return SecretKey(self.secret_key)
