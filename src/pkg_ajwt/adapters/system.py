from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass

from ..domain.constants import DEFAULT_NONCE_LENGTH
from ..domain.ports import Clock, NonceGenerator

NONCE_ALPHABET = string.ascii_letters + string.digits


class SystemClock(Clock):
    """Wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


@dataclass(frozen=True, slots=True)
class FixedClock(Clock):
    """Clock pinned to a single instant (tests, replaying old tokens)."""
    instant: int

    def now(self) -> int:
        return self.instant


@dataclass(frozen=True, slots=True)
class RandomNonceGenerator(NonceGenerator):
    length: int = DEFAULT_NONCE_LENGTH
    alphabet: str = NONCE_ALPHABET

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"Nonce length must be positive, got {self.length}")
        if not self.alphabet:
            raise ValueError("Nonce alphabet must not be empty")

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
