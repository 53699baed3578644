from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import ErrorKind
from .exceptions import TokenError


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """
    Outcome of a decode call as a plain value.

    Either `ok` is True and `payload` holds the caller fields, or `ok` is
    False and `error` / `detail` say why. A failed result never carries a
    payload.
    """
    ok: bool
    payload: Dict[str, Any] = field(default_factory=dict)
    error: Optional[ErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, payload: Dict[str, Any]) -> DecodeResult:
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, exc: TokenError) -> DecodeResult:
        return cls(ok=False, error=exc.kind, detail=exc.detail)

    def unwrap(self) -> Dict[str, Any]:
        """Return the payload, or raise ValueError for a failed result."""
        if not self.ok:
            raise ValueError(f"Decode failed ({self.error.value}): {self.detail}")
        return self.payload
