from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Mapping, NoReturn

from ..domain.exceptions import MalformedPayloadError, UnencodablePayloadError
from ..domain.ports import PayloadSerializer


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-finite number {name} is not allowed")


def _non_string_keys(value: Any, path: str, seen: set[int]) -> Iterator[str]:
    """Yield `path[key]` for every non-string mapping key, at any depth."""
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in seen:
            # circular, json.dumps reports it
            return
        seen.add(id(value))

    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                yield f"{path}[{key!r}]"
            yield from _non_string_keys(item, f"{path}[{key!r}]", seen)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _non_string_keys(item, f"{path}[{index}]", seen)


class JSONPayloadSerializer(PayloadSerializer):
    """
    Compact JSON encoding of a payload.

    - Unicode is written as-is (UTF-8), `/` is never escaped
    - numbers stay numbers, NaN / Infinity are refused both ways
    - field order follows the mapping's insertion order
    - mapping keys must be strings at every level
    - tuples are written as JSON arrays and come back as lists
    """

    def serialize(self, payload: Mapping[str, Any]) -> bytes:
        try:
            bad_keys = list(_non_string_keys(payload, "payload", set()))
        except RecursionError as exc:
            raise UnencodablePayloadError("Payload is nested too deeply") from exc
        if bad_keys:
            raise UnencodablePayloadError(f"Field names must be strings: {', '.join(bad_keys)}")

        try:
            text = json.dumps(
                dict(payload),
                ensure_ascii=False,
                separators=(",", ":"),
                allow_nan=False,
            )
            return text.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as exc:
            raise UnencodablePayloadError(f"Payload cannot be serialized: {exc}") from exc

    def deserialize(self, data: bytes) -> Dict[str, Any]:
        try:
            value = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise MalformedPayloadError(f"Payload is a malformed JSON: {exc}") from exc

        if not isinstance(value, dict):
            raise MalformedPayloadError(
                f"Payload must be a JSON object, got {type(value).__name__}"
            )
        return value
