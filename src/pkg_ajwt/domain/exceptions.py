from .constants import ErrorKind


class TokenError(Exception):
    """Base class for every encode/decode failure."""

    kind: ErrorKind

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidInputError(TokenError):
    """Raised when a string does not frame as a token (member count, base64)."""
    kind = ErrorKind.INVALID_INPUT


class InvalidSignatureError(TokenError):
    """Raised when the embedded signature does not match the payload bytes."""
    kind = ErrorKind.INVALID_SIGNATURE


class InvalidPayloadError(TokenError):
    """Raised when a signed payload is malformed, incomplete or out of its time window."""
    kind = ErrorKind.INVALID_PAYLOAD


class MalformedPayloadError(InvalidPayloadError):
    """Raised when payload bytes are not a valid serialized object."""
    pass


class UnencodablePayloadError(TokenError):
    """Raised when a payload value cannot be serialized."""
    kind = ErrorKind.UNENCODABLE_PAYLOAD
