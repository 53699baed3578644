from enum import Enum

TIMESTAMP_FIELD = "timestamp"
NONCE_FIELD = "nonce"
RESERVED_FIELDS = (TIMESTAMP_FIELD, NONCE_FIELD)

TOKEN_SEPARATOR = "."

DEFAULT_NONCE_LENGTH = 24


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_PAYLOAD = "invalid_payload"
    UNENCODABLE_PAYLOAD = "unencodable_payload"
