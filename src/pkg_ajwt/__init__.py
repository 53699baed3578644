"""
pkg_ajwt

Compact HMAC-SHA512 signed tokens: a JSON payload plus issuance timestamp
and nonce, framed as base64(payload).base64(signature) and verified with a
shared secret.
"""

__version__ = "0.1.0"

from .domain.constants import ErrorKind
from .domain.entities import DecodeResult
from .domain.exceptions import (
    TokenError,
    InvalidInputError,
    InvalidSignatureError,
    InvalidPayloadError,
    MalformedPayloadError,
    UnencodablePayloadError,
)
from .domain.value_objects import SecretKey, Token
from .domain.ports import PayloadSerializer, Signer, Clock, NonceGenerator

from .application.use_cases.encode import EncodePayloadUseCase
from .application.use_cases.decode import DecodeTokenUseCase

from .adapters.json_serializer import JSONPayloadSerializer
from .adapters.hmac_signer import HMACSHA512Signer
from .adapters.system import SystemClock, FixedClock, RandomNonceGenerator

from .settings import CodecSettings
from .integrations.common.codec_factory import (
    TokenCodec,
    create_token_codec,
    create_token_codec_from_settings,
)
from .api import encode, decode, try_decode

__all__ = [
    "__version__",
    # domain core
    "ErrorKind",
    "DecodeResult",
    "SecretKey",
    "Token",
    "PayloadSerializer",
    "Signer",
    "Clock",
    "NonceGenerator",
    # exceptions
    "TokenError",
    "InvalidInputError",
    "InvalidSignatureError",
    "InvalidPayloadError",
    "MalformedPayloadError",
    "UnencodablePayloadError",
    # use cases
    "EncodePayloadUseCase",
    "DecodeTokenUseCase",
    # adapters
    "JSONPayloadSerializer",
    "HMACSHA512Signer",
    "SystemClock",
    "FixedClock",
    "RandomNonceGenerator",
    # facade
    "TokenCodec",
    "create_token_codec",
    "create_token_codec_from_settings",
    "CodecSettings",
    "encode",
    "decode",
    "try_decode",
]
