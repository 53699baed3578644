from __future__ import annotations

import hmac
from hashlib import sha512

from ..domain.ports import Signer

SIGNATURE_SIZE = sha512().digest_size


class HMACSHA512Signer(Signer):
    """HMAC-SHA512 over the serialized payload bytes, raw 64-byte digests."""

    def sign(self, data: bytes, key: bytes) -> bytes:
        return hmac.new(key, data, sha512).digest()

    def verify(self, data: bytes, key: bytes, signature: bytes) -> bool:
        return hmac.compare_digest(self.sign(data, key), signature)
