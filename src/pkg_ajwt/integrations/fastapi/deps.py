from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import DEFAULT_COOKIE_NAME, bearer_scheme, token_from_request
from ..common.codec_factory import TokenCodec
from ...settings import CodecSettings
from ...domain.constants import ErrorKind
from ...domain.exceptions import MalformedPayloadError, TokenError

logger = logging.getLogger(__name__)

_ERROR_DETAILS = {
    ErrorKind.INVALID_INPUT: "Invalid token",
    ErrorKind.INVALID_SIGNATURE: "Invalid token signature",
}


def _unauthorized(exc: TokenError) -> HTTPException:
    # missing fields and time-window failures keep their detail, parser output does not
    if isinstance(exc, MalformedPayloadError):
        detail = "Malformed token payload"
    else:
        detail = _ERROR_DETAILS.get(exc.kind, exc.detail)
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_ajwt.

    Decodes the request token with the configured secret and decode policy
    and hands the payload to the route.
    """

    codec: TokenCodec
    settings: CodecSettings
    cookie_name: str = DEFAULT_COOKIE_NAME

    def _decode(self, token: str, extra_keys: Iterable[str] = ()) -> Dict[str, Any]:
        return self.codec.decode(
            token,
            self.settings.key,
            [*self.settings.required_keys, *extra_keys],
            self.settings.validity_duration,
        )

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_payload(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Dict[str, Any]:
        """Dependency: require a valid token."""
        token = token_from_request(request, credentials, self.cookie_name)
        try:
            return self._decode(token)
        except TokenError as exc:
            raise _unauthorized(exc) from exc

    async def get_optional_payload(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Dict[str, Any] | None:
        """Dependency: decode the token if there is a valid one."""
        try:
            token = token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            return None

        try:
            return self._decode(token)
        except TokenError:
            logger.debug("Ignoring invalid token on optional route %s", request.url.path)
            return None

    # ------------------------------------------------------------------ #
    # Dependency factories
    # ------------------------------------------------------------------ #

    def require_fields(self, *names: str) -> Callable:
        """
        Dependency factory: require a valid token carrying all given fields.
        """

        async def dependency(
                request: Request,
                credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
        ) -> Dict[str, Any]:
            token = token_from_request(request, credentials, self.cookie_name)
            try:
                return self._decode(token, names)
            except TokenError as exc:
                raise _unauthorized(exc) from exc

        return dependency
