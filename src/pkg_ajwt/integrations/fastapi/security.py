from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Plug into routes to get the bearer scheme documented in OpenAPI
bearer_scheme = HTTPBearer(auto_error=False)

DEFAULT_COOKIE_NAME = "access_token"


def _bearer_from_header(request: Request) -> Optional[str]:
    scheme, _, value = (request.headers.get("Authorization") or "").partition(" ")
    if scheme.lower() != "bearer":
        return None
    return value.strip() or None


def token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Locate the signed token for this request.

    Lookup order: resolved bearer credentials, the raw Authorization header,
    then the `cookie_name` cookie.

    Raises HTTPException(401) if none of them carries a token.
    """
    candidates = (
        (credentials.credentials or "").strip() if credentials is not None else None,
        _bearer_from_header(request),
        request.cookies.get(cookie_name),
    )
    for token in candidates:
        if token:
            return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
