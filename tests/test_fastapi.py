# tests/test_fastapi.py
from typing import Any, Dict

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from pkg_ajwt import HMACSHA512Signer, Token
from pkg_ajwt.settings import CodecSettings
from pkg_ajwt.integrations.fastapi import create_fastapi_token_auth

from conftest import NOW

SECRET = "api-secret"


@pytest.fixture
def client(codec):
    settings = CodecSettings(secret_key=SECRET, validity_duration=300, required_keys=["user_id"])
    token_auth = create_fastapi_token_auth(settings=settings, codec=codec)

    app = FastAPI()

    @app.get("/me")
    async def me(payload: Dict[str, Any] = Depends(token_auth.get_payload)):
        return payload

    @app.get("/maybe")
    async def maybe(payload: Dict[str, Any] | None = Depends(token_auth.get_optional_payload)):
        return {"payload": payload}

    @app.get("/admin")
    async def admin(payload: Dict[str, Any] = Depends(token_auth.require_fields("role"))):
        return payload

    return TestClient(app)


def _bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_valid_token_from_header(client, codec):
    token = codec.encode({"user_id": 1}, SECRET)
    response = client.get("/me", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json() == {"user_id": 1}


def test_valid_token_from_cookie(client, codec):
    token = codec.encode({"user_id": 2}, SECRET)
    client.cookies.set("access_token", token)
    response = client.get("/me")
    assert response.status_code == 200
    assert response.json() == {"user_id": 2}


def test_missing_token(client):
    response = client.get("/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_invalid_tokens(client, codec):
    response = client.get("/me", headers=_bearer("garbage"))
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"

    forged = codec.encode({"user_id": 1}, "someone-else")
    response = client.get("/me", headers=_bearer(forged))
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token signature"

    expired = codec.encode({"user_id": 1}, SECRET, timestamp=NOW - 301)
    response = client.get("/me", headers=_bearer(expired))
    assert response.status_code == 401
    assert "expired" in response.json()["detail"]

    incomplete = codec.encode({"name": "no id"}, SECRET)
    response = client.get("/me", headers=_bearer(incomplete))
    assert response.status_code == 401
    assert "user_id" in response.json()["detail"]


def test_optional_payload(client, codec):
    assert client.get("/maybe").json() == {"payload": None}
    assert client.get("/maybe", headers=_bearer("garbage")).json() == {"payload": None}

    token = codec.encode({"user_id": 3}, SECRET)
    assert client.get("/maybe", headers=_bearer(token)).json() == {"payload": {"user_id": 3}}


def test_require_fields(client, codec):
    token = codec.encode({"user_id": 4}, SECRET)
    response = client.get("/admin", headers=_bearer(token))
    assert response.status_code == 401
    assert "role" in response.json()["detail"]

    token = codec.encode({"user_id": 4, "role": "admin"}, SECRET)
    response = client.get("/admin", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json() == {"user_id": 4, "role": "admin"}


def test_malformed_payload_detail_is_generic(client):
    serialized = b"{not json"
    signature = HMACSHA512Signer().sign(serialized, SECRET.encode("utf-8"))
    token = str(Token.build(serialized, signature))

    response = client.get("/me", headers=_bearer(token))
    assert response.status_code == 401
    assert response.json()["detail"] == "Malformed token payload"


def test_auth_built_from_settings_alone():
    settings = CodecSettings(secret_key=SECRET, nonce_length=10)
    token_auth = create_fastapi_token_auth(settings=settings)

    app = FastAPI()

    @app.get("/me")
    async def me(payload: Dict[str, Any] = Depends(token_auth.get_payload)):
        return payload

    token = token_auth.codec.encode({"user_id": 9}, settings.key)
    response = TestClient(app).get("/me", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json() == {"user_id": 9}
