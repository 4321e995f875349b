"""Tests for token issuance and verification."""

import jwt as pyjwt
import pytest
from datetime import datetime, timedelta, timezone

from userapi.auth import jwt as token_service
from userapi.errors import AuthError, AuthFailure


def test_issued_token_verifies_to_user_id():
    token = token_service.create_access_token("user-123")

    assert token_service.verify_access_token(token) == "user-123"


def test_token_carries_id_and_default_24h_expiry():
    token = token_service.create_access_token("user-123")
    payload = token_service.decode_access_token(token)

    assert payload["id"] == "user-123"
    assert payload["exp"] - payload["iat"] == 24 * 3600


def test_expired_token_is_rejected():
    token = token_service.create_access_token("user-123", expires_delta=timedelta(seconds=-10))

    assert token_service.decode_access_token(token) is None
    with pytest.raises(AuthError) as exc_info:
        token_service.verify_access_token(token)
    assert exc_info.value.reason == AuthFailure.INVALID_OR_EXPIRED


def test_tampered_token_is_rejected():
    token = token_service.create_access_token("user-123")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(AuthError):
        token_service.verify_access_token(tampered)


def test_token_signed_with_other_secret_is_rejected():
    forged = pyjwt.encode(
        {"id": "user-123", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret-that-is-long-enough-for-hs256",
        algorithm="HS256",
    )

    with pytest.raises(AuthError):
        token_service.verify_access_token(forged)


def test_malformed_token_is_rejected():
    with pytest.raises(AuthError) as exc_info:
        token_service.verify_access_token("not.a.jwt")
    assert exc_info.value.message == "Invalid or expired token."


def test_token_without_id_claim_is_rejected():
    token = pyjwt.encode(
        {"sub": "user-123", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        token_service.JWT_SECRET_KEY,
        algorithm=token_service.JWT_ALGORITHM,
    )

    with pytest.raises(AuthError):
        token_service.verify_access_token(token)
