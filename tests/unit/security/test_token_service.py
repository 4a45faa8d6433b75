"""Unit tests for TokenService (src/notekeeper/security/jwt.py)."""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from notekeeper.core.errors import InvalidTokenError
from notekeeper.security.jwt import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, TokenService


def test_access_token_round_trip(token_service):
    user_id = uuid.uuid4()
    token = token_service.issue_access_token(user_id)
    assert isinstance(token, str)
    assert token_service.verify_access_token(token) == user_id


def test_access_token_claims(token_service, test_settings):
    token = token_service.issue_access_token(uuid.uuid4())
    claims = jwt.get_unverified_claims(token)
    assert claims["type"] == ACCESS_TOKEN_TYPE
    assert claims["exp"] - claims["iat"] == test_settings.access_token_expire_seconds
    assert "jti" in claims


def test_expired_access_token_rejected(token_service):
    token = token_service.issue_access_token(uuid.uuid4(), expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(token)


def test_tampered_token_rejected(token_service):
    token = token_service.issue_access_token(uuid.uuid4())
    header, payload, signature = token.split(".")
    forged = ".".join([header, payload, signature[::-1]])
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(forged)


def test_garbage_token_rejected(token_service):
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token("not-a-jwt")


def test_refresh_token_not_accepted_as_access_token(token_service):
    refresh = token_service.issue_refresh_token(uuid.uuid4())
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(refresh)


def test_access_token_not_accepted_as_refresh_token(token_service):
    access = token_service.issue_access_token(uuid.uuid4())
    with pytest.raises(InvalidTokenError):
        token_service.verify_refresh_token(access)


def test_type_claim_checked_even_with_right_secret(token_service, test_settings):
    # signed with the access secret but claiming to be a refresh token
    token = jwt.encode(
        {"sub": str(uuid.uuid4()), "type": REFRESH_TOKEN_TYPE},
        test_settings.access_token_secret_key,
        algorithm=test_settings.algorithm,
    )
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(token)


def test_non_uuid_subject_rejected(token_service, test_settings):
    token = jwt.encode(
        {"sub": "alice", "type": ACCESS_TOKEN_TYPE},
        test_settings.access_token_secret_key,
        algorithm=test_settings.algorithm,
    )
    with pytest.raises(InvalidTokenError):
        token_service.verify_access_token(token)


def test_refresh_token_has_no_exp_by_default(token_service):
    user_id = uuid.uuid4()
    token = token_service.issue_refresh_token(user_id)
    assert "exp" not in jwt.get_unverified_claims(token)
    assert token_service.verify_refresh_token(token) == user_id


def test_refresh_token_exp_when_configured(test_settings):
    settings = test_settings.model_copy(update={"refresh_token_expire_days": 7})
    token = TokenService(settings).issue_refresh_token(uuid.uuid4())
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_tokens_issued_back_to_back_are_distinct(token_service):
    user_id = uuid.uuid4()
    assert token_service.issue_refresh_token(user_id) != token_service.issue_refresh_token(user_id)
