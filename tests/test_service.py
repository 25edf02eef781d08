"""
Unit tests for the authentication facade and factory.
"""

import warnings
from unittest.mock import MagicMock

import jwt
import pytest

from mockauth.config.provider import StaticConfigProvider, TokenConfig
from mockauth.modules.auth import (
    IDENTITY_POOL,
    AuthFactory,
    AuthenticationService,
    IdentityPool,
    InvalidTokenError,
    MissingTokenError,
)
from mockauth.modules.auth.service import extract_bearer_token


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, None),
        ("", None),
        ("Bearer", None),
        ("Bearer ", None),
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("Token abc", "abc"),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_login_issues_verifiable_token(auth_service, token_service):
    result = auth_service.login()
    assert result.identity in IDENTITY_POOL
    assert result.token
    assert token_service.verify(result.token) == result.identity


def test_authenticate_valid_header(auth_service):
    result = auth_service.login()
    auth = auth_service.authenticate(f"Bearer {result.token}")
    assert auth.identity == result.identity


def test_authenticate_without_header(auth_service):
    with pytest.raises(MissingTokenError):
        auth_service.authenticate(None)


def test_authenticate_bare_scheme(auth_service):
    with pytest.raises(MissingTokenError):
        auth_service.authenticate("Bearer")


def test_authenticate_garbage(auth_service):
    with pytest.raises(InvalidTokenError):
        auth_service.authenticate("Bearer garbage")


def test_factory_uses_configured_key():
    provider = StaticConfigProvider(token_config=TokenConfig(secret_key="factory-key-0123456789abcdef0123"))
    service = AuthFactory.build(provider)

    result = service.login()
    claims = jwt.decode(result.token, "factory-key-0123456789abcdef0123", algorithms=["HS256"])
    assert claims["username"] == result.identity


def test_services_with_different_keys_reject_each_other():
    first = AuthFactory.build_for_testing(secret_key="first-key-0123456789abcdef012345")
    second = AuthFactory.build_for_testing(secret_key="second-key-0123456789abcdef01234")

    token = first.login().token
    with pytest.raises(InvalidTokenError):
        second.authenticate(f"Bearer {token}")


def test_build_for_testing_seed_is_reproducible():
    first = AuthFactory.build_for_testing(seed=3)
    second = AuthFactory.build_for_testing(seed=3)
    assert [first.login().identity for _ in range(10)] == [second.login().identity for _ in range(10)]


def test_authenticate_returns_claims(auth_service, token_service):
    result = auth_service.login()
    auth = auth_service.authenticate(f"Bearer {result.token}")

    assert auth.claims["username"] == result.identity
    assert auth.claims["exp"] - auth.claims["iat"] == token_service.config.ttl_seconds


def test_authenticate_passes_missing_token_to_issuer():
    issuer = MagicMock()
    issuer.decode.side_effect = MissingTokenError()
    service = AuthenticationService(issuer, IdentityPool())

    with pytest.raises(MissingTokenError):
        service.authenticate("Bearer")
    issuer.decode.assert_called_once_with(None)


def test_test_stack_key_is_long_enough():
    service = AuthFactory.build_for_testing()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        token = service.login().token
        assert service.authenticate(f"Bearer {token}").identity in IDENTITY_POOL
