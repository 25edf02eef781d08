"""
Shared pytest fixtures for Mockauth tests.

This module provides common fixtures including:
- FrozenClock: controllable clock for expiry tests
- Token and authentication services with a per-test signing key
- FastAPI test client
"""

import random
import secrets
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from mockauth.config.provider import APIConfig, StaticConfigProvider, TokenConfig
from mockauth.main import create_app
from mockauth.modules.auth import AuthenticationService, IdentityPool, TokenService


class FrozenClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def secret_key():
    """Fresh signing key for each test."""
    return secrets.token_hex(32)


@pytest.fixture
def token_config(secret_key):
    return TokenConfig(secret_key=secret_key, ttl_seconds=3600)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def token_service(token_config):
    return TokenService(token_config)


@pytest.fixture
def frozen_token_service(token_config, clock):
    return TokenService(token_config, clock=clock)


@pytest.fixture
def auth_service(token_service):
    return AuthenticationService(token_service, IdentityPool(rng=random.Random(1234)))


@pytest.fixture
def config_provider(token_config):
    return StaticConfigProvider(token_config=token_config, api_config=APIConfig(port=3000))


@pytest.fixture
def app(config_provider):
    return create_app(config_provider)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
