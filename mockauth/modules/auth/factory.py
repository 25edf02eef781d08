"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the authentication stack based on configuration
- Wires dependencies together
- Returns only the service facade
"""

import logging
import random
from typing import Optional

from ...config.provider import ConfigProvider, TokenConfig
from .identity import IdentityPool
from .service import AuthenticationService
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Composition root for the authentication stack.
    """

    @staticmethod
    def build(config_provider: ConfigProvider) -> AuthenticationService:
        """
        Build the complete authentication stack.

        Args:
            config_provider: Configuration provider

        Returns:
            AuthenticationService facade
        """
        token_config = config_provider.get_token_config()
        logger.info(
            f"Building authentication stack ({token_config.algorithm}, "
            f"ttl={token_config.ttl_seconds}s)"
        )
        return AuthenticationService(TokenService(token_config), IdentityPool())

    @staticmethod
    def build_for_testing(
        secret_key: str = "mockauth-test-secret-0123456789abcdef",
        ttl_seconds: int = 3600,
        seed: Optional[int] = None,
    ) -> AuthenticationService:
        """
        Build an auth stack with an explicit key and optionally seeded pool.
        """
        rng = random.Random(seed) if seed is not None else None
        token_service = TokenService(TokenConfig(secret_key=secret_key, ttl_seconds=ttl_seconds))
        return AuthenticationService(token_service, IdentityPool(rng=rng))
