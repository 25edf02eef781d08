"""Configuration for the mock authentication API."""

from .provider import (
    APIConfig,
    ConfigProvider,
    EnvConfigProvider,
    StaticConfigProvider,
    TokenConfig,
)

__all__ = [
    "APIConfig",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "TokenConfig",
]
