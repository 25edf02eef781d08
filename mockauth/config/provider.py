"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

DEFAULT_SECRET_KEY = "your-secret-key-change-in-production"


@dataclass(frozen=True)
class TokenConfig:
    """Token signing configuration."""
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    ttl_seconds: int = 3600

    def __post_init__(self):
        if not self.secret_key:
            raise ValueError("Token signing key must not be empty")


@dataclass
class APIConfig:
    """API configuration."""
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "INFO"
    auth_log_level: Optional[str] = None
    quiet_paths: List[str] = field(default_factory=lambda: ["/healthz"])
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def public_url(self) -> str:
        """URL printed at start-up."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_token_config(self) -> TokenConfig:
        """Get token signing configuration."""
        ...

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...


def _csv_env(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_token_config(self) -> TokenConfig:
        """Get token configuration from environment variables."""
        ttl_seconds = _int_env("MOCKAUTH_TOKEN_TTL", "3600")
        if ttl_seconds <= 0:
            raise ValueError(f"MOCKAUTH_TOKEN_TTL must be positive, got {ttl_seconds}")

        return TokenConfig(
            secret_key=os.getenv("MOCKAUTH_SECRET_KEY", DEFAULT_SECRET_KEY),
            ttl_seconds=ttl_seconds,
        )

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=_int_env("API_PORT", "3000"),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            auth_log_level=(os.getenv("AUTH_LOG_LEVEL") or "").upper() or None,
            quiet_paths=_csv_env("LOG_QUIET_PATHS", "/healthz"),
            cors_origins=_csv_env("CORS_ORIGINS", "*"),
        )


class StaticConfigProvider:
    """Provider returning fixed config objects, used for tests and embedding."""

    def __init__(
        self,
        token_config: Optional[TokenConfig] = None,
        api_config: Optional[APIConfig] = None,
    ):
        self._token_config = token_config or TokenConfig()
        self._api_config = api_config or APIConfig()

    def get_token_config(self) -> TokenConfig:
        return self._token_config

    def get_api_config(self) -> APIConfig:
        return self._api_config
