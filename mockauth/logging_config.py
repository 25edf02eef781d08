"""
Logging setup for the mock authentication API.

Application loggers live under ``mockauth``; token issue/reject lines come
from ``mockauth.modules.auth`` and can run at their own level. Uvicorn access
lines for quiet paths (``/healthz`` by default) are dropped.
"""

import logging
import logging.config
from typing import Any, Dict, Iterable, Optional

from mockauth.config.provider import APIConfig

APP_LOGGER = "mockauth"
AUTH_LOGGER = "mockauth.modules.auth"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class QuietPathFilter(logging.Filter):
    """Drops uvicorn access records whose request path is in ``paths``."""

    def __init__(self, paths: Iterable[str] = ()):
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name != "uvicorn.access" or not self.paths:
            return True
        # uvicorn passes (client_addr, method, full_path, http_version, status_code)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        path = str(args[2]).split("?", 1)[0]
        return path not in self.paths


def _logger(handler: str, level: str) -> Dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(api_config: Optional[APIConfig] = None) -> Dict[str, Any]:
    """Build a ``dictConfig`` mapping from the API configuration."""
    api_config = api_config or APIConfig()
    level = api_config.log_level.upper()
    auth_level = (api_config.auth_log_level or level).upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "quiet_paths": {
                "()": QuietPathFilter,
                "paths": list(api_config.quiet_paths),
            }
        },
        "formatters": {
            "app": {"format": LOG_FORMAT},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "app": {
                "class": "logging.StreamHandler",
                "formatter": "app",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["quiet_paths"],
            },
        },
        "loggers": {
            APP_LOGGER: _logger("app", level),
            # Propagates to APP_LOGGER's handler; only the level differs
            AUTH_LOGGER: {"level": auth_level},
            "uvicorn.error": _logger("app", level),
            "uvicorn.access": _logger("access", level),
        },
        "root": {"level": "WARNING", "handlers": ["app"]},
    }


def configure_logging(api_config: Optional[APIConfig] = None) -> None:
    """Apply the logging configuration to the running process."""
    logging.config.dictConfig(get_logging_config(api_config))
