#!/usr/bin/env python3
"""
Mockauth - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the authentication stack
3. Registers routes and runs the API server

All business logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mockauth import __version__
from mockauth.config.provider import ConfigProvider, EnvConfigProvider
from mockauth.logging_config import configure_logging, get_logging_config
from mockauth.modules.api import (
    ErrorResponse,
    HealthResponse,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    create_docs_router,
)
from mockauth.modules.api.models import LOGOUT_MESSAGE, REGISTRATION_MESSAGE
from mockauth.modules.auth import AuthError, AuthFactory, AuthenticationService, AuthResult
from mockauth.modules.profile import build_profile

logger = logging.getLogger(__name__)

ROUTE_SUMMARY = (
    ("GET ", "/", "API documentation (default)"),
    ("POST", "/login", "Get a random username and JWT token"),
    ("POST", "/register", "Mock registration"),
    ("GET ", "/profile", "Get user profile (requires JWT)"),
    ("POST", "/logout", "Logout endpoint"),
    ("GET ", "/api-documentation", "View API documentation"),
)

AUTH_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Access token required"},
    403: {"model": ErrorResponse, "description": "Invalid or expired token"},
}


# Dependency injection helpers
async def get_auth_service(request: Request) -> AuthenticationService:
    """Return the authentication service built for this app."""
    return request.app.state.auth_service


async def require_bearer_auth(
    authorization: Optional[str] = Header(None, description="Bearer token for authentication"),
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> AuthResult:
    """
    Verify the bearer token on a protected route.

    Raises:
        MissingTokenError: No token in the Authorization header (401)
        InvalidTokenError: Token rejected (403)
    """
    return auth_service.authenticate(authorization)


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Handle authentication failures."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    auth_service: Optional[AuthenticationService] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config_provider: Configuration source (defaults to environment variables)
        auth_service: Prebuilt authentication service; built from config if omitted

    Returns:
        Configured FastAPI application
    """
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server is running on {api_config.public_url}")
        logger.info("Available routes:")
        for method, path, description in ROUTE_SUMMARY:
            logger.info(f"  {method} {path:<20} - {description}")
        yield
        logger.info("Mockauth API shutdown complete")

    app = FastAPI(
        title="Mock Auth API",
        description="Mock authentication API issuing signed tokens for fake users",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.auth_service = auth_service or AuthFactory.build(config_provider)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AuthError, auth_error_handler)
    app.include_router(create_docs_router())

    @app.post("/login", response_model=LoginResponse, tags=["auth"])
    async def login(
        service: AuthenticationService = Depends(get_auth_service),
    ) -> LoginResponse:
        """
        Mock login returning a random username and a token valid for one hour.
        """
        result = service.login()
        return LoginResponse(username=result.identity, token=result.token)

    @app.post("/register", response_model=MessageResponse, tags=["auth"])
    async def register() -> MessageResponse:
        """
        Mock registration. The request body is not read.
        """
        return MessageResponse(message=REGISTRATION_MESSAGE)

    @app.get(
        "/profile",
        response_model=ProfileResponse,
        responses=AUTH_ERROR_RESPONSES,
        tags=["profile"],
    )
    async def profile(auth: AuthResult = Depends(require_bearer_auth)) -> ProfileResponse:
        """
        Get the profile of the authenticated user.

        Returns:
            200: Profile
            401: No token supplied
            403: Invalid or expired token
        """
        return ProfileResponse(profile=build_profile(auth.identity))

    @app.post("/logout", response_model=MessageResponse, tags=["auth"])
    async def logout() -> MessageResponse:
        """
        Logout. Tokens are not revoked; the client discards its copy.
        """
        return MessageResponse(message=LOGOUT_MESSAGE)

    @app.get("/healthz", response_model=HealthResponse, tags=["health"])
    async def healthz() -> HealthResponse:
        """Minimal unauthenticated health check."""
        return HealthResponse()

    return app


def run(config_provider: Optional[ConfigProvider] = None) -> None:
    """Console entry point: configure logging and serve the API with uvicorn."""
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()
    configure_logging(api_config)

    if api_config.debug:
        # Reload needs an import string
        uvicorn.run(
            "mockauth.main:create_app",
            factory=True,
            host=api_config.host,
            port=api_config.port,
            log_level=api_config.log_level.lower(),
            reload=True,
            log_config=get_logging_config(api_config),
        )
        return

    uvicorn.run(
        create_app(config_provider),
        host=api_config.host,
        port=api_config.port,
        log_level=api_config.log_level.lower(),
        log_config=get_logging_config(api_config),
    )


if __name__ == "__main__":
    run()
