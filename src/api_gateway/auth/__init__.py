"""
Authentication configuration module for the API Gateway.

This module describes and validates how the gateway authenticates incoming
requests: Basic, Local and JWT strategy settings, plus the per-API entries
that select a strategy.
"""

from .exceptions import (
    ConfigurationError,
    UnknownStrategyError,
    ValidationError,
    Violation,
)
from .models import (
    ApiAuthenticationConfig,
    AuthenticationConfig,
    BasicAuthentication,
    JWTAuthentication,
    JWTRequestExtractor,
    LocalAuthentication,
    MiddlewareConfig,
)
from .validators import (
    STRATEGY_VALIDATORS,
    validate_api_authentication_config,
    validate_authentication_config,
    validate_basic_auth_config,
    validate_jwt_auth_config,
    validate_local_auth_config,
    validate_strategy_config,
)

__all__ = [
    "ApiAuthenticationConfig",
    "AuthenticationConfig",
    "BasicAuthentication",
    "JWTAuthentication",
    "JWTRequestExtractor",
    "LocalAuthentication",
    "MiddlewareConfig",
    "ConfigurationError",
    "UnknownStrategyError",
    "ValidationError",
    "Violation",
    "STRATEGY_VALIDATORS",
    "validate_api_authentication_config",
    "validate_authentication_config",
    "validate_basic_auth_config",
    "validate_jwt_auth_config",
    "validate_local_auth_config",
    "validate_strategy_config",
]
