"""
Authentication configuration models package.

Each authentication strategy shape is a pydantic model; the ``*_schema``
type adapters are the rule sets the validators evaluate. They are built once
at import time and shared read-only.

The models are organized into focused modules:
- middleware_config: opaque middleware references
- auth_config: generic and per-API authentication entries
- basic, local, jwt: strategy specific settings

Example Usage:
    from api_gateway.auth.models import jwt_authentication_schema

    config = jwt_authentication_schema.validate_python({
        "secretOrKey": "change-me",
        "extractFrom": {"authHeader": "Bearer"},
    })
"""

from pydantic import TypeAdapter

from .auth_config import ApiAuthenticationConfig, AuthenticationConfig
from .base import ConfigShape
from .basic import BasicAuthentication
from .jwt import JWTAuthentication, JWTRequestExtractor
from .local import LocalAuthentication
from .middleware_config import (
    MiddlewareConfig,
    MiddlewareConfigRef,
    middleware_config_validator_schema,
)

jwt_request_extractor_schema = TypeAdapter(JWTRequestExtractor)
jwt_authentication_schema = TypeAdapter(JWTAuthentication)
basic_authentication_schema = TypeAdapter(BasicAuthentication)
local_authentication_schema = TypeAdapter(LocalAuthentication)
authentication_validator_schema = TypeAdapter(AuthenticationConfig)
api_authentication_validator_schema = TypeAdapter(ApiAuthenticationConfig)

__all__ = [
    "ConfigShape",
    "MiddlewareConfig",
    "MiddlewareConfigRef",
    "AuthenticationConfig",
    "ApiAuthenticationConfig",
    "BasicAuthentication",
    "LocalAuthentication",
    "JWTAuthentication",
    "JWTRequestExtractor",

    # Rule sets
    "middleware_config_validator_schema",
    "jwt_request_extractor_schema",
    "jwt_authentication_schema",
    "basic_authentication_schema",
    "local_authentication_schema",
    "authentication_validator_schema",
    "api_authentication_validator_schema",
]
