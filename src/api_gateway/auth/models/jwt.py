"""
JWT authentication strategy models.

This module contains the JWTAuthentication model, describing how bearer
tokens are verified, and the JWTRequestExtractor model, describing where in
a request the raw token is looked up.
"""

from typing import List, Optional

from pydantic import Field

from .base import ConfigShape, NonEmptyStr
from .middleware_config import MiddlewareConfigRef


class JWTRequestExtractor(ConfigShape):
    """
    Locations a JWT token is read from.

    Any number of locations may be configured at once; the runtime tries
    each of them.

    Example:
        JWTRequestExtractor(authHeader="Bearer", cookie="session_token")
    """

    header: Optional[NonEmptyStr] = Field(
        None,
        description="HTTP header carrying the raw token"
    )

    query_param: Optional[NonEmptyStr] = Field(
        None,
        alias="queryParam",
        description="Query string parameter carrying the token"
    )

    auth_header: Optional[NonEmptyStr] = Field(
        None,
        alias="authHeader",
        description="Authorization header scheme carrying the token (e.g. 'Bearer')"
    )

    body_field: Optional[NonEmptyStr] = Field(
        None,
        alias="bodyField",
        description="Request body field carrying the token"
    )

    cookie: Optional[NonEmptyStr] = Field(
        None,
        description="Cookie name carrying the token"
    )

    def locations(self) -> List[str]:
        """
        Get the configured extraction locations.

        Returns:
            List[str]: Configuration names of the locations that are set,
            in declaration order
        """
        return [
            field.alias or name
            for name, field in type(self).model_fields.items()
            if getattr(self, name) is not None
        ]


class JWTAuthentication(ConfigShape):
    """
    JWT bearer token authentication.

    ``secretOrKey`` is either a symmetric secret or a PEM-encoded public key;
    which one depends on the algorithm family in ``algorithms``.

    Example:
        JWTAuthentication(
            secretOrKey="change-me",
            algorithms=["HS256", "HS384"],
            extractFrom={"authHeader": "Bearer"},
            issuer="https://issuer.example.com",
        )
    """

    secret_or_key: NonEmptyStr = Field(
        ...,
        alias="secretOrKey",
        repr=False,
        description="Symmetric secret or PEM-encoded public key verifying token signatures"
    )

    extract_from: Optional[JWTRequestExtractor] = Field(
        None,
        alias="extractFrom",
        description="Where the token is extracted from in the request"
    )

    issuer: Optional[NonEmptyStr] = Field(
        None,
        description="Expected token issuer (iss claim)"
    )

    audience: Optional[NonEmptyStr] = Field(
        None,
        description="Expected token audience (aud claim)"
    )

    algorithms: Optional[List[NonEmptyStr]] = Field(
        None,
        description="Allowed signing algorithms (e.g. ['HS256', 'HS384'])"
    )

    ignore_expiration: Optional[bool] = Field(
        None,
        alias="ignoreExpiration",
        description="Skip validation of the token expiration"
    )

    verify: Optional[MiddlewareConfigRef] = Field(
        None,
        description="Middleware called as verify(request, jwt_payload, done)"
    )
