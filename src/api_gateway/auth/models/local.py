"""
Local (form field) authentication strategy model.
"""

from pydantic import Field

from .base import ConfigShape, NonEmptyStr
from .middleware_config import MiddlewareConfigRef


class LocalAuthentication(ConfigShape):
    """
    Username/password authentication read from request fields.

    Uses the same ``verify(userid, password, done)`` contract as Basic
    authentication.

    Example:
        LocalAuthentication(verify="verifyUser", usernameField="login")
    """

    verify: MiddlewareConfigRef = Field(
        ...,
        description="Middleware verifying a user id and password"
    )

    username_field: NonEmptyStr = Field(
        default="username",
        alias="usernameField",
        description="Request field holding the username"
    )

    password_field: NonEmptyStr = Field(
        default="password",
        alias="passwordField",
        description="Request field holding the password"
    )
