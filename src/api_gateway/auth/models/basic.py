"""
Basic authentication strategy model.
"""

from pydantic import Field

from .base import ConfigShape
from .middleware_config import MiddlewareConfigRef


class BasicAuthentication(ConfigShape):
    """
    HTTP Basic authentication.

    ``verify`` names a middleware called as ``verify(userid, password, done)``
    where ``done(error, user, info)`` reports an error, the authenticated
    user, or an informational no-match.
    """

    verify: MiddlewareConfigRef = Field(
        ...,
        description="Middleware verifying a user id and password"
    )
