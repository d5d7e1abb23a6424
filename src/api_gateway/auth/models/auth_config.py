"""
API authentication configuration models.

This module contains the AuthenticationConfig model, which points at the
middleware implementing an authentication strategy, and the
ApiAuthenticationConfig model used inside an API definition, where the
strategy is either declared inline (``strategy``) or imported from the
gateway configuration by name (``use``).
"""

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from .base import ConfigShape, NonEmptyStr
from .middleware_config import MiddlewareConfigRef


class AuthenticationConfig(ConfigShape):
    """
    Configure authentication for APIs.

    Example:
        config = AuthenticationConfig(strategy={"name": "jwt", "options": {...}})
    """

    strategy: MiddlewareConfigRef = Field(
        ...,
        description="Middleware implementing the authentication strategy"
    )


class ApiAuthenticationConfig(AuthenticationConfig):
    """
    Authentication entry of an API definition.

    Exactly one of ``strategy`` and ``use`` must be given. ``group`` limits
    the entry to the listed request groups; when it is absent every request
    is handled.

    Example:
        # Inline strategy for the admin group only
        ApiAuthenticationConfig(strategy="basicAdmins", group="admins")

        # Strategy imported from the gateway config session
        ApiAuthenticationConfig(use="corporateJwt")
    """

    group: Optional[List[NonEmptyStr]] = Field(
        None,
        description="Request groups handled by this authenticator (defaults to all)"
    )

    strategy: Optional[MiddlewareConfigRef] = Field(
        None,
        description="Middleware implementing the authentication strategy"
    )

    use: Optional[NonEmptyStr] = Field(
        None,
        description="Name of an authentication config imported from the gateway config session"
    )

    @field_validator('group', mode='before')
    @classmethod
    def wrap_single_group(cls, v: Any) -> Any:
        """Accept a bare group name as a one-element list."""
        if isinstance(v, str):
            return [v]
        return v

    @model_validator(mode='after')
    def validate_strategy_or_use(self):
        """Require exactly one of ``strategy`` and ``use``."""
        if self.strategy is None and self.use is None:
            raise PydanticCustomError(
                'strategy_or_use_missing',
                'One of "strategy" or "use" must be provided',
            )
        if self.strategy is not None and self.use is not None:
            raise PydanticCustomError(
                'strategy_and_use_conflict',
                '"strategy" and "use" are mutually exclusive',
            )
        return self

    @property
    def discriminant(self) -> Literal['strategy', 'use']:
        """Which of the two exclusive fields this entry was declared with."""
        return 'strategy' if self.strategy is not None else 'use'

    def applies_to(self, group: str) -> bool:
        """
        Check whether requests of ``group`` are handled by this entry.

        Args:
            group: Request group name

        Returns:
            bool: True when no groups are configured or the group is listed
        """
        return self.group is None or group in self.group
