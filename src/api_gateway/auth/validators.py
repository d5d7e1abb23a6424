"""
Validation entry points for authentication configuration.

Each entry point takes raw, untrusted configuration data (usually a mapping
parsed from gateway config), evaluates the matching rule set and returns the
normalized model: defaults applied, coercions performed. Any broken rule
raises ValidationError listing every violation found; nothing partial is
ever returned.

Example:
    from api_gateway.auth.validators import validate_strategy_config

    jwt_config = validate_strategy_config("jwt", {"secretOrKey": "change-me"})
"""

from typing import Any, Callable, Dict, List, Tuple, Union

import pydantic
from pydantic import TypeAdapter

from ..core.config import get_settings
from ..core.logging import get_logger
from .exceptions import UnknownStrategyError, ValidationError, Violation
from .models import (
    ApiAuthenticationConfig,
    AuthenticationConfig,
    BasicAuthentication,
    ConfigShape,
    JWTAuthentication,
    LocalAuthentication,
    api_authentication_validator_schema,
    authentication_validator_schema,
    basic_authentication_schema,
    jwt_authentication_schema,
    local_authentication_schema,
)
from .models.middleware_config import INLINE_TAG, REFERENCE_TAG

logger = get_logger(__name__)

# Union member tags follow a middleware reference key in pydantic error
# locations; they are not part of the config path
_UNION_TAGS = frozenset({REFERENCE_TAG, INLINE_TAG})
_MIDDLEWARE_REF_FIELDS = frozenset({"verify", "strategy"})


def _config_path(loc: Tuple[Union[str, int], ...]) -> str:
    parts = [
        str(part)
        for i, part in enumerate(loc)
        if not (part in _UNION_TAGS and i > 0 and loc[i - 1] in _MIDDLEWARE_REF_FIELDS)
    ]
    return ".".join(parts)


def _to_violations(exc: pydantic.ValidationError) -> List[Violation]:
    """Translate pydantic errors into config-path violations."""
    violations = []
    for error in exc.errors(include_url=False):
        path = _config_path(error["loc"])
        kind = error["type"]
        value_type = None if kind == "missing" else type(error.get("input")).__name__
        violations.append(Violation(
            path=path,
            kind=kind,
            message=error["msg"],
            value_type=value_type,
        ))
    return violations


def _validate(schema: TypeAdapter, shape: str, config: Any) -> ConfigShape:
    try:
        value = schema.validate_python(config)
    except pydantic.ValidationError as e:
        error = ValidationError(shape, _to_violations(e))
        if get_settings().LOG_VALIDATION_FAILURES:
            logger.warning(
                "authentication_config_rejected",
                shape=shape,
                violations=[f"{v.path or '<root>'}:{v.kind}" for v in error.violations],
            )
        raise error from e

    logger.debug("authentication_config_accepted", shape=shape)
    return value


def validate_local_auth_config(config: Any) -> LocalAuthentication:
    """
    Validate a Local authentication configuration.

    Args:
        config: Raw configuration mapping (or a LocalAuthentication)

    Returns:
        LocalAuthentication: Normalized configuration, with ``usernameField``
        and ``passwordField`` defaulted to ``username`` and ``password``

    Raises:
        ValidationError: If the configuration breaks the rule set
    """
    return _validate(local_authentication_schema, "LocalAuthentication", config)


def validate_basic_auth_config(config: Any) -> BasicAuthentication:
    """
    Validate a Basic authentication configuration.

    Raises:
        ValidationError: If ``verify`` is missing or the configuration is malformed
    """
    return _validate(basic_authentication_schema, "BasicAuthentication", config)


def validate_jwt_auth_config(config: Any) -> JWTAuthentication:
    """
    Validate a JWT authentication configuration.

    Raises:
        ValidationError: If ``secretOrKey`` is missing or the configuration is malformed
    """
    return _validate(jwt_authentication_schema, "JWTAuthentication", config)


def validate_authentication_config(config: Any) -> AuthenticationConfig:
    """Validate a generic authentication entry (``strategy`` required)."""
    return _validate(authentication_validator_schema, "AuthenticationConfig", config)


def validate_api_authentication_config(config: Any) -> ApiAuthenticationConfig:
    """
    Validate the authentication entry of an API definition.

    A bare string ``group`` is normalized to a one-element list. An explicit
    ``null`` for ``strategy`` or ``use`` (or any optional field) counts as
    absent, so ``{"strategy": None, "use": "x"}`` is accepted rather than
    reported as a conflict.

    Raises:
        ValidationError: With kind ``strategy_or_use_missing`` when neither
            ``strategy`` nor ``use`` is set, ``strategy_and_use_conflict``
            when both are
    """
    return _validate(api_authentication_validator_schema, "ApiAuthenticationConfig", config)


STRATEGY_VALIDATORS: Dict[str, Callable[[Any], ConfigShape]] = {
    "basic": validate_basic_auth_config,
    "local": validate_local_auth_config,
    "jwt": validate_jwt_auth_config,
}


def validate_strategy_config(kind: str, config: Any) -> ConfigShape:
    """
    Validate strategy options using the validator registered for ``kind``.

    Args:
        kind: Strategy kind name (``basic``, ``local`` or ``jwt``, any case)
        config: Raw strategy options

    Returns:
        The normalized strategy configuration model

    Raises:
        UnknownStrategyError: If no validator exists for ``kind``
        ValidationError: If the options break the strategy rule set
    """
    validator = STRATEGY_VALIDATORS.get(kind.lower()) if isinstance(kind, str) else None
    if validator is None:
        raise UnknownStrategyError(str(kind), list(STRATEGY_VALIDATORS))
    return validator(config)
