"""
Middleware configuration reference model.

Authentication shapes point at verification and strategy handlers through a
middleware configuration: either the name of a middleware registered with the
gateway, or an inline ``{name, options}`` definition. Resolving and running
that middleware belongs to the gateway runtime; here it is only checked for
presence and basic shape.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter

from .base import ConfigShape, NonEmptyStr


REFERENCE_TAG = "reference"
INLINE_TAG = "inline"


class MiddlewareConfig(ConfigShape):
    """
    Inline middleware definition.

    Example:
        MiddlewareConfig(name="verifyBasicUser", options={"realm": "admins"})
    """

    name: NonEmptyStr = Field(
        ...,
        description="Name of the middleware handler registered with the gateway"
    )

    options: Optional[Any] = Field(
        None,
        description="Opaque options handed to the middleware when it is built"
    )


def _middleware_ref_tag(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return REFERENCE_TAG
    if isinstance(value, (dict, MiddlewareConfig)):
        return INLINE_TAG
    return None


MiddlewareConfigRef = Annotated[
    Union[
        Annotated[NonEmptyStr, Tag(REFERENCE_TAG)],
        Annotated[MiddlewareConfig, Tag(INLINE_TAG)],
    ],
    Discriminator(
        _middleware_ref_tag,
        custom_error_type="middleware_config_type",
        custom_error_message="Input should be a middleware name or a {name, options} mapping",
    ),
]
"""A middleware name or an inline :class:`MiddlewareConfig`."""


middleware_config_validator_schema = TypeAdapter(MiddlewareConfigRef)
