"""
Shared base for authentication configuration shapes.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, StringConstraints


NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
"""A string value; numbers are not converted and ``""`` is rejected."""


class ConfigShape(BaseModel):
    """
    Immutable, closed configuration shape.

    Fields are declared in snake_case and read from the camelCase keys
    operators write in gateway configuration. Unknown keys are rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    def to_config(self) -> Dict[str, Any]:
        """
        Return the normalized configuration keyed by configuration names.

        Absent optional fields are omitted; defaults applied during
        validation are included.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
