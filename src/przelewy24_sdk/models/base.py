"""Base model for Przelewy24 SDK."""
from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class P24Model(BaseModel):
    """Base model with common configuration.

    Field names are snake_case in Python and camelCase on the wire.
    Instances are immutable value objects.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a camelCase JSON-ready dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "P24Model":
        """Create model from dictionary."""
        return cls.model_validate(data)


class P24Response(P24Model):
    """Envelope shared by provider responses.

    The provider wraps every payload in ``data`` and usually adds a
    numeric ``responseCode``.
    """

    response_code: Optional[int] = None


def none_as_empty(value: Any) -> Any:
    """Read a null collection from the provider as an empty list."""
    return [] if value is None else value


# Minor currency units (grosze for PLN). Floats are rejected.
MinorAmount = Annotated[StrictInt, Field(ge=0)]
