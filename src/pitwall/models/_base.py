"""Shared pydantic base for camelCase wire models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Frozen model that reads and writes camelCase keys.

    Snake-case attribute names are accepted on input as well, so callers can
    build models in Python without spelling out the wire aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase JSON-compatible form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
