"""
Hero and transformation records returned by the heroes service.

Both records are immutable values decoded from the JSON arrays the service
returns. ``to_wire`` gives back the exact JSON object shape, which is what
fixtures use to build canned response bodies.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

RecordT = TypeVar("RecordT", bound="Record")


class Record(BaseModel):
    """Common base for records decoded from the service."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., description="Service identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Free-form description")
    photo: str = Field(..., description="Photo URL")

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON object the service would send for this record."""
        return self.model_dump(mode="json")


class Hero(Record):
    """A hero, as listed by ``/api/heros/all``."""

    favorite: bool = Field(..., description="Whether the user marked the hero as favorite")


class Transformation(Record):
    """A hero transformation, as listed by ``/api/heros/tranformations``.

    The parent hero is only known from the request that fetched it; the
    record itself stores no reference to it.
    """


def list_adapter(record_type: Type[RecordT]) -> TypeAdapter:
    """Build a validator for a JSON array of ``record_type``."""
    return TypeAdapter(List[record_type])
