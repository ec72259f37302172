"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for composite value objects (authors, counts).

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects wrapping a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so tokens serialize as plain strings.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
