"""Base class for single-value value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so wrapped fields serialize as plain JSON values.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
