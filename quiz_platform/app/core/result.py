"""
Result values returned by service lookups.

A service ``get`` returns either ``Ok(entity)`` or ``NotFound``.  The
API layer turns ``NotFound`` into an HTTP 404; nothing below the API
raises for a missing record.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup by identity found no record."""

    entity: str
    entity_id: int

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


Result = Union[Ok[T], NotFound]


class StoreError(Exception):
    """Raised by a repository when the storage backend fails."""
