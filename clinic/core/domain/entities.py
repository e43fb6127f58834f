"""
Base Entity Class

Entities are domain objects with identity and lifecycle.
They keep their identity regardless of how their attributes change.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

# Type variable for entity ID
TId = TypeVar("TId")


@dataclass
class Entity(ABC, Generic[TId]):
    """
    Base class for all clinic records.

    The identifier is allocated by the registry that owns the record;
    an entity built outside a registry has no id until one is assigned.

    Type Parameters:
        TId: Type of entity identifier

    Example:
        ```python
        @dataclass
        class Ward(Entity[int]):
            name: str = ""

            def rename(self, name: str) -> None:
                self.name = name
                self.touch()
        ```
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC), repr=False, compare=False)
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC), repr=False, compare=False)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they are the same kind of record with the same ID."""
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash((type(self).__name__, self.id)) if self.id is not None else id(self)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(UTC)
