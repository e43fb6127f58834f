"""
Doctor Entity

Represents a doctor and whether they currently accept appointments.
"""

from dataclasses import dataclass
from typing import Any

from clinic.core.domain import Entity, ValidationException

from ..value_objects.person import PersonalDetails, yes_no


@dataclass(eq=False)
class Doctor(Entity[int]):
    """
    Doctor record.

    Availability is operator-controlled data; the scheduler only reads it.
    """

    details: PersonalDetails | None = None
    specialization: str = ""
    available: bool = True

    def __post_init__(self):
        if self.details is None:
            raise ValidationException("Doctor personal details are required", field="details")

    @property
    def name(self) -> str:
        return self.details.name

    def can_accept_appointments(self) -> bool:
        return self.available

    def summary(self) -> str:
        return (
            f"ID: {self.id}, {self.details.summary()}, "
            f"Specialization: {self.specialization}, Available: {yes_no(self.available)}"
        )

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            **self.details.to_dict(),
            "specialization": self.specialization,
            "available": self.available,
        }
