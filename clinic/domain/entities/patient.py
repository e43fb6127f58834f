"""
Patient Entity

Represents a registered patient and their admission state.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from clinic.core.domain import Entity, PatientNotAdmittedException, ValidationException

from ..value_objects.person import PersonalDetails, yes_no


@dataclass(eq=False)
class Patient(Entity[int]):
    """
    Patient record.

    `admission_date` is set if and only if the patient is admitted.

    Example:
        ```python
        patient = Patient(
            id=1,
            details=PersonalDetails("Jane Roe", 25, "Female", "555-2222"),
            disease="Fracture",
            admitted=True,
            admission_date=date(2024, 5, 30),
        )
        patient.discharge()
        ```
    """

    details: PersonalDetails | None = None
    disease: str = ""
    admitted: bool = False
    admission_date: date | None = None

    def __post_init__(self):
        """Validate patient after initialization."""
        if self.details is None:
            raise ValidationException("Patient personal details are required", field="details")
        if self.admitted and self.admission_date is None:
            raise ValidationException("Admission date is required for an admitted patient", field="admission_date")
        if not self.admitted and self.admission_date is not None:
            raise ValidationException("Only admitted patients have an admission date", field="admission_date")

    @property
    def name(self) -> str:
        return self.details.name

    def discharge(self) -> None:
        """Discharge the patient, clearing the admission date."""
        if not self.admitted:
            raise PatientNotAdmittedException(self.id)

        self.admitted = False
        self.admission_date = None
        self.touch()

    def summary(self) -> str:
        text = f"ID: {self.id}, {self.details.summary()}, Disease: {self.disease}, Admitted: {yes_no(self.admitted)}"
        if self.admission_date is not None:
            text += f", Admission Date: {self.admission_date.isoformat()}"
        return text

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            **self.details.to_dict(),
            "disease": self.disease,
            "admitted": self.admitted,
            "admission_date": self.admission_date.isoformat() if self.admission_date else None,
        }
