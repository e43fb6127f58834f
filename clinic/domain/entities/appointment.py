"""
Appointment Entity

Represents a booked visit of a patient with a doctor.
"""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from clinic.core.domain import Entity, InvalidOperationException

from ..value_objects.statuses import AppointmentStatus

if TYPE_CHECKING:
    from .doctor import Doctor
    from .patient import Patient


@dataclass(eq=False)
class Appointment(Entity[int]):
    """
    Appointment record.

    Patient and doctor are referenced by id; their current state is looked
    up through the registry that owns all records. Only the status changes
    after creation.

    Example:
        ```python
        appointment = Appointment(
            id=1,
            patient_id=1,
            doctor_id=1,
            appointment_date=date(2024, 6, 1),
            time_label="09:30 AM",
        )
        appointment.complete()
        ```
    """

    # References
    patient_id: int = 0
    doctor_id: int = 0

    # Scheduling
    appointment_date: date | None = None
    time_label: str = ""  # e.g. "10:30 AM"

    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    # Status Transitions

    def transition_to(self, new_status: AppointmentStatus) -> None:
        """Move the appointment to `new_status`; same-status requests are no-ops."""
        if new_status == self.status:
            return
        if not self.status.can_transition_to(new_status):
            raise InvalidOperationException(
                operation=f"mark {new_status.value.lower()}",
                current_state=self.status.value,
            )

        self.status = new_status
        self.touch()

    def complete(self) -> None:
        self.transition_to(AppointmentStatus.COMPLETED)

    def cancel(self) -> None:
        self.transition_to(AppointmentStatus.CANCELLED)

    def is_for_patient(self, patient_id: int) -> bool:
        return self.patient_id == patient_id

    # Serialization

    def summary(self, patient: "Patient", doctor: "Doctor") -> str:
        appointment_date = self.appointment_date.isoformat() if self.appointment_date else "-"
        return (
            f"Appointment ID: {self.id}, Patient: {patient.name}, Doctor: {doctor.name}, "
            f"Date: {appointment_date}, Time: {self.time_label}, Status: {self.status.value}"
        )

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "doctor_id": self.doctor_id,
            "date": self.appointment_date.isoformat() if self.appointment_date else None,
            "time": self.time_label,
            "status": self.status.value,
        }
