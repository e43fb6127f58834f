"""
Clinic Status Value Objects

Status enums for appointments and bill payments.
"""

from clinic.core.domain import StatusEnum


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - SCHEDULED -> COMPLETED, CANCELLED
    - COMPLETED -> (terminal)
    - CANCELLED -> (terminal)
    """

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status.value in _APPOINTMENT_TRANSITIONS.get(self.value, [])

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return not _APPOINTMENT_TRANSITIONS.get(self.value)


_APPOINTMENT_TRANSITIONS: dict[str, list[str]] = {
    "Scheduled": ["Completed", "Cancelled"],
    "Completed": [],
    "Cancelled": [],
}


class BillPaymentOutcome(StatusEnum):
    """Result of asking for a bill to be marked as paid."""

    PAID = "paid"
    ALREADY_PAID = "already_paid"

    @property
    def message(self) -> str:
        if self is BillPaymentOutcome.ALREADY_PAID:
            return "Bill is already marked as paid."
        return "Bill marked as paid."
