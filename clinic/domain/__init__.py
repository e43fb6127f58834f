"""
Clinic Domain Layer

Components:
- Entities: Patient, Doctor, Appointment, Bill
- Value Objects: PersonalDetails, AppointmentStatus, BillPaymentOutcome
"""

from clinic.domain.entities import Appointment, Bill, Doctor, Patient
from clinic.domain.value_objects import (
    AppointmentStatus,
    BillPaymentOutcome,
    PersonalDetails,
    yes_no,
)

__all__ = [
    # Entities
    "Patient",
    "Doctor",
    "Appointment",
    "Bill",
    # Value Objects
    "PersonalDetails",
    "AppointmentStatus",
    "BillPaymentOutcome",
    "yes_no",
]
