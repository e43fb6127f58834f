"""
Clinic Domain Value Objects
"""

from clinic.domain.value_objects.person import PersonalDetails, yes_no
from clinic.domain.value_objects.statuses import AppointmentStatus, BillPaymentOutcome

__all__ = [
    "PersonalDetails",
    "AppointmentStatus",
    "BillPaymentOutcome",
    "yes_no",
]
