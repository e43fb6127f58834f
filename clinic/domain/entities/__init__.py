"""
Clinic Domain Entities

Records with identity and lifecycle owned by the clinic registry.
"""

from clinic.domain.entities.appointment import Appointment
from clinic.domain.entities.bill import Bill
from clinic.domain.entities.doctor import Doctor
from clinic.domain.entities.patient import Patient

__all__ = [
    "Patient",
    "Doctor",
    "Appointment",
    "Bill",
]
