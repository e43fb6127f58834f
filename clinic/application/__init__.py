"""
Clinic Application Layer

The registry that owns every record, and the start-up sample data.
"""

from clinic.application.registry import (
    FIRST_APPOINTMENT_ID,
    FIRST_BILL_ID,
    FIRST_DOCTOR_ID,
    FIRST_PATIENT_ID,
    ClinicRegistry,
)
from clinic.application.sample_data import seed_sample_data

__all__ = [
    "ClinicRegistry",
    "seed_sample_data",
    "FIRST_PATIENT_ID",
    "FIRST_DOCTOR_ID",
    "FIRST_APPOINTMENT_ID",
    "FIRST_BILL_ID",
]
