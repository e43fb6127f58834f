"""
Sample records preloaded when the console application starts.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal

from clinic.application.registry import ClinicRegistry

logger = logging.getLogger(__name__)


def seed_sample_data(registry: ClinicRegistry, today: date | None = None) -> None:
    """
    Populate a registry with three doctors, two patients, one appointment and one bill.

    Args:
        registry: Registry to populate, normally empty
        today: Reference date for admission, appointment and bill dates
    """
    today = today or date.today()

    smith = registry.register_doctor("Dr. Smith", 45, "Male", "555-1234", "Cardiology", available=True)
    registry.register_doctor("Dr. Adams", 38, "Female", "555-5678", "Pediatrics", available=True)
    registry.register_doctor("Dr. Lee", 50, "Male", "555-9012", "Orthopedics", available=False)

    john = registry.register_patient("John Doe", 30, "Male", "555-1111", "Flu", admitted=False)
    registry.register_patient(
        "Jane Roe",
        25,
        "Female",
        "555-2222",
        "Fracture",
        admitted=True,
        admission_date=today - timedelta(days=2),
    )

    registry.schedule_appointment(john.id, smith.id, today + timedelta(days=1), "09:30 AM")
    registry.generate_bill(john.id, Decimal("150.00"), today)

    logger.info("Sample data loaded")
