"""
Clinic Registry

Single source of truth for patients, doctors, appointments and bills.
Allocates identifiers, enforces the cross-record rules and performs every
query and state transition on the four collections.
"""

import itertools
import logging
import threading
from collections.abc import Iterator
from datetime import date
from decimal import Decimal

from clinic.core.domain import (
    DoctorUnavailableException,
    EmptyCollectionException,
    EntityNotFoundException,
    PatientNotAdmittedException,
)
from clinic.domain.entities import Appointment, Bill, Doctor, Patient
from clinic.domain.value_objects import AppointmentStatus, BillPaymentOutcome, PersonalDetails

logger = logging.getLogger(__name__)

FIRST_PATIENT_ID = 1
FIRST_DOCTOR_ID = 1
FIRST_APPOINTMENT_ID = 1
FIRST_BILL_ID = 1000


class ClinicRegistry:
    """
    In-memory registry of clinic records.

    Each instance owns its collections and its id counters, so two
    registries never share ids. Records are only ever appended or have a
    field changed in place; nothing is deleted.

    Every operation runs under one re-entrant lock, which serializes id
    allocation and appends and keeps listings from observing a
    half-appended record.

    Example:
        ```python
        registry = ClinicRegistry()
        john = registry.register_patient("John Doe", 30, "Male", "555-1111", "Flu")
        smith = registry.register_doctor("Dr. Smith", 45, "Male", "555-1234", "Cardiology")
        appointment = registry.schedule_appointment(john.id, smith.id, date(2024, 6, 1), "09:30 AM")
        ```
    """

    def __init__(self, currency_symbol: str = "$"):
        """
        Initialize an empty registry.

        Args:
            currency_symbol: Symbol shown in front of bill amounts in summaries
        """
        self.currency_symbol = currency_symbol

        self._patients: list[Patient] = []
        self._doctors: list[Doctor] = []
        self._appointments: list[Appointment] = []
        self._bills: list[Bill] = []

        self._patient_ids: Iterator[int] = itertools.count(FIRST_PATIENT_ID)
        self._doctor_ids: Iterator[int] = itertools.count(FIRST_DOCTOR_ID)
        self._appointment_ids: Iterator[int] = itertools.count(FIRST_APPOINTMENT_ID)
        self._bill_ids: Iterator[int] = itertools.count(FIRST_BILL_ID)

        self._lock = threading.RLock()

    # Registration

    def register_patient(
        self,
        name: str,
        age: int,
        gender: str,
        contact: str,
        disease: str,
        admitted: bool = False,
        admission_date: date | None = None,
    ) -> Patient:
        """
        Register a new patient.

        Args:
            name: Patient name
            age: Age in years
            gender: Free text gender
            contact: Phone number or other contact text
            disease: Free text description of the condition
            admitted: Whether the patient is admitted on registration
            admission_date: Admission date, required when `admitted` is true
                and ignored otherwise

        Returns:
            The created patient with its assigned id
        """
        with self._lock:
            patient = Patient(
                details=PersonalDetails(name=name, age=age, gender=gender, contact=contact),
                disease=disease,
                admitted=admitted,
                admission_date=admission_date if admitted else None,
            )
            # Allocate the id only once the record is known to be valid
            patient.id = next(self._patient_ids)
            self._patients.append(patient)

        logger.info(f"Patient registered: {patient.id} ({patient.name}), admitted={patient.admitted}")
        return patient

    def register_doctor(
        self,
        name: str,
        age: int,
        gender: str,
        contact: str,
        specialization: str,
        available: bool = True,
    ) -> Doctor:
        """Register a new doctor. Doctor ids are counted independently of patient ids."""
        with self._lock:
            doctor = Doctor(
                id=next(self._doctor_ids),
                details=PersonalDetails(name=name, age=age, gender=gender, contact=contact),
                specialization=specialization,
                available=available,
            )
            self._doctors.append(doctor)

        logger.info(f"Doctor registered: {doctor.id} ({doctor.name}), available={doctor.available}")
        return doctor

    # Scheduling

    def schedule_appointment(
        self,
        patient_id: int,
        doctor_id: int,
        appointment_date: date,
        time_label: str,
    ) -> Appointment:
        """
        Book an appointment for a patient with a doctor.

        Checks run in this order and the first failure aborts before
        anything is changed: patients registered, doctors registered,
        patient exists, doctor exists, doctor available. Overlapping
        bookings for the same doctor or patient are not rejected.

        Raises:
            EmptyCollectionException: No patients or no doctors registered
            EntityNotFoundException: Unknown patient or doctor id
            DoctorUnavailableException: The doctor is not available
        """
        with self._lock:
            self._require_any(self._patients, "Patient")
            self._require_any(self._doctors, "Doctor")
            patient = self._require_patient(patient_id)
            doctor = self._require_doctor(doctor_id)

            if not doctor.can_accept_appointments():
                logger.warning(f"Appointment rejected: doctor {doctor_id} is not available")
                raise DoctorUnavailableException(doctor_id)

            appointment = Appointment(
                id=next(self._appointment_ids),
                patient_id=patient.id,
                doctor_id=doctor.id,
                appointment_date=appointment_date,
                time_label=time_label,
            )
            self._appointments.append(appointment)

        logger.info(
            f"Appointment scheduled: {appointment.id} for patient {patient.name} "
            f"with {doctor.name} on {appointment_date} at {time_label}"
        )
        return appointment

    def update_appointment_status(self, appointment_id: int, status: AppointmentStatus) -> Appointment:
        """
        Move an appointment to a new status.

        Raises:
            EntityNotFoundException: Unknown appointment id
            InvalidOperationException: The appointment is already completed or cancelled
        """
        with self._lock:
            appointment = self.find_appointment(appointment_id)
            if appointment is None:
                raise EntityNotFoundException("Appointment", appointment_id)
            appointment.transition_to(status)

        logger.info(f"Appointment {appointment_id} is now {appointment.status.value}")
        return appointment

    # Queries

    def list_patients(self) -> tuple[Patient, ...]:
        with self._lock:
            return tuple(self._patients)

    def list_doctors(self) -> tuple[Doctor, ...]:
        with self._lock:
            return tuple(self._doctors)

    def list_appointments(self) -> tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._appointments)

    def list_bills(self) -> tuple[Bill, ...]:
        with self._lock:
            return tuple(self._bills)

    def admitted_patients(self) -> tuple[Patient, ...]:
        """Patients currently admitted, in registration order."""
        with self._lock:
            return tuple(p for p in self._patients if p.admitted)

    def appointments_for_patient(self, patient_id: int) -> tuple[Appointment, ...]:
        """
        Appointments booked for a patient, in booking order.

        The patient id is not checked: an unknown id gives an empty result,
        the same as a patient without appointments.
        """
        with self._lock:
            return tuple(a for a in self._appointments if a.is_for_patient(patient_id))

    def find_patient(self, patient_id: int) -> Patient | None:
        with self._lock:
            return next((p for p in self._patients if p.id == patient_id), None)

    def find_doctor(self, doctor_id: int) -> Doctor | None:
        with self._lock:
            return next((d for d in self._doctors if d.id == doctor_id), None)

    def find_appointment(self, appointment_id: int) -> Appointment | None:
        with self._lock:
            return next((a for a in self._appointments if a.id == appointment_id), None)

    def find_bill(self, bill_id: int) -> Bill | None:
        with self._lock:
            return next((b for b in self._bills if b.id == bill_id), None)

    # Billing

    def generate_bill(
        self,
        patient_id: int,
        amount: Decimal | float | int,
        issue_date: date | None = None,
    ) -> Bill:
        """
        Charge an amount to a patient.

        The amount is not validated. The issue date defaults to today.

        Raises:
            EmptyCollectionException: No patients registered
            EntityNotFoundException: Unknown patient id
        """
        with self._lock:
            self._require_any(self._patients, "Patient")
            patient = self._require_patient(patient_id)

            bill = Bill(
                id=next(self._bill_ids),
                patient_id=patient.id,
                amount=amount,
                issue_date=issue_date or date.today(),
            )
            self._bills.append(bill)

        logger.info(f"Bill generated: {bill.id} for patient {patient.name}, amount {bill.amount}")
        return bill

    def mark_bill_paid(self, bill_id: int) -> BillPaymentOutcome:
        """
        Mark a bill as paid.

        Returns:
            PAID when the bill changed, ALREADY_PAID when it was paid before

        Raises:
            EmptyCollectionException: No bills generated
            EntityNotFoundException: Unknown bill id
        """
        with self._lock:
            self._require_any(self._bills, "Bill", "No bills to mark.")
            bill = self.find_bill(bill_id)
            if bill is None:
                logger.warning(f"Bill {bill_id} not found")
                raise EntityNotFoundException("Bill", bill_id)
            outcome = bill.mark_paid()

        logger.info(f"Bill {bill_id}: {outcome.value}")
        return outcome

    # Admission

    def discharge_patient(self, patient_id: int) -> Patient:
        """
        Discharge an admitted patient.

        Raises:
            EmptyCollectionException: No patients registered
            EntityNotFoundException: Unknown patient id
            PatientNotAdmittedException: The patient is not currently admitted
        """
        with self._lock:
            self._require_any(self._patients, "Patient")
            patient = self._require_patient(patient_id)
            try:
                patient.discharge()
            except PatientNotAdmittedException:
                logger.warning(f"Discharge rejected for patient {patient_id}")
                raise

        logger.info(f"Patient discharged: {patient.id} ({patient.name})")
        return patient

    # Display

    def describe_appointment(self, appointment: Appointment) -> str:
        """One-line summary of an appointment with current patient and doctor names."""
        with self._lock:
            return appointment.summary(
                self._require_patient(appointment.patient_id),
                self._require_doctor(appointment.doctor_id),
            )

    def describe_bill(self, bill: Bill) -> str:
        """One-line summary of a bill with the current patient name."""
        with self._lock:
            return bill.summary(self._require_patient(bill.patient_id), self.currency_symbol)

    # Helpers

    def _require_any(self, records: list, entity_type: str, message: str | None = None) -> None:
        if not records:
            logger.warning(f"Operation rejected: no {entity_type.lower()} records")
            raise EmptyCollectionException(entity_type, message)

    def _require_patient(self, patient_id: int) -> Patient:
        patient = self.find_patient(patient_id)
        if patient is None:
            logger.warning(f"Patient {patient_id} not found")
            raise EntityNotFoundException("Patient", patient_id)
        return patient

    def _require_doctor(self, doctor_id: int) -> Doctor:
        doctor = self.find_doctor(doctor_id)
        if doctor is None:
            logger.warning(f"Doctor {doctor_id} not found")
            raise EntityNotFoundException("Doctor", doctor_id)
        return doctor
