"""
Unit tests for clinic domain entities and value objects.
"""

from datetime import date
from decimal import Decimal

import pytest

from clinic.core.domain import InvalidOperationException, PatientNotAdmittedException, ValidationException
from clinic.domain import (
    Appointment,
    AppointmentStatus,
    Bill,
    BillPaymentOutcome,
    Doctor,
    Patient,
    PersonalDetails,
    yes_no,
)


@pytest.fixture
def john_details():
    return PersonalDetails(name="John Doe", age=30, gender="Male", contact="555-1111")


@pytest.fixture
def smith_details():
    return PersonalDetails(name="Dr. Smith", age=45, gender="Male", contact="555-1234")


# ============================================================================
# PersonalDetails
# ============================================================================


@pytest.mark.unit
def test_personal_details_are_immutable_values(john_details):
    """Test details compare by value and cannot be changed."""
    assert john_details == PersonalDetails("John Doe", 30, "Male", "555-1111")
    with pytest.raises(AttributeError):
        john_details.name = "Someone Else"


@pytest.mark.unit
def test_yes_no():
    assert yes_no(True) == "Yes"
    assert yes_no(False) == "No"


# ============================================================================
# Patient
# ============================================================================


@pytest.mark.unit
def test_patient_summary_without_admission(john_details):
    """Test the summary of a patient who is not admitted."""
    patient = Patient(id=1, details=john_details, disease="Flu")

    assert patient.summary() == (
        "ID: 1, Name: John Doe, Age: 30, Gender: Male, Contact: 555-1111, Disease: Flu, Admitted: No"
    )


@pytest.mark.unit
def test_patient_summary_with_admission_date():
    """Test the admission date is appended for admitted patients."""
    patient = Patient(
        id=2,
        details=PersonalDetails("Jane Roe", 25, "Female", "555-2222"),
        disease="Fracture",
        admitted=True,
        admission_date=date(2024, 5, 30),
    )

    assert patient.summary().endswith("Disease: Fracture, Admitted: Yes, Admission Date: 2024-05-30")
    assert patient.to_summary_dict()["admission_date"] == "2024-05-30"


@pytest.mark.unit
@pytest.mark.parametrize(
    "admitted, admission_date",
    [
        (True, None),
        (False, date(2024, 5, 30)),
    ],
)
def test_patient_admission_date_must_match_admitted_flag(john_details, admitted, admission_date):
    """Test an admission date exists exactly when the patient is admitted."""
    with pytest.raises(ValidationException) as exc_info:
        Patient(details=john_details, admitted=admitted, admission_date=admission_date)

    assert exc_info.value.field == "admission_date"


@pytest.mark.unit
def test_patient_requires_details():
    with pytest.raises(ValidationException):
        Patient(disease="Flu")


@pytest.mark.unit
def test_discharge_clears_admission(john_details):
    """Test discharge flips the flag and clears the date."""
    patient = Patient(id=1, details=john_details, admitted=True, admission_date=date(2024, 5, 30))

    patient.discharge()

    assert patient.admitted is False
    assert patient.admission_date is None


@pytest.mark.unit
def test_discharge_not_admitted(john_details):
    patient = Patient(id=1, details=john_details)

    with pytest.raises(PatientNotAdmittedException) as exc_info:
        patient.discharge()

    assert exc_info.value.patient_id == 1


@pytest.mark.unit
def test_entities_compare_by_kind_and_id(john_details, smith_details):
    """Test equality uses the id and never matches a different kind of record."""
    assert Patient(id=1, details=john_details) == Patient(id=1, details=john_details, disease="Flu")
    assert Patient(id=1, details=john_details) != Patient(id=2, details=john_details)
    assert Patient(id=1, details=john_details) != Doctor(id=1, details=smith_details)
    assert len({Patient(id=1, details=john_details), Patient(id=1, details=john_details)}) == 1


@pytest.mark.unit
def test_new_entity_has_no_id(john_details):
    patient = Patient(details=john_details)

    assert patient.id is None
    assert patient != Patient(details=john_details)


# ============================================================================
# Doctor
# ============================================================================


@pytest.mark.unit
def test_doctor_summary(smith_details):
    doctor = Doctor(id=1, details=smith_details, specialization="Cardiology", available=False)

    assert doctor.summary() == (
        "ID: 1, Name: Dr. Smith, Age: 45, Gender: Male, Contact: 555-1234, "
        "Specialization: Cardiology, Available: No"
    )
    assert doctor.can_accept_appointments() is False
    assert doctor.to_summary_dict()["specialization"] == "Cardiology"


# ============================================================================
# Appointment
# ============================================================================


@pytest.mark.unit
def test_appointment_defaults_to_scheduled():
    appointment = Appointment(id=1, patient_id=1, doctor_id=1, appointment_date=date(2024, 6, 1), time_label="09:30 AM")

    assert appointment.status == AppointmentStatus.SCHEDULED
    assert appointment.to_summary_dict() == {
        "id": 1,
        "patient_id": 1,
        "doctor_id": 1,
        "date": "2024-06-01",
        "time": "09:30 AM",
        "status": "Scheduled",
    }


@pytest.mark.unit
def test_appointment_cancel_is_terminal():
    """Test a cancelled appointment cannot be completed afterwards."""
    appointment = Appointment(id=1, patient_id=1, doctor_id=1)

    appointment.cancel()
    appointment.cancel()

    assert appointment.status == AppointmentStatus.CANCELLED
    with pytest.raises(InvalidOperationException) as exc_info:
        appointment.complete()
    assert exc_info.value.current_state == "Cancelled"


@pytest.mark.unit
def test_appointment_status_transitions():
    assert AppointmentStatus.SCHEDULED.can_transition_to(AppointmentStatus.COMPLETED)
    assert AppointmentStatus.SCHEDULED.can_transition_to(AppointmentStatus.CANCELLED)
    assert not AppointmentStatus.COMPLETED.can_transition_to(AppointmentStatus.SCHEDULED)
    assert AppointmentStatus.COMPLETED.is_terminal()
    assert not AppointmentStatus.SCHEDULED.is_terminal()
    assert AppointmentStatus.values() == ["Scheduled", "Completed", "Cancelled"]
    assert AppointmentStatus.from_string("completed") is AppointmentStatus.COMPLETED


@pytest.mark.unit
def test_appointment_status_from_unknown_string():
    with pytest.raises(ValueError):
        AppointmentStatus.from_string("Postponed")


# ============================================================================
# Bill
# ============================================================================


@pytest.mark.unit
def test_bill_converts_float_amount_exactly():
    """Test floats go through str so 0.1 stays 0.1."""
    bill = Bill(id=1000, patient_id=1, amount=0.1, issue_date=date(2024, 6, 1))

    assert bill.amount == Decimal("0.1")
    assert bill.formatted_amount() == "$0.10"


@pytest.mark.unit
def test_bill_mark_paid_is_idempotent():
    bill = Bill(id=1000, patient_id=1, amount=Decimal("150"), issue_date=date(2024, 6, 1))

    assert bill.mark_paid() is BillPaymentOutcome.PAID
    assert bill.mark_paid() is BillPaymentOutcome.ALREADY_PAID
    assert bill.paid is True
    assert BillPaymentOutcome.ALREADY_PAID.message == "Bill is already marked as paid."


@pytest.mark.unit
def test_bill_summary(john_details):
    bill = Bill(id=1000, patient_id=1, amount=150.0, issue_date=date(2024, 6, 1), paid=True)
    patient = Patient(id=1, details=john_details)

    assert bill.summary(patient) == "Bill ID: 1000, Patient: John Doe, Amount: $150.00, Date: 2024-06-01, Paid: Yes"
    assert bill.to_summary_dict()["amount"] == "150.0"


@pytest.mark.unit
@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("9.995"), "$10.00"),
        (Decimal("-5.5"), "$-5.50"),
        (Decimal("1" * 29), "$" + "1" * 29 + ".00"),
        (Decimal("9" * 30 + ".999"), "$1" + "0" * 30 + ".00"),
        (float("inf"), "$Infinity"),
        (Decimal("1e5000"), "$1E+5000"),
    ],
)
def test_bill_formatted_amount(amount, expected):
    """Test rounding to cents, including amounts past the default decimal precision."""
    bill = Bill(id=1000, patient_id=1, amount=amount, issue_date=date(2024, 6, 1))

    assert bill.formatted_amount() == expected
