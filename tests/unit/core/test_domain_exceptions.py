"""
Unit tests for the domain exception hierarchy.
"""

import pytest

from clinic.core.domain import (
    BusinessRuleViolationException,
    DoctorUnavailableException,
    DomainException,
    EmptyCollectionException,
    EntityNotFoundException,
    InvalidOperationException,
    PatientNotAdmittedException,
    ValidationException,
)


@pytest.mark.unit
def test_entity_not_found_to_dict():
    exc = EntityNotFoundException("Doctor", 7)

    assert str(exc) == "Doctor not found."
    assert exc.to_dict() == {
        "error": "ENTITY_NOT_FOUND",
        "message": "Doctor not found.",
        "details": {"entity_type": "Doctor", "entity_id": "7"},
    }


@pytest.mark.unit
def test_empty_collection_messages():
    assert EmptyCollectionException("Patient").message == "No patients registered."
    assert EmptyCollectionException("Doctor").message == "No doctors registered."
    assert EmptyCollectionException("Bill", "No bills to mark.").message == "No bills to mark."
    assert EmptyCollectionException("Bill").code == "EMPTY_COLLECTION"


@pytest.mark.unit
def test_precondition_failures_are_business_rule_violations():
    unavailable = DoctorUnavailableException(3)
    not_admitted = PatientNotAdmittedException(1)

    assert isinstance(unavailable, BusinessRuleViolationException)
    assert isinstance(not_admitted, BusinessRuleViolationException)
    assert unavailable.details == {"doctor_id": 3, "rule": "doctor_available"}
    assert not_admitted.details == {"patient_id": 1, "rule": "patient_admitted"}
    assert unavailable.code == "BUSINESS_RULE_VIOLATION"


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc",
    [
        ValidationException("bad", field="age"),
        EntityNotFoundException("Bill", 1000),
        EmptyCollectionException("Patient"),
        InvalidOperationException("cancel", "Completed"),
        PatientNotAdmittedException(1),
    ],
)
def test_all_domain_errors_share_a_base(exc):
    assert isinstance(exc, DomainException)
    assert exc.to_dict()["message"] == exc.message


@pytest.mark.unit
def test_domain_exception_default_code():
    assert DomainException("oops").code == "DOMAINEXCEPTION"
