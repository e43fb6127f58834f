"""
Domain Exceptions

These exceptions represent failed lookups and business rule violations.
They are non-fatal: callers catch them, report the message and carry on.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "ENTITY_NOT_FOUND")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when a record is constructed in an inconsistent state.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an id does not resolve to an existing record.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found."
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class EmptyCollectionException(DomainException):
    """
    Raised when an operation needs at least one record of a kind and there is none.
    """

    def __init__(self, entity_type: str, message: str | None = None):
        self.entity_type = entity_type
        msg = message or f"No {entity_type.lower()}s registered."
        super().__init__(msg, "EMPTY_COLLECTION", {"entity_type": entity_type})


class BusinessRuleViolationException(DomainException):
    """
    Raised when a precondition of an operation does not hold.
    """

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, "BUSINESS_RULE_VIOLATION", details)


class DoctorUnavailableException(BusinessRuleViolationException):
    """Raised when an appointment is requested with a doctor who is not available."""

    def __init__(self, doctor_id: int):
        self.doctor_id = doctor_id
        super().__init__(
            "doctor_available",
            "Doctor is not available. Appointment cannot be scheduled.",
            {"doctor_id": doctor_id},
        )


class PatientNotAdmittedException(BusinessRuleViolationException):
    """Raised when discharging a patient who is not currently admitted."""

    def __init__(self, patient_id: int):
        self.patient_id = patient_id
        super().__init__(
            "patient_admitted",
            "Patient is not currently admitted.",
            {"patient_id": patient_id},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )
