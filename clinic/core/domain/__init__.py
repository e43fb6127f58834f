"""
Domain Layer - Core DDD building blocks

This module provides base classes shared by every clinic record:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from clinic.core.domain.entities import Entity
from clinic.core.domain.exceptions import (
    BusinessRuleViolationException,
    DoctorUnavailableException,
    DomainException,
    EmptyCollectionException,
    EntityNotFoundException,
    InvalidOperationException,
    PatientNotAdmittedException,
    ValidationException,
)
from clinic.core.domain.value_objects import StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "EmptyCollectionException",
    "BusinessRuleViolationException",
    "DoctorUnavailableException",
    "PatientNotAdmittedException",
    "InvalidOperationException",
]
