"""
Shared pytest fixtures for all tests.

This module provides registries, settings and an in-memory console
shared by the unit tests.
"""

import io
from datetime import date

import pytest
from rich.console import Console

from clinic.application import ClinicRegistry
from clinic.config import Settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


# ============================================================================
# REGISTRY FIXTURES
# ============================================================================


@pytest.fixture
def today() -> date:
    """Fixed reference date."""
    return date(2024, 6, 1)


@pytest.fixture
def registry() -> ClinicRegistry:
    """Empty registry."""
    return ClinicRegistry()


@pytest.fixture
def john(registry):
    """Registered, not admitted patient."""
    return registry.register_patient("John Doe", 30, "Male", "555-1111", "Flu", admitted=False)


@pytest.fixture
def jane(registry):
    """Registered, admitted patient."""
    return registry.register_patient(
        "Jane Roe",
        25,
        "Female",
        "555-2222",
        "Fracture",
        admitted=True,
        admission_date=date(2024, 5, 30),
    )


@pytest.fixture
def smith(registry):
    """Available doctor."""
    return registry.register_doctor("Dr. Smith", 45, "Male", "555-1234", "Cardiology", available=True)


@pytest.fixture
def lee(registry):
    """Unavailable doctor."""
    return registry.register_doctor("Dr. Lee", 50, "Male", "555-9012", "Orthopedics", available=False)


# ============================================================================
# CONSOLE FIXTURES
# ============================================================================


@pytest.fixture
def console() -> Console:
    """Console writing plain text into memory."""
    return Console(file=io.StringIO(), width=160, color_system=None, force_terminal=False, highlight=False)

