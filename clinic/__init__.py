"""Clinic record-keeping: patients, doctors, appointments and bills."""

__version__ = "0.1.0"
