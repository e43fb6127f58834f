"""
Personal details shared by patients and doctors.
"""

from dataclasses import dataclass
from typing import Any

from clinic.core.domain import ValueObject


def yes_no(flag: bool) -> str:
    """Render a boolean the way record summaries show it."""
    return "Yes" if flag else "No"


@dataclass(frozen=True)
class PersonalDetails(ValueObject):
    """
    Identity and contact information of a person known to the clinic.

    Patients and doctors embed one of these instead of sharing a base
    class. Values arrive already validated by the caller.
    """

    name: str
    age: int
    gender: str
    contact: str

    def summary(self) -> str:
        return f"Name: {self.name}, Age: {self.age}, Gender: {self.gender}, Contact: {self.contact}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "contact": self.contact,
        }
