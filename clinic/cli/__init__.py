"""
Console front end: menu loop and operator input parsing.
"""

from clinic.cli.menu import ClinicMenu
from clinic.cli.parsing import parse_amount, parse_date, parse_int, parse_yes_no

__all__ = [
    "ClinicMenu",
    "parse_date",
    "parse_yes_no",
    "parse_int",
    "parse_amount",
]
