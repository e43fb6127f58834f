"""
Parsing of operator input typed at the console.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

YES_ANSWER = "yes"


def parse_date(text: str, date_format: str = "%Y-%m-%d") -> date:
    """
    Parse a calendar date.

    Raises:
        ValueError: The text does not match `date_format`
    """
    return datetime.strptime(text.strip(), date_format).date()


def parse_yes_no(text: str) -> bool:
    """Only an explicit yes counts; any other answer means no."""
    return text.strip().lower() == YES_ANSWER


def parse_int(text: str) -> int:
    """
    Raises:
        ValueError: The text is not a whole number
    """
    return int(text.strip())


def parse_amount(text: str) -> Decimal:
    """
    Parse a money amount such as "150" or "99.95". A leading "$" is allowed.

    Raises:
        ValueError: The text is not a finite number
    """
    cleaned = text.strip().removeprefix("$").replace(",", "")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {text!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {text!r}")
    return amount
