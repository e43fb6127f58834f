"""
Bill Entity

Represents an amount charged to a patient and whether it has been paid.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Any

from clinic.core.domain import Entity

from ..value_objects.person import yes_no
from ..value_objects.statuses import BillPaymentOutcome

if TYPE_CHECKING:
    from .patient import Patient

CENTS = Decimal("0.01")

# Amounts with more integer digits than this are shown as stored
MAX_ROUNDED_DIGITS = 1000


@dataclass(eq=False)
class Bill(Entity[int]):
    """
    Bill record.

    The amount is taken as given; zero and negative amounts are accepted.
    `paid` only ever moves from False to True.
    """

    patient_id: int = 0
    amount: Decimal = field(default_factory=lambda: Decimal("0"))
    issue_date: date = field(default_factory=date.today)
    paid: bool = False

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            # Convert float/int through str to avoid binary float artifacts
            self.amount = Decimal(str(self.amount))

    def mark_paid(self) -> BillPaymentOutcome:
        """Mark the bill as paid. Paying an already paid bill changes nothing."""
        if self.paid:
            return BillPaymentOutcome.ALREADY_PAID

        self.paid = True
        self.touch()
        return BillPaymentOutcome.PAID

    def formatted_amount(self, currency_symbol: str = "$") -> str:
        """
        Amount rounded to cents behind the currency symbol.

        Infinite and extremely large amounts are shown unrounded.
        """
        amount = self.amount
        if amount.is_finite() and amount.adjusted() < MAX_ROUNDED_DIGITS:
            with localcontext() as ctx:
                # Integer digits, a carry from rounding and the cents
                ctx.prec = max(ctx.prec, amount.adjusted() + 4)
                amount = amount.quantize(CENTS, ROUND_HALF_UP)
        return f"{currency_symbol}{amount}"

    def summary(self, patient: "Patient", currency_symbol: str = "$") -> str:
        return (
            f"Bill ID: {self.id}, Patient: {patient.name}, Amount: {self.formatted_amount(currency_symbol)}, "
            f"Date: {self.issue_date.isoformat()}, Paid: {yes_no(self.paid)}"
        )

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "amount": str(self.amount),
            "date": self.issue_date.isoformat(),
            "paid": self.paid,
        }
