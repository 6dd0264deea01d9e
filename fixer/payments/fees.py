"""Platform fee arithmetic for job payments.

Fixed-price jobs are charged the payment amount plus a flat service fee.
Hourly jobs are charged as they go, so their total equals the amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

SERVICE_FEE = 2.50


class PaymentType(Enum):
    """How a job is paid."""

    FIXED = "fixed"
    HOURLY = "hourly"


@dataclass(frozen=True)
class JobTotals:
    """Amounts stored on a job record when it is created."""

    payment_amount: float
    service_fee: float
    total_amount: float
    payment_type: PaymentType

    @property
    def total_cents(self) -> int:
        return to_cents(self.total_amount)


def calculate_job_totals(
    payment_amount: float, payment_type: PaymentType | str = PaymentType.FIXED
) -> JobTotals:
    """Compute the service fee and total amount for a new job."""
    payment_type = PaymentType(payment_type)
    if payment_type == PaymentType.FIXED:
        total = payment_amount + SERVICE_FEE
    else:
        total = payment_amount
    return JobTotals(
        payment_amount=payment_amount,
        service_fee=SERVICE_FEE,
        total_amount=total,
        payment_type=payment_type,
    )


def to_cents(amount: float) -> int:
    """Convert a dollar amount to integer cents, rounding halves away from zero."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_net_earnings(amount: float, service_fee: Optional[float] = None) -> float:
    """Return what the worker keeps after the platform fee."""
    fee = SERVICE_FEE if service_fee is None else service_fee
    return round(amount - fee, 2)
