"""Payment amount validation to prevent unrealistic values."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

from fixer.moderation.models import ContentFilterResult, Thresholds
from fixer.utils.logger import get_logger

logger = get_logger(__name__)

REASON_INVALID = "Payment amount is invalid. Please enter a valid number."
REASON_NOT_POSITIVE = "Payment amount must be greater than zero."
REASON_BELOW_MINIMUM = (
    "Payment appears to be below minimum wage. Please ensure compliance with labor laws."
)
REASON_ABOVE_MAXIMUM = (
    "The payment amount appears unusually high. Please verify and adjust if necessary."
)

_DEFAULT_THRESHOLDS = Thresholds()


def validate_payment_amount(
    amount: Any, thresholds: Optional[Thresholds] = None
) -> ContentFilterResult:
    """Check a proposed payment amount against the configured bounds.

    The minimum is a flat floor on the amount (the federal minimum wage,
    $7.25); it is not divided by hours worked.
    """
    thresholds = thresholds or _DEFAULT_THRESHOLDS

    # NaN compares false against every bound, so it must be caught first.
    if not _is_finite_number(amount):
        return _reject(amount, REASON_INVALID, "invalid_amount")

    if amount <= 0:
        return _reject(amount, REASON_NOT_POSITIVE, "non_positive_amount")

    if amount < thresholds.min_hourly_rate:
        return _reject(amount, REASON_BELOW_MINIMUM, "below_minimum")

    if amount > thresholds.max_reasonable_amount:
        return _reject(amount, REASON_ABOVE_MAXIMUM, "above_maximum")

    return ContentFilterResult.approved()


def _is_finite_number(amount: Any) -> bool:
    if isinstance(amount, bool):
        return False
    if isinstance(amount, Decimal):
        return amount.is_finite()
    return isinstance(amount, Real) and math.isfinite(amount)


def _reject(amount: Any, reason: str, rule: str) -> ContentFilterResult:
    logger.info("Payment amount rejected [%s]: %r", rule, amount)
    return ContentFilterResult.rejected(reason, rule)
