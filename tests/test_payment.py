"""Tests for payment amount validation."""

import math
from decimal import Decimal

from fixer.moderation.models import Thresholds
from fixer.moderation.payment import validate_payment_amount


def test_zero_rejected():
    result = validate_payment_amount(0)
    assert not result.is_approved
    assert result.rule == "non_positive_amount"
    assert "greater than zero" in result.reason


def test_negative_rejected():
    assert validate_payment_amount(-25).rule == "non_positive_amount"


def test_below_minimum_wage_rejected():
    result = validate_payment_amount(5)
    assert not result.is_approved
    assert result.rule == "below_minimum"
    assert "below minimum wage" in result.reason


def test_minimum_is_inclusive():
    assert validate_payment_amount(7.25).is_approved
    assert not validate_payment_amount(7.24).is_approved


def test_reasonable_amount_approved():
    result = validate_payment_amount(50)
    assert result.is_approved
    assert result.reason is None


def test_maximum_is_inclusive():
    assert validate_payment_amount(10000).is_approved
    assert validate_payment_amount(10000.01).rule == "above_maximum"


def test_unusually_high_rejected():
    result = validate_payment_amount(15000)
    assert not result.is_approved
    assert "unusually high" in result.reason


def test_nan_rejected_as_invalid():
    result = validate_payment_amount(math.nan)
    assert not result.is_approved
    assert result.rule == "invalid_amount"
    assert "invalid" in result.reason


def test_infinity_rejected_as_invalid():
    assert validate_payment_amount(math.inf).rule == "invalid_amount"
    assert validate_payment_amount(-math.inf).rule == "invalid_amount"


def test_non_numeric_rejected_as_invalid():
    for value in ["50", None, True, [50]]:
        assert validate_payment_amount(value).rule == "invalid_amount"


def test_decimal_amounts():
    assert validate_payment_amount(Decimal("50.00")).is_approved
    assert validate_payment_amount(Decimal("5")).rule == "below_minimum"
    assert validate_payment_amount(Decimal("NaN")).rule == "invalid_amount"


def test_custom_thresholds():
    thresholds = Thresholds(min_hourly_rate=15, max_reasonable_amount=500)
    assert validate_payment_amount(10, thresholds).rule == "below_minimum"
    assert validate_payment_amount(600, thresholds).rule == "above_maximum"
    assert validate_payment_amount(100, thresholds).is_approved
