"""Tests for job posting screening and fee arithmetic."""

from dataclasses import replace

import pytest

from fixer.moderation.models import Thresholds
from fixer.moderation.rules import default_rules
from fixer.payments.fees import (
    SERVICE_FEE,
    PaymentType,
    calculate_job_totals,
    calculate_net_earnings,
    to_cents,
)
from fixer.screening import screen_job_posting

YARD_WORK = (
    "Looking for someone to mow my lawn and trim the hedges this weekend, flexible timing."
)


# --- Screening Tests ---


def test_approved_posting():
    result = screen_job_posting("Yard work", YARD_WORK, 60)
    assert result.is_approved
    assert result.stage == ""
    assert result.reason is None
    assert result.payment is not None and result.payment.is_approved


def test_content_rejection_skips_payment_check():
    result = screen_job_posting("Yard work", "Mow lawn", 0)
    assert not result.is_approved
    assert result.stage == "content"
    assert result.content.rule == "too_short"
    assert result.payment is None
    assert "too short" in result.reason


def test_payment_rejection():
    result = screen_job_posting("Yard work", YARD_WORK, 15000)
    assert not result.is_approved
    assert result.stage == "payment"
    assert result.payment.rule == "above_maximum"
    assert result.reason == result.payment.reason


def test_payment_uses_rule_set_thresholds():
    rules = replace(default_rules(), thresholds=Thresholds(max_reasonable_amount=100))
    result = screen_job_posting("Yard work", YARD_WORK, 250, rules)
    assert result.stage == "payment"


# --- Fee Tests ---


def test_fixed_job_adds_service_fee():
    totals = calculate_job_totals(50, PaymentType.FIXED)
    assert totals.service_fee == SERVICE_FEE == 2.50
    assert totals.total_amount == 52.50
    assert totals.total_cents == 5250


def test_hourly_job_total_equals_amount():
    totals = calculate_job_totals(20, "hourly")
    assert totals.payment_type == PaymentType.HOURLY
    assert totals.total_amount == 20
    assert totals.service_fee == 2.50


def test_unknown_payment_type():
    with pytest.raises(ValueError):
        calculate_job_totals(20, "weekly")


def test_to_cents_rounds_half_up():
    assert to_cents(19.99) == 1999
    assert to_cents(0.125) == 13
    assert to_cents(10) == 1000


def test_net_earnings():
    assert calculate_net_earnings(100) == 97.5
    assert calculate_net_earnings(100, service_fee=0) == 100
