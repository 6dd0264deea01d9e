"""Tests for screening data models."""

import pytest

from fixer.errors import RuleConfigError
from fixer.moderation.models import ContentFilterResult, PatternCategory, Thresholds


def test_approved_result_has_no_reason():
    result = ContentFilterResult.approved()
    assert result.is_approved
    assert result.reason is None
    assert result.rule == ""
    assert result.to_dict() == {"isApproved": True}


def test_rejected_result_carries_reason():
    result = ContentFilterResult.rejected("Too short", "too_short")
    assert not result.is_approved
    assert result.reason == "Too short"
    assert result.to_dict() == {"isApproved": False, "reason": "Too short"}


def test_reason_invariant_enforced():
    with pytest.raises(ValueError):
        ContentFilterResult(is_approved=True, reason="should not be here")
    with pytest.raises(ValueError):
        ContentFilterResult(is_approved=False)
    with pytest.raises(ValueError):
        ContentFilterResult(is_approved=False, reason="")


def test_pattern_category_first_match_in_order():
    category = PatternCategory(name="scam", patterns=(r"\bponzi\b", r"\bmlm\b"))
    match = category.first_match("an mlm and a PONZI")
    assert match is not None
    assert match.pattern == r"\bponzi\b"
    assert category.first_match("honest work") is None


def test_pattern_category_is_case_insensitive():
    category = PatternCategory(name="spam", patterns=(r"easy\s*money",))
    assert category.first_match("EASY MONEY") is not None


def test_pattern_category_rejects_bad_regex():
    with pytest.raises(RuleConfigError) as exc_info:
        PatternCategory(name="spam", patterns=("(unclosed",))
    assert "spam" in str(exc_info.value)


def test_threshold_defaults():
    t = Thresholds()
    assert t.min_description_length == 20
    assert t.max_caps_percentage == 30
    assert t.min_hourly_rate == 7.25
    assert t.max_reasonable_amount == 10000
    assert t.repetition_min_tokens == 20
    assert t.repetition_min_unique_ratio == 0.5
