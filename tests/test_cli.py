"""Tests for the fixer command line."""

import json
import tempfile

import yaml
from click.testing import CliRunner

# Imported up front so module loggers attach to the real stderr, not the runner's.
import fixer.moderation.content_filter  # noqa: F401
import fixer.moderation.payment  # noqa: F401
import fixer.moderation.rules  # noqa: F401
from fixer.cli import main

YARD_WORK = (
    "Looking for someone to mow my lawn and trim the hedges this weekend, flexible timing."
)


def test_check_job_approved():
    result = CliRunner().invoke(main, ["check-job", "Yard work", YARD_WORK])
    assert result.exit_code == 0
    assert "APPROVED" in result.stdout


def test_check_job_rejected():
    result = CliRunner().invoke(
        main,
        ["check-job", "Side gig", "Cash only work, no questions asked, pays well and is totally discreet."],
    )
    assert result.exit_code == 1
    assert "REJECTED" in result.stdout
    assert "suspicious_keywords" in result.stdout


def test_check_job_json():
    result = CliRunner().invoke(main, ["check-job", "Yard work", "Mow lawn", "--json"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["isApproved"] is False
    assert "too short" in data["reason"]


def test_check_amount():
    result = CliRunner().invoke(main, ["check-amount", "50", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"isApproved": True}


def test_check_amount_nan():
    result = CliRunner().invoke(main, ["check-amount", "nan"])
    assert result.exit_code == 1
    assert "invalid_amount" in result.stdout


def test_screen_approved_shows_totals():
    result = CliRunner().invoke(
        main,
        ["screen", "--title", "Yard work", "--description", YARD_WORK, "--amount", "50"],
    )
    assert result.exit_code == 0
    assert "Posting approved" in result.stdout
    assert "$52.50" in result.stdout


def test_screen_rejected_at_payment():
    result = CliRunner().invoke(
        main,
        ["screen", "--title", "Yard work", "--description", YARD_WORK, "--amount", "5"],
    )
    assert result.exit_code == 1
    assert "payment stage" in result.stdout


def test_rules_show():
    result = CliRunner().invoke(main, ["rules", "show"])
    assert result.exit_code == 0
    assert "spam" in result.stdout
    assert "inappropriate" in result.stdout
    assert "min_hourly_rate = 7.25" in result.stdout


def test_rules_validate():
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump({"categories": {"spam": ["easy\\s*money"]}}, f)
    result = CliRunner().invoke(main, ["rules", "validate", f.name])
    assert result.exit_code == 0
    assert "valid" in result.stdout


def test_rules_validate_invalid_file():
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump({"categories": {"violence": ["fight"]}}, f)
    result = CliRunner().invoke(main, ["rules", "validate", f.name])
    assert result.exit_code == 1
    assert "FAILED" in result.stdout


def test_check_job_with_missing_rules_file():
    result = CliRunner().invoke(
        main, ["check-job", "Yard work", YARD_WORK, "--rules", "/nonexistent/rules.yaml"]
    )
    assert result.exit_code == 1
    assert "Could not load rules" in result.stdout


def test_distance():
    result = CliRunner().invoke(main, ["distance", "0", "0", "1", "0"])
    assert result.exit_code == 0
    assert "69.1 miles" in result.stdout


def test_screen_prints_bracketed_title_literally():
    result = CliRunner().invoke(
        main, ["screen", "--title", "Yard work [/b]", "--description", YARD_WORK, "--amount", "50"]
    )
    assert result.exit_code == 0
    assert "Yard work [/b]" in result.stdout


def test_rules_show_prints_bracketed_keywords_literally():
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump({"name": "house [red]", "suspicious_keywords": ["[/]", "cash only"]}, f)
    result = CliRunner().invoke(main, ["rules", "show", "--rules", f.name])
    assert result.exit_code == 0
    assert "[/], cash only" in result.stdout


def test_rules_validate_directory():
    result = CliRunner().invoke(main, ["rules", "validate", tempfile.mkdtemp()])
    assert result.exit_code == 1
    assert "FAILED" in result.stdout
