"""Content filter for blocking illegal, inappropriate, or spam job postings.

Checks run in a fixed order and the first failing check decides the
rejection reason:

1. description length
2. capitalization ratio
3. prohibited-content categories (spam, illegal, scam, inappropriate)
4. suspicious keywords
5. repetitive text

The functions here are pure: the rule set is passed in (or the built-in
catalog is used) and nothing is recorded between calls.
"""

from __future__ import annotations

import re
from typing import Optional

from fixer.moderation.models import ContentFilterResult, ContentRules, Thresholds
from fixer.moderation.rules import default_rules
from fixer.utils.logger import get_logger

logger = get_logger(__name__)

REASON_TOO_SHORT = "Job description is too short. Please provide more details about the job."
REASON_EXCESSIVE_CAPS = "Excessive use of capital letters. Please use standard capitalization."
REASON_PROHIBITED = (
    "Your post contains prohibited content related to {category}. "
    "Please review our Terms of Service."
)
REASON_SUSPICIOUS = (
    "Your post contains terms that suggest potentially inappropriate activity. "
    "Please review our Terms of Service."
)
REASON_REPETITIVE = "Your post contains repetitive content which may be considered spam."

_UPPERCASE_RE = re.compile(r"[A-Z]")
_WHITESPACE_RE = re.compile(r"\s")


def filter_job_content(
    title: str,
    description: str,
    rules: Optional[ContentRules] = None,
) -> ContentFilterResult:
    """Check a job posting's title and description for prohibited content."""
    rules = rules or default_rules()
    thresholds = rules.thresholds
    full_text = f"{title} {description}".lower()

    if len(description) < thresholds.min_description_length:
        return _reject(title, REASON_TOO_SHORT, "too_short")

    if caps_percentage(title + description) > thresholds.max_caps_percentage:
        return _reject(title, REASON_EXCESSIVE_CAPS, "excessive_caps")

    category = find_prohibited_category(full_text, rules)
    if category:
        return _reject(
            title,
            REASON_PROHIBITED.format(category=category),
            "prohibited_content",
            category=category,
        )

    suspicious = find_suspicious_keywords(full_text, rules)
    if suspicious:
        logger.debug("Suspicious keywords found: %s", ", ".join(suspicious))
        return _reject(title, REASON_SUSPICIOUS, "suspicious_keywords")

    if is_repetitive(full_text, thresholds):
        return _reject(title, REASON_REPETITIVE, "repetitive_content")

    return ContentFilterResult.approved()


def caps_percentage(text: str) -> float:
    """Percentage of uppercase Latin letters among non-whitespace characters.

    Text with no non-whitespace characters counts as 0%.
    """
    total = len(_WHITESPACE_RE.sub("", text))
    if total == 0:
        return 0.0
    caps = len(_UPPERCASE_RE.findall(text))
    return caps * 100 / total


def find_prohibited_category(text: str, rules: ContentRules) -> Optional[str]:
    """Return the name of the first category with a pattern matching *text*."""
    for category in rules.categories:
        if category.first_match(text):
            return category.name
    return None


def find_suspicious_keywords(text: str, rules: ContentRules) -> list[str]:
    """Return every suspicious keyword contained in *text*, in catalog order."""
    lowered = text.lower()
    return [kw for kw in rules.suspicious_keywords if kw.lower() in lowered]


def is_repetitive(text: str, thresholds: Thresholds) -> bool:
    """True if *text* is long enough and mostly made of repeated words."""
    words = text.split()
    if len(words) <= thresholds.repetition_min_tokens:
        return False
    return len(set(words)) / len(words) < thresholds.repetition_min_unique_ratio


def _reject(title: str, reason: str, rule: str, category: str = "") -> ContentFilterResult:
    logger.info("Job content rejected [%s%s]: %r", rule, f":{category}" if category else "", title[:60])
    return ContentFilterResult.rejected(reason, rule, category=category)
