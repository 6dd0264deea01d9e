"""Job posting screening: the checks a posting must pass before it is saved.

Runs the content filter first and the payment validator second, the same
order the job creation endpoint applies them, and reports the first
rejection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from fixer.moderation import (
    ContentFilterResult,
    ContentRules,
    default_rules,
    filter_job_content,
    validate_payment_amount,
)


@dataclass(frozen=True)
class JobScreeningResult:
    """Combined outcome of screening one job posting."""

    content: ContentFilterResult
    payment: Optional[ContentFilterResult] = None  # None when content was rejected

    @property
    def is_approved(self) -> bool:
        return self.content.is_approved and self.payment is not None and self.payment.is_approved

    @property
    def stage(self) -> str:
        """Which check rejected the posting: "content", "payment", or ""."""
        if not self.content.is_approved:
            return "content"
        if self.payment is not None and not self.payment.is_approved:
            return "payment"
        return ""

    @property
    def reason(self) -> Optional[str]:
        if not self.content.is_approved:
            return self.content.reason
        if self.payment is not None:
            return self.payment.reason
        return None


def screen_job_posting(
    title: str,
    description: str,
    payment_amount: Any,
    rules: Optional[ContentRules] = None,
) -> JobScreeningResult:
    """Screen a job posting's content and payment amount."""
    rules = rules or default_rules()

    content = filter_job_content(title, description, rules)
    if not content.is_approved:
        return JobScreeningResult(content=content)

    payment = validate_payment_amount(payment_amount, rules.thresholds)
    return JobScreeningResult(content=content, payment=payment)
