"""Job posting moderation.

Rule-based screening of job content and payment amounts, run by the posting
workflow before a job is persisted.
"""

from fixer.moderation.content_filter import filter_job_content
from fixer.moderation.models import ContentFilterResult, ContentRules, PatternCategory, Thresholds
from fixer.moderation.payment import validate_payment_amount
from fixer.moderation.rules import default_rules, load_rules, validate_rules_file

__all__ = [
    "filter_job_content",
    "validate_payment_amount",
    "ContentFilterResult",
    "ContentRules",
    "PatternCategory",
    "Thresholds",
    "default_rules",
    "load_rules",
    "validate_rules_file",
]
