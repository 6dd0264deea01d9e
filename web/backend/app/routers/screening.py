"""Screening router -- moderate job content and validate payment amounts.

Rejections are ordinary 200 responses with ``is_approved: false``; the
posting workflow decides what to do with them.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from fixer.config import get_active_rules
from fixer.errors import RuleConfigError
from fixer.moderation.content_filter import filter_job_content
from fixer.moderation.models import ContentFilterResult, ContentRules
from fixer.moderation.payment import validate_payment_amount
from fixer.moderation.rules import rules_to_dict
from fixer.payments.fees import calculate_job_totals
from fixer.screening import screen_job_posting
from fixer.utils.logger import get_logger
from web.backend.app.models.api import (
    JobContentRequest,
    JobPostingRequest,
    JobTotalsResponse,
    PaymentAmountRequest,
    PostingScreeningResponse,
    RuleSetResponse,
    ScreeningResponse,
    ThresholdsResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/screening", tags=["screening"])


def get_rules() -> ContentRules:
    """Dependency returning the process-wide rule set."""
    try:
        return get_active_rules()
    except RuleConfigError as exc:
        logger.error("Moderation rules unavailable: %s", exc)
        raise HTTPException(status_code=500, detail=f"Moderation rules unavailable: {exc}")


def _result_to_response(result: ContentFilterResult) -> ScreeningResponse:
    """Convert a ContentFilterResult dataclass to a Pydantic response."""
    return ScreeningResponse(
        is_approved=result.is_approved,
        reason=result.reason,
        rule=result.rule,
        category=result.category,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/job",
    response_model=ScreeningResponse,
    summary="Run the content filter on a job title and description",
)
async def screen_job_content(
    request: JobContentRequest,
    rules: ContentRules = Depends(get_rules),
):
    """Check a job posting's text for spam, illegal, scam or inappropriate content."""
    return _result_to_response(filter_job_content(request.title, request.description, rules))


@router.post(
    "/payment-amount",
    response_model=ScreeningResponse,
    summary="Validate a proposed payment amount",
)
async def screen_payment_amount(
    request: PaymentAmountRequest,
    rules: ContentRules = Depends(get_rules),
):
    """Check a payment amount against the minimum and maximum bounds."""
    return _result_to_response(validate_payment_amount(request.amount, rules.thresholds))


@router.post(
    "/posting",
    response_model=PostingScreeningResponse,
    summary="Screen a complete job posting",
)
async def screen_posting(
    request: JobPostingRequest,
    rules: ContentRules = Depends(get_rules),
):
    """Run content and payment checks in order.

    When the posting is approved, the response also carries the service fee
    and total that the job record will be created with.
    """
    result = screen_job_posting(
        request.title, request.description, request.payment_amount, rules
    )

    totals = None
    if result.is_approved:
        job_totals = calculate_job_totals(request.payment_amount, request.payment_type)
        totals = JobTotalsResponse(
            payment_amount=job_totals.payment_amount,
            service_fee=job_totals.service_fee,
            total_amount=job_totals.total_amount,
            total_cents=job_totals.total_cents,
            payment_type=job_totals.payment_type.value,
        )

    return PostingScreeningResponse(
        is_approved=result.is_approved,
        reason=result.reason,
        stage=result.stage,
        content=_result_to_response(result.content),
        payment=_result_to_response(result.payment) if result.payment is not None else None,
        totals=totals,
    )


@router.get(
    "/rules",
    response_model=RuleSetResponse,
    summary="Show the active moderation rule set",
)
async def get_rule_set(rules: ContentRules = Depends(get_rules)):
    """Return the categories, keywords and thresholds currently enforced."""
    data = rules_to_dict(rules)
    return RuleSetResponse(
        name=data["name"],
        version=data["version"],
        categories=data["categories"],
        suspicious_keywords=data["suspicious_keywords"],
        thresholds=ThresholdsResponse(**asdict(rules.thresholds)),
    )
