"""Pydantic models for API request/response serialization.

These models mirror the ``fixer`` dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Screening models
# ---------------------------------------------------------------------------


class JobContentRequest(BaseModel):
    """Title and description of a job posting."""

    title: str
    description: str


class PaymentAmountRequest(BaseModel):
    """A proposed payment amount in dollars."""

    # Non-finite values are rejected by the validator, not by the schema.
    amount: float = Field(allow_inf_nan=True)


class JobPostingRequest(BaseModel):
    """A complete job posting as submitted by a poster."""

    title: str
    description: str
    payment_amount: float = Field(allow_inf_nan=True)
    payment_type: Literal["fixed", "hourly"] = "fixed"


class ScreeningResponse(BaseModel):
    """Mirrors fixer.moderation.models.ContentFilterResult."""

    is_approved: bool
    reason: Optional[str] = None
    rule: str = ""
    category: str = ""


class JobTotalsResponse(BaseModel):
    """Mirrors fixer.payments.fees.JobTotals."""

    payment_amount: float
    service_fee: float
    total_amount: float
    total_cents: int
    payment_type: str


class PostingScreeningResponse(BaseModel):
    """Mirrors fixer.screening.JobScreeningResult."""

    is_approved: bool
    reason: Optional[str] = None
    stage: str = ""
    content: ScreeningResponse
    payment: Optional[ScreeningResponse] = None
    totals: Optional[JobTotalsResponse] = None


# ---------------------------------------------------------------------------
# Rule set models
# ---------------------------------------------------------------------------


class ThresholdsResponse(BaseModel):
    """Mirrors fixer.moderation.models.Thresholds."""

    min_description_length: int
    max_caps_percentage: float
    min_hourly_rate: float
    max_reasonable_amount: float
    repetition_min_tokens: int
    repetition_min_unique_ratio: float


class RuleSetResponse(BaseModel):
    """Mirrors fixer.moderation.models.ContentRules."""

    name: str
    version: str
    categories: dict[str, list[str]] = Field(default_factory=dict)
    suspicious_keywords: list[str] = Field(default_factory=list)
    thresholds: ThresholdsResponse
