"""Data models for job posting screening."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from fixer.errors import RuleConfigError


@dataclass(frozen=True)
class ContentFilterResult:
    """Outcome of a screening check.

    ``reason`` is set exactly when the check rejected the input.
    """

    is_approved: bool
    reason: Optional[str] = None
    rule: str = ""  # "too_short" | "excessive_caps" | "prohibited_content" | ... | ""
    category: str = ""  # set only for "prohibited_content"

    def __post_init__(self) -> None:
        if self.is_approved and self.reason is not None:
            raise ValueError("An approved result cannot carry a reason")
        if not self.is_approved and not self.reason:
            raise ValueError("A rejected result must carry a reason")

    @classmethod
    def approved(cls) -> ContentFilterResult:
        return cls(is_approved=True)

    @classmethod
    def rejected(cls, reason: str, rule: str, category: str = "") -> ContentFilterResult:
        return cls(is_approved=False, reason=reason, rule=rule, category=category)

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{"isApproved", "reason"?}`` shape the posting workflow expects."""
        data: dict[str, Any] = {"isApproved": self.is_approved}
        if self.reason is not None:
            data["reason"] = self.reason
        return data


@dataclass(frozen=True)
class PatternCategory:
    """A named, ordered group of case-insensitive content patterns."""

    name: str
    patterns: tuple[str, ...]
    _compiled: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        compiled = []
        for pattern in self.patterns:
            try:
                compiled.append(re.compile(pattern, re.IGNORECASE))
            except re.error as e:
                raise RuleConfigError(
                    f"Invalid pattern {pattern!r} in category '{self.name}': {e}"
                ) from e
        object.__setattr__(self, "_compiled", tuple(compiled))

    def first_match(self, text: str) -> Optional[re.Pattern[str]]:
        """Return the first pattern that matches *text*, or None."""
        for pattern in self._compiled:
            if pattern.search(text):
                return pattern
        return None


@dataclass(frozen=True)
class Thresholds:
    """Numeric limits used by the content filter and the payment validator."""

    min_description_length: int = 20
    max_caps_percentage: float = 30
    min_hourly_rate: float = 7.25
    max_reasonable_amount: float = 10000
    repetition_min_tokens: int = 20
    repetition_min_unique_ratio: float = 0.5


@dataclass(frozen=True)
class ContentRules:
    """Read-only rule set injected into the screening functions."""

    categories: tuple[PatternCategory, ...]
    suspicious_keywords: tuple[str, ...]
    thresholds: Thresholds = field(default_factory=Thresholds)
    name: str = "default"
    version: str = "1.0.0"

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]
