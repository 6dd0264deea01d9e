"""Rule catalog for the job content filter.

The built-in catalog covers four prohibited-content categories (spam,
illegal, scam, inappropriate), a list of suspicious keywords and the numeric
thresholds. A rule set can also be loaded from YAML:

    name: marketplace-strict
    version: 1.1.0
    categories:
      scam:
        - '\\bponzi\\b'
    suspicious_keywords:
      - cash only
    thresholds:
      max_caps_percentage: 25

Keys that are absent fall back to the built-in values. Categories are always
evaluated in the canonical order, whatever order the file lists them in.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, fields
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from fixer.errors import RuleConfigError
from fixer.moderation.models import ContentRules, PatternCategory, Thresholds
from fixer.utils.logger import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Built-in catalog
# ---------------------------------------------------------------------------

CATEGORY_ORDER: tuple[str, ...] = ("spam", "illegal", "scam", "inappropriate")

DEFAULT_PROHIBITED_CONTENT: dict[str, list[str]] = {
    "spam": [
        r"\b(earn|make)\s*\$\d+\s*(per|a|each)\s*(day|week|month|hour)\b",
        r"\b(business|money making)\s*opportunity\b",
        r"\bget\s*rich\s*quick\b",
        r"\bwork\s*from\s*home\b",
        r"\beasy\s*money\b",
        r"\bno\s*experience\s*needed\b",
        r"\bguaranteed\s*income\b",
        r"\b100%\s*free\b",
        r"\blimited\s*time\s*offer\b",
    ],
    "illegal": [
        r"\b(illegal|illicit)\b",
        r"\bdrug\s*(deal|sell|deliver)",
        r"\bweed\s*(distribut|sell|deliver)",
        r"\b(cocaine|heroin|meth|ecstasy)\b",
        r"\bcounterfeit\b",
        r"\bfake\s*id\b",
        r"\bstolen\s*(goods|items|merchandise)\b",
        r"\bhack(ing)?\b",
        r"\b(child|kiddie)\s*(porn|pornography)\b",
        r"\bescort\b",
        r"\bprostitut",
    ],
    "scam": [
        r"\badvance\s*fee\b",
        r"\binvestment\s*scheme\b",
        r"\bpyramid\s*scheme\b",
        r"\bponzi\b",
        r"\bmlm\b",
        r"\bmulti\s*level\s*marketing\b",
        r"\bno\s*risk\b",
        r"\bhundred\s*percent\s*guaranteed\b",
    ],
    "inappropriate": [
        r"\b(sex|sexual|nude|naked)\b",
        r"\badult\s*content\b",
        r"\bporn\b",
        r"\bxxx\b",
    ],
}

# Phrases that suggest off-the-books or unlawful work even without a
# category pattern match.
DEFAULT_SUSPICIOUS_KEYWORDS: tuple[str, ...] = (
    "cash only",
    "untraceable",
    "no questions asked",
    "under the table",
    "not legal",
    "without permit",
    "secret",
    "underground",
    "unreported",
    "tax-free",
    "no paperwork",
    "no documentation",
    "discreet",
    "confidential",
    "not regulated",
    "bypass",
    "evade",
)

_THRESHOLD_FIELDS = {f.name for f in fields(Thresholds)}
_TOP_LEVEL_KEYS = {"name", "version", "categories", "suspicious_keywords", "thresholds"}


@lru_cache(maxsize=1)
def default_rules() -> ContentRules:
    """Return the built-in rule set. Built once; the result is immutable."""
    return ContentRules(
        categories=tuple(
            PatternCategory(name=name, patterns=tuple(DEFAULT_PROHIBITED_CONTENT[name]))
            for name in CATEGORY_ORDER
        ),
        suspicious_keywords=DEFAULT_SUSPICIOUS_KEYWORDS,
        thresholds=Thresholds(),
    )


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------


def load_rules(path: str | Path) -> ContentRules:
    """Load a rule set from a YAML file.

    Raises:
        RuleConfigError: if the file is missing, unparsable or invalid.
    """
    source = str(path)
    data = _read_yaml(path)
    issues = _check_rules_data(data)
    if issues:
        raise RuleConfigError("; ".join(issues), source=source)

    rules = _build_rules(data or {})
    logger.info(
        "Loaded rule set '%s' v%s from %s (%d keywords)",
        rules.name,
        rules.version,
        source,
        len(rules.suspicious_keywords),
    )
    return rules


def validate_rules_file(path: str | Path) -> list[str]:
    """Validate a rules YAML file.

    Returns a list of issues found. Empty list means valid.
    """
    try:
        data = _read_yaml(path)
    except RuleConfigError as e:
        return [str(e)]
    return _check_rules_data(data)


def rules_to_dict(rules: ContentRules) -> dict[str, Any]:
    """Serialize a rule set to the same shape ``load_rules`` reads."""
    return {
        "name": rules.name,
        "version": rules.version,
        "categories": {c.name: list(c.patterns) for c in rules.categories},
        "suspicious_keywords": list(rules.suspicious_keywords),
        "thresholds": asdict(rules.thresholds),
    }


def _read_yaml(path: str | Path) -> Any:
    p = Path(path)
    if not p.exists():
        raise RuleConfigError("Rules file not found", source=str(path))
    try:
        with open(p, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RuleConfigError(f"Invalid YAML: {e}", source=str(path)) from e
    except UnicodeDecodeError as e:
        raise RuleConfigError(f"Rules file is not valid UTF-8: {e}", source=str(path)) from e
    except OSError as e:
        raise RuleConfigError(f"Cannot read rules file: {e.strerror or e}", source=str(path)) from e


def _check_rules_data(data: Any) -> list[str]:
    if data is None:
        return []
    if not isinstance(data, dict):
        return ["Rules file must contain a mapping at the top level"]

    issues: list[str] = []

    for key in data:
        if key not in _TOP_LEVEL_KEYS:
            issues.append(f"Unknown top-level key '{key}'")

    categories = data.get("categories", {})
    if not isinstance(categories, dict):
        issues.append("'categories' must map category names to pattern lists")
    else:
        for name, patterns in categories.items():
            if name not in CATEGORY_ORDER:
                issues.append(
                    f"Unknown category '{name}'. Must be one of: {', '.join(CATEGORY_ORDER)}"
                )
                continue
            if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
                issues.append(f"Category '{name}' must be a list of pattern strings")
                continue
            for pattern in patterns:
                try:
                    re.compile(pattern)
                except re.error as e:
                    issues.append(f"Category '{name}' has invalid pattern {pattern!r}: {e}")

    keywords = data.get("suspicious_keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) and k.strip() for k in keywords):
        issues.append("'suspicious_keywords' must be a list of non-empty strings")

    thresholds = data.get("thresholds", {})
    if not isinstance(thresholds, dict):
        issues.append("'thresholds' must be a mapping")
    else:
        for key, value in thresholds.items():
            if key not in _THRESHOLD_FIELDS:
                issues.append(f"Unknown threshold '{key}'")
            elif isinstance(value, bool) or not isinstance(value, (int, float)):
                issues.append(f"Threshold '{key}' must be a number")
            elif not math.isfinite(value):
                issues.append(f"Threshold '{key}' must be a finite number")
            elif value < 0:
                issues.append(f"Threshold '{key}' must not be negative")

    return issues


def _build_rules(data: dict) -> ContentRules:
    defaults = default_rules()

    overrides = data.get("categories", {})
    categories = tuple(
        PatternCategory(name=name, patterns=tuple(overrides[name]))
        if name in overrides
        else next(c for c in defaults.categories if c.name == name)
        for name in CATEGORY_ORDER
    )

    if "suspicious_keywords" in data:
        keywords = tuple(k.strip().lower() for k in data["suspicious_keywords"])
    else:
        keywords = defaults.suspicious_keywords

    threshold_values = asdict(defaults.thresholds)
    threshold_values.update(data.get("thresholds", {}))

    return ContentRules(
        categories=categories,
        suspicious_keywords=keywords,
        thresholds=Thresholds(**threshold_values),
        name=str(data.get("name", "custom")),
        version=str(data.get("version", "1.0.0")),
    )
