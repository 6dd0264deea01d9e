"""Runtime configuration, read from the environment.

FIXER_RULES_PATH   optional YAML rule file replacing the built-in catalog
FIXER_LOG_LEVEL    logging level name (default INFO), read by fixer.utils.logger
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from fixer.moderation.models import ContentRules
from fixer.moderation.rules import default_rules, load_rules
from fixer.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    rules_path: str = ""

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            rules_path=os.environ.get("FIXER_RULES_PATH", ""),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def resolve_rules(settings: Settings) -> ContentRules:
    """Return the rule set *settings* points at, or the built-in one.

    Raises:
        RuleConfigError: if the configured rules file is invalid.
    """
    if not settings.rules_path:
        return default_rules()
    logger.info("Using rules file %s", settings.rules_path)
    return load_rules(settings.rules_path)


@lru_cache(maxsize=1)
def get_active_rules() -> ContentRules:
    """Rule set for the running process, resolved once."""
    return resolve_rules(get_settings())
