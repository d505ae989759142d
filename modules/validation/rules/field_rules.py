"""
Field rules module.

Rules that read the value at the schema field's own key:
- required: value is present and not empty
- email: value looks like local@domain.tld
- toBeTrue: value is truthy

Every predicate returns True when the value is INVALID.
"""

import re
from typing import Any
from modules.validation.core.base import RuleKind
from modules.validation.core.registry import register_rule
from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

EMAIL_PATTERN = re.compile(r'^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$', re.IGNORECASE | re.ASCII)


@register_rule(RuleKind.REQUIRED)
def required(value: Any = None) -> bool:
    """
    Invalid when the value is absent or has zero length.

    Values without a length (booleans, numbers) count as present.
    """
    if value is None:
        return True

    try:
        return len(value) == 0
    except TypeError:
        return False


@register_rule(RuleKind.EMAIL)
def email(value: Any = None) -> bool:
    """
    Invalid unless the value matches local-part "@" domain "." TLD.

    Syntactic only. The TLD needs at least two letters.
    """
    if value is None:
        return True

    if not isinstance(value, str):
        if settings.LOG_VALUE_ANOMALIES:
            logger.debug(f"email rule received {type(value).__name__}, matching its text form")
        value = str(value)

    return EMAIL_PATTERN.fullmatch(value) is None


@register_rule(RuleKind.TO_BE_TRUE)
def to_be_true(value: Any = None) -> bool:
    """Invalid unless the value is truthy"""
    return not value
