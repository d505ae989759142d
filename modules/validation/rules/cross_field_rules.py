"""
Cross-field rules.

The only cross-field pairing supported is password confirmation, which
reads the fixed 'password' and 'confirm_password' keys of the value bag
whatever field name carries the rule in the schema.
"""

from typing import Any, Mapping
from modules.validation.core.base import RuleKind
from modules.validation.core.registry import register_rule

PASSWORD_KEY = "password"
CONFIRMATION_KEY = "confirm_password"


@register_rule(RuleKind.CONFIRM_PASSWORD, reads_values=True)
def confirm_password(values: Mapping[str, Any]) -> bool:
    """
    Invalid when password and confirm_password differ.

    Raw comparison: no trimming or normalization. Two absent keys are equal.
    """
    return values.get(PASSWORD_KEY) != values.get(CONFIRMATION_KEY)
