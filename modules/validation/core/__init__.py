"""
Validation core module.

Contains base types, the rule registry, the form schema loader and exceptions.
"""

from modules.validation.core.base import (
    HAS_ERROR_KEY,
    ErrorReport,
    FormSchema,
    RuleKind,
    RuleSpec,
    ValueBag,
)
from modules.validation.core.exceptions import (
    FormGuardException,
    RuleRegistrationError,
    SchemaConfigError,
)
from modules.validation.core.registry import RULE_REGISTRY, register_rule, get_rule, list_rules

__all__ = [
    'HAS_ERROR_KEY',
    'ErrorReport',
    'FormSchema',
    'RuleKind',
    'RuleSpec',
    'ValueBag',
    'FormGuardException',
    'RuleRegistrationError',
    'SchemaConfigError',
    'RULE_REGISTRY',
    'register_rule',
    'get_rule',
    'list_rules',
]
