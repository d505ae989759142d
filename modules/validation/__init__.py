"""
Validation module.

Declarative field validation: a schema maps field names to rule kinds and
the engine turns a value bag into a per-field error report.

Main components:
- validate_fields: Stateless dispatch and aggregation
- ValidationEngine: Named form schemas loaded from YAML
- RuleKind: Rule identifiers accepted in schemas
- register_rule: Decorator registering rule predicates

Usage:
    from modules.validation import validate_fields

    errors = validate_fields(
        {"email": "email", "terms": "toBeTrue"},
        {"email": "test@example.com", "terms": True},
    )

    if errors["hasError"]:
        for field, invalid in errors.items():
            if invalid and field != "hasError":
                print(f"Invalid field: {field}")
"""

from modules.validation.engine import ValidationEngine, validate_fields, has_errors
from modules.validation.core.base import HAS_ERROR_KEY, ErrorReport, FormSchema, RuleKind, ValueBag
from modules.validation.core.config_loader import FormSchemaLoader, load_form_schemas
from modules.validation.core.exceptions import FormGuardException, RuleRegistrationError, SchemaConfigError
from modules.validation.core.registry import register_rule, get_rule, list_rules, RULE_REGISTRY

__all__ = [
    'ValidationEngine',
    'validate_fields',
    'has_errors',
    'HAS_ERROR_KEY',
    'ErrorReport',
    'FormSchema',
    'RuleKind',
    'ValueBag',
    'FormSchemaLoader',
    'load_form_schemas',
    'FormGuardException',
    'RuleRegistrationError',
    'SchemaConfigError',
    'register_rule',
    'get_rule',
    'list_rules',
    'RULE_REGISTRY',
]
