"""
Validation engine - dispatch and aggregation for form schemas.

validate_fields() is the primary entry point: it runs every field of a
schema through its rule and folds the per-field flags into one report.
ValidationEngine adds named form schemas loaded from configuration.
"""

from typing import Any, Dict, List, Optional

from modules.validation.core.base import (
    HAS_ERROR_KEY,
    ErrorReport,
    FormSchema,
    RuleKind,
    RuleSpec,
    ValueBag,
)
from modules.validation.core.registry import RULE_REGISTRY, get_rule
from modules.validation.core.config_loader import FormSchemaLoader
from shared.utils.logger import log_error, setup_logger

# Import rules to trigger registration
from modules.validation import rules  # noqa: F401

logger = setup_logger(__name__)


def _resolve_rule(field_name: str, rule: Any) -> RuleSpec:
    """
    Map a schema entry to its rule.

    Identifiers outside RuleKind take the default arm: toBeTrue against
    the field's own value.
    """
    spec = get_rule(rule)
    if spec is not None:
        return spec

    if RuleKind.parse(rule) is None:
        logger.debug(f"Field '{field_name}' has unknown rule {rule!r}, using toBeTrue")
    return RULE_REGISTRY[RuleKind.TO_BE_TRUE]


def _check_field(field_name: str, spec: RuleSpec, values: ValueBag) -> bool:
    if spec.value_key and spec.value_key != field_name:
        logger.warning(
            f"Field '{field_name}' uses rule '{spec.kind.value}', which always reads "
            f"the '{spec.value_key}' value"
        )

    try:
        return spec.is_invalid(field_name, values)
    except Exception as e:
        # Flag the field rather than fail the whole report
        log_error(logger, e, f"Rule '{spec.kind.value}' failed on field '{field_name}'")
        return True


def validate_fields(schema: Optional[FormSchema], values: Optional[ValueBag]) -> ErrorReport:
    """
    Validate a value bag against a schema.

    Args:
        schema: Field name -> rule kind
        values: Field name -> raw value; only read, never modified

    Returns:
        One boolean per schema field (True = invalid) plus 'hasError',
        which is True when any field is invalid.

    Example:
        >>> validate_fields({"email": "email"}, {"email": "test@example.com"})
        {'email': False, 'hasError': False}
    """
    schema = schema or {}
    values = values if values is not None else {}

    errors: ErrorReport = {}
    for field_name, rule in schema.items():
        spec = _resolve_rule(field_name, rule)
        errors[field_name] = _check_field(field_name, spec, values)

    errors[HAS_ERROR_KEY] = any(errors.values())
    return errors


def has_errors(report: ErrorReport) -> bool:
    """Aggregate flag of a report returned by validate_fields"""
    return bool(report.get(HAS_ERROR_KEY, False))


class ValidationEngine:
    """
    Validates value bags against named form schemas.

    Usage:
        engine = ValidationEngine("config/validation/forms.yaml")
        errors = engine.validate("signup", {"email": "a@b.co", "password": "x"})

        if errors["hasError"]:
            ...
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize validation engine.

        Args:
            config_path: Path to form schemas YAML file
                        If None, uses settings.FORM_SCHEMAS_PATH
        """
        self.config_loader = FormSchemaLoader(config_path)
        self.config = self.config_loader.load()

        logger.info(
            f"ValidationEngine initialized with {len(RULE_REGISTRY)} rules "
            f"and {len(self.config['forms'])} forms"
        )

    def validate(self, form_name: str, values: Optional[ValueBag]) -> ErrorReport:
        """
        Validate values against a configured form schema.

        An undefined form has no rules, so its report only carries
        'hasError': False.
        """
        schema = self.config_loader.get_form_schema(form_name)

        if schema is None:
            logger.warning(f"No form schema defined for {form_name}")
            schema = {}

        return validate_fields(schema, values)

    def get_form_schema(self, form_name: str) -> Optional[Dict[str, str]]:
        return self.config_loader.get_form_schema(form_name)

    def list_forms(self) -> List[str]:
        return self.config_loader.list_forms()

    def get_available_rules(self) -> List[str]:
        """
        Get list of all registered rule identifiers.

        Returns:
            List of rule identifiers
        """
        return [kind.value for kind in RULE_REGISTRY]

    def reload_config(self) -> None:
        """Reload form schemas from file"""
        logger.info("Reloading form schema configuration")
        self.config = self.config_loader.reload()
