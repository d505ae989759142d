"""
Rule registry system.

Provides decorator-based registration for rule predicates and retrieval functions.
This allows rules to declare how they read the value bag without the engine
special-casing field names.
"""

from typing import Dict, Optional, Union
from modules.validation.core.base import RuleKind, RulePredicate, RuleSpec
from modules.validation.core.exceptions import RuleRegistrationError
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

# Global registry of all rules
RULE_REGISTRY: Dict[RuleKind, RuleSpec] = {}


def register_rule(
    kind: Union[RuleKind, str],
    value_key: Optional[str] = None,
    reads_values: bool = False
):
    """
    Decorator to register a rule predicate in the global registry.

    Usage:
        @register_rule(RuleKind.CPF, value_key="cpf")
        def cpf(value) -> bool:
            ...

    Args:
        kind: Rule kind the predicate answers for
        value_key: Fixed value-bag key to read instead of the schema field name
        reads_values: Pass the whole value bag to the predicate

    Returns:
        Decorator function

    Raises:
        RuleRegistrationError: If kind is not a RuleKind identifier
    """
    rule_kind = RuleKind.parse(kind)
    if rule_kind is None:
        raise RuleRegistrationError(f"Unknown rule kind: {kind!r}")

    def decorator(predicate: RulePredicate) -> RulePredicate:
        if rule_kind in RULE_REGISTRY:
            logger.warning(
                f"Rule '{rule_kind.value}' is already registered. "
                f"Overwriting with {predicate.__name__}"
            )

        RULE_REGISTRY[rule_kind] = RuleSpec(
            kind=rule_kind,
            predicate=predicate,
            value_key=value_key,
            reads_values=reads_values
        )
        logger.debug(f"Registered rule: {rule_kind.value} -> {predicate.__name__}")
        return predicate

    return decorator


def get_rule(kind: Union[RuleKind, str]) -> Optional[RuleSpec]:
    """
    Get a registered rule by kind.

    Args:
        kind: RuleKind or its string identifier

    Returns:
        RuleSpec or None if the identifier is unknown or unregistered
    """
    rule_kind = RuleKind.parse(kind)
    if rule_kind is None:
        return None
    return RULE_REGISTRY.get(rule_kind)


def list_rules() -> Dict[str, str]:
    """
    List all registered rules.

    Returns:
        Dictionary mapping rule identifiers to predicate names
    """
    return {
        kind.value: spec.name
        for kind, spec in RULE_REGISTRY.items()
    }


def is_registered(kind: Union[RuleKind, str]) -> bool:
    """Check if a rule kind has a registered predicate."""
    return get_rule(kind) is not None
