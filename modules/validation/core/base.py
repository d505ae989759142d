"""
Base types for the validation system.

This module provides the foundation shared by every rule:
- RuleKind: Closed enumeration of rule identifiers used in form schemas
- RuleSpec: Registered predicate plus the way its input is resolved
- FormSchema / ValueBag / ErrorReport: Type aliases for the engine contract
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union


HAS_ERROR_KEY = "hasError"


class RuleKind(str, Enum):
    """Rule identifiers accepted in a form schema (case-sensitive)"""
    REQUIRED = "required"
    EMAIL = "email"
    CPF = "cpf"
    CNPJ = "cnpj"
    TO_BE_TRUE = "toBeTrue"
    CONFIRM_PASSWORD = "confirm_password"

    @classmethod
    def parse(cls, identifier: Any) -> Optional["RuleKind"]:
        """
        Resolve a schema identifier to a RuleKind.

        Returns None for identifiers outside the enumeration; the engine
        maps those to its default arm.
        """
        if isinstance(identifier, cls):
            return identifier
        try:
            return cls(identifier)
        except (ValueError, TypeError):
            return None


FormSchema = Mapping[str, Union[RuleKind, str]]
ValueBag = Mapping[str, Any]
ErrorReport = Dict[str, bool]

# A predicate returns True when its input is INVALID
RulePredicate = Callable[[Any], bool]


@dataclass(frozen=True)
class RuleSpec:
    """
    A registered rule.

    Input resolution, in order:
    - reads_values: the predicate receives the whole value bag
    - value_key: the predicate receives values[value_key], whatever field
      named the rule in the schema
    - otherwise: the predicate receives the value at the schema field's own key
    """
    kind: RuleKind
    predicate: RulePredicate
    value_key: Optional[str] = None
    reads_values: bool = False

    @property
    def name(self) -> str:
        return self.predicate.__name__

    def resolve_input(self, field_name: str, values: ValueBag) -> Any:
        """Pick the predicate's input out of the value bag"""
        if self.reads_values:
            return values
        return values.get(self.value_key or field_name)

    def is_invalid(self, field_name: str, values: ValueBag) -> bool:
        return bool(self.predicate(self.resolve_input(field_name, values)))
