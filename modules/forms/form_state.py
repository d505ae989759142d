"""
FormState - value bag and submission gate for one form instance.

A FormState is created when a form instance starts, handed to whatever
collects field values, and discarded (or cleared) when the form ends.
Nothing is shared between instances.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from modules.validation.core.base import HAS_ERROR_KEY, ErrorReport, FormSchema
from modules.validation.engine import validate_fields
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class FormState:
    """
    Raw field values for a single form, plus the last error report.

    Usage:
        with FormState({"email": "email"}) as form:
            form.set_value("email", "test@example.com")
            form.submit(lambda values: save(values))
    """

    def __init__(
        self,
        schema: Optional[FormSchema] = None,
        initial_data: Optional[Mapping[str, Any]] = None
    ):
        """
        Args:
            schema: Schema used by validate()/submit() when none is passed
            initial_data: Values to seed the bag with
        """
        self.schema = dict(schema) if schema is not None else None
        self._values: Dict[str, Any] = {}
        self.errors: ErrorReport = {}

        if initial_data:
            self.set_values(initial_data)

    def __enter__(self) -> "FormState":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def set_value(self, name: str, value: Any) -> None:
        self._values[name] = value

    def set_values(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set_value(name, value)

    def get_value(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def get_values(self) -> Dict[str, Any]:
        """Plain dict copy of the current values"""
        return dict(self._values)

    def clear(self) -> None:
        """Drop all values and the last error report"""
        self._values.clear()
        self.errors = {}

    def validate(self, schema: Optional[FormSchema] = None) -> bool:
        """
        Validate the current values.

        Args:
            schema: Overrides the schema bound at construction

        Returns:
            True when at least one field is invalid. The full report is kept
            in self.errors.
        """
        rules = schema if schema is not None else self.schema
        self.errors = validate_fields(rules, self.get_values())
        return self.errors[HAS_ERROR_KEY]

    def submit(
        self,
        on_submit: Callable[[Dict[str, Any]], Any],
        schema: Optional[FormSchema] = None
    ) -> bool:
        """
        Call on_submit with the current values unless validation fails.

        With no schema passed and none bound, values are submitted unvalidated.

        Returns:
            Whether on_submit was called
        """
        rules = schema if schema is not None else self.schema

        if rules is not None and self.validate(rules):
            invalid = [name for name, flag in self.errors.items() if flag and name != HAS_ERROR_KEY]
            logger.info(f"Form submission blocked, invalid fields: {invalid}")
            return False

        on_submit(self.get_values())
        return True
