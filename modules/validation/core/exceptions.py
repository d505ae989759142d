"""
Custom exceptions for the validation module.

The validation path itself never raises; these cover configuration
and registration only.
"""


class FormGuardException(Exception):
    """Base exception for the validation module."""
    pass


class SchemaConfigError(FormGuardException):
    """Exception raised when a form schema configuration is malformed."""
    pass


class RuleRegistrationError(FormGuardException):
    """Exception raised when a rule is registered against an unknown kind."""
    pass
