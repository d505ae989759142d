"""
Rules module.

Contains all built-in rule predicates organized by category:
- field_rules: required, email, toBeTrue
- document_rules: Brazilian CPF and CNPJ check-digit rules
- cross_field_rules: password confirmation

All rules are automatically registered via decorators.
"""

# Import all rules to trigger registration
from modules.validation.rules import field_rules
from modules.validation.rules import document_rules
from modules.validation.rules import cross_field_rules

__all__ = ['field_rules', 'document_rules', 'cross_field_rules']
