"""
Forms module.

Owned per-form value storage wired to the validation engine.
"""

from modules.forms.form_state import FormState

__all__ = ['FormState']
