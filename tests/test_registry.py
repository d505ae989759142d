"""
Tests for the rule registry and RuleKind parsing.
"""

import pytest

from modules.validation import RULE_REGISTRY, RuleKind, RuleRegistrationError, validate_fields
from modules.validation.core.registry import get_rule, is_registered, list_rules, register_rule


def test_every_rule_kind_is_registered():
    assert set(RULE_REGISTRY) == set(RuleKind)


def test_list_rules_names_predicates():
    assert list_rules() == {
        "required": "required",
        "email": "email",
        "toBeTrue": "to_be_true",
        "cpf": "cpf",
        "cnpj": "cnpj",
        "confirm_password": "confirm_password",
    }


@pytest.mark.parametrize("identifier, kind", [
    ("required", RuleKind.REQUIRED),
    ("toBeTrue", RuleKind.TO_BE_TRUE),
    ("confirm_password", RuleKind.CONFIRM_PASSWORD),
    (RuleKind.CNPJ, RuleKind.CNPJ),
])
def test_parse_known_identifiers(identifier, kind):
    assert RuleKind.parse(identifier) is kind


@pytest.mark.parametrize("identifier", ["bogus", "confirmPassword", "Email", None, 3, ["cpf"]])
def test_parse_unknown_identifiers(identifier):
    assert RuleKind.parse(identifier) is None


def test_rule_input_resolution():
    assert get_rule("cpf").value_key == "cpf"
    assert get_rule("cnpj").value_key == "cnpj"
    assert get_rule("confirm_password").reads_values is True
    assert get_rule("email").value_key is None


def test_get_rule_for_unknown_kind():
    assert get_rule("bogus") is None
    assert is_registered("bogus") is False
    assert is_registered("email") is True


def test_register_unknown_kind_raises():
    with pytest.raises(RuleRegistrationError):
        register_rule("phone")


def test_register_overwrites_existing_rule(monkeypatch):
    # Restored by monkeypatch after the test
    monkeypatch.setitem(RULE_REGISTRY, RuleKind.REQUIRED, RULE_REGISTRY[RuleKind.REQUIRED])

    @register_rule(RuleKind.REQUIRED)
    def strict_required(value=None):
        return not isinstance(value, str) or not value.strip()

    assert get_rule("required").name == "strict_required"
    assert validate_fields({"name": "required"}, {"name": "   "}) == {"name": True, "hasError": True}
