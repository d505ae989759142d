"""
Shared fixtures for the validation test suite.

Note: sys.path manipulation is handled here so tests run from a checkout
without installing the package.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


VALID_CPF = "529.982.247-25"
VALID_CNPJ = "21053264000183"


@pytest.fixture
def full_schema():
    """One field per rule kind, named after the keys the rules read."""
    return {
        "cpf": "cpf",
        "cnpj": "cnpj",
        "email": "email",
        "requiredField": "required",
        "confirmPassword": "confirm_password",
    }


@pytest.fixture
def valid_values():
    return {
        "cpf": VALID_CPF,
        "cnpj": VALID_CNPJ,
        "email": "test@example.com",
        "requiredField": "required value",
        "confirm_password": "password",
        "password": "password",
    }


@pytest.fixture
def forms_yaml(tmp_path):
    """Write a forms file and return its path."""
    path = tmp_path / "forms.yaml"
    path.write_text(
        "forms:\n"
        "  signup:\n"
        "    email: email\n"
        "    password: required\n"
        "    confirmPassword: confirm_password\n"
        "    terms: toBeTrue\n"
        "  company:\n"
        "    cnpj: cnpj\n"
    )
    return path
