"""
Tests for loading form schemas from YAML.
"""

import pytest
import yaml

from modules.validation import FormSchemaLoader, SchemaConfigError, ValidationEngine, load_form_schemas


def test_load_forms(forms_yaml):
    loader = FormSchemaLoader(str(forms_yaml))

    config = loader.load()

    assert set(config["forms"]) == {"signup", "company"}
    assert loader.list_forms() == ["signup", "company"]
    assert loader.get_form_schema("company") == {"cnpj": "cnpj"}


def test_get_form_schema_loads_lazily(forms_yaml):
    loader = FormSchemaLoader(str(forms_yaml))

    assert loader.get_form_schema("signup")["terms"] == "toBeTrue"
    assert loader.get_form_schema("missing") is None


def test_load_form_schemas_helper(forms_yaml):
    forms = load_form_schemas(str(forms_yaml))

    assert forms["signup"]["confirmPassword"] == "confirm_password"


def test_missing_file_gives_empty_config(tmp_path):
    loader = FormSchemaLoader(str(tmp_path / "nope.yaml"))

    assert loader.load() == {"forms": {}}


def test_empty_file_gives_empty_config(tmp_path):
    path = tmp_path / "forms.yaml"
    path.write_text("")

    assert FormSchemaLoader(str(path)).load() == {"forms": {}}


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "forms.yaml"
    path.write_text("forms: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        FormSchemaLoader(str(path)).load()


@pytest.mark.parametrize("content", [
    "- just\n- a list\n",
    "forms:\n  - signup\n",
    "forms:\n  signup: required\n",
    "forms:\n  signup:\n    email: [email, required]\n",
])
def test_malformed_structure_raises(tmp_path, content):
    path = tmp_path / "forms.yaml"
    path.write_text(content)

    with pytest.raises(SchemaConfigError):
        FormSchemaLoader(str(path)).load()


def test_unknown_rule_is_kept(tmp_path):
    path = tmp_path / "forms.yaml"
    path.write_text("forms:\n  survey:\n    agree: accepted\n")

    assert FormSchemaLoader(str(path)).get_form_schema("survey") == {"agree": "accepted"}


def test_default_path_comes_from_settings(monkeypatch, forms_yaml):
    from modules.validation.core import config_loader

    monkeypatch.setattr(config_loader.settings, "FORM_SCHEMAS_PATH", str(forms_yaml))

    assert FormSchemaLoader().list_forms() == ["signup", "company"]


def test_bundled_forms_file_loads():
    from pathlib import Path

    path = Path(__file__).parent.parent / "config" / "validation" / "forms.yaml"

    forms = load_form_schemas(str(path))

    assert forms["signup"]["terms"] == "toBeTrue"
    assert forms["company_registration"]["cnpj"] == "cnpj"


def test_default_path_does_not_depend_on_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    engine = ValidationEngine()

    assert "signup" in engine.list_forms()
    assert engine.validate("signup", {})["hasError"] is True
