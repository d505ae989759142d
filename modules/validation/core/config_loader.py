"""
Form schema configuration loader.

Loads named form schemas from YAML configuration files.
"""

import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path
from modules.validation.core.base import RuleKind
from modules.validation.core.exceptions import SchemaConfigError
from shared.utils.config import settings
from shared.utils.logger import log_error, setup_logger

logger = setup_logger(__name__)


class FormSchemaLoader:
    """
    Loads form schemas from YAML files.

    Expected layout:
        forms:
          signup:
            email: email
            password: required
            confirmPassword: confirm_password
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to form schemas YAML file
                        If None, uses settings.FORM_SCHEMAS_PATH, resolved
                        against the project root when relative
        """
        if config_path is None:
            config_path = Path(settings.FORM_SCHEMAS_PATH)
            if not config_path.is_absolute():
                # Relative to the project root, not the working directory
                base_dir = Path(__file__).resolve().parents[3]
                config_path = base_dir / config_path

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
            SchemaConfigError: If the file does not describe form schemas
        """
        if not self.config_path.exists():
            logger.warning(
                f"Form schema file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log_error(logger, e, "Failed to parse form schema config")
            raise

        self._config = self._check_config(raw or {})
        logger.info(f"Loaded {len(self._config['forms'])} form schemas from: {self.config_path}")
        return self._config

    def get_form_schema(self, form_name: str) -> Optional[Dict[str, str]]:
        """
        Get the schema for a named form.

        Args:
            form_name: Form identifier

        Returns:
            Copy of the field -> rule mapping, or None if the form is not defined
        """
        if self._config is None:
            self.load()

        schema = self._config['forms'].get(form_name)
        return dict(schema) if schema is not None else None

    def list_forms(self) -> List[str]:
        """List the names of all configured forms."""
        if self._config is None:
            self.load()

        return list(self._config['forms'].keys())

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()

    def _check_config(self, raw: Any) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise SchemaConfigError(f"{self.config_path}: top level must be a mapping")

        forms = raw.get('forms') or {}
        if not isinstance(forms, dict):
            raise SchemaConfigError(f"{self.config_path}: 'forms' must be a mapping")

        for form_name, schema in forms.items():
            if not isinstance(schema, dict):
                raise SchemaConfigError(
                    f"{self.config_path}: form '{form_name}' must map field names to rule kinds"
                )
            for field_name, rule in schema.items():
                if not isinstance(field_name, str) or not isinstance(rule, str):
                    raise SchemaConfigError(
                        f"{self.config_path}: form '{form_name}' has a non-string entry "
                        f"{field_name!r}: {rule!r}"
                    )
                if RuleKind.parse(rule) is None:
                    # Unknown kinds are allowed; they fall back to toBeTrue
                    logger.warning(
                        f"Form '{form_name}' field '{field_name}' uses unknown rule '{rule}'"
                    )

        return {'forms': forms}

    def _get_default_config(self) -> Dict[str, Any]:
        return {'forms': {}}


def load_form_schemas(config_path: Optional[str] = None) -> Dict[str, Dict[str, str]]:
    """
    Convenience function to load all form schemas.

    Args:
        config_path: Optional path to config file

    Returns:
        Mapping of form name to schema
    """
    loader = FormSchemaLoader(config_path)
    return loader.load()['forms']
