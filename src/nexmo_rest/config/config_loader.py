"""
Configuration Loader
Layers client settings from a JSON file, NEXMO_* environment variables and
programmatic options, in increasing order of priority
"""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from nexmo_rest.config.nexmo_config import NexmoConfig, ENV_VAR_MAPPING
from nexmo_rest.config.config_validator import ConfigValidator, normalize_keys
from nexmo_rest.exceptions import ConfigError


class ConfigLoader:
    """
    Builds a ``NexmoConfig`` from layered sources

    Example:
        >>> config = ConfigLoader().load(config={"apiKey": "key", "apiSecret": "secret"}, env=False)
    """

    def __init__(self, environ: Optional[Mapping] = None) -> None:
        self._validator = ConfigValidator()
        self._environ = os.environ if environ is None else environ

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read settings from a JSON object, snake_case or camelCase keys

        Raises:
            ConfigError: CONFIG_FILE_NOT_FOUND or CONFIG_PARSE_ERROR
        """
        file_path = Path(path).resolve()
        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigError(
                f"Configuration file not found: {file_path}", code="CONFIG_FILE_NOT_FOUND"
            ) from e
        except ValueError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}", code="CONFIG_PARSE_ERROR"
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file must contain a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR",
            )
        return normalize_keys(data)

    def from_environment(self) -> Dict[str, Any]:
        """Settings from NEXMO_* variables, converted to the field types"""
        return {
            key: _coerce(key, self._environ[name])
            for name, key in ENV_VAR_MAPPING.items()
            if self._environ.get(name)
        }

    def merge(self, *sources: Mapping) -> Dict[str, Any]:
        """Later sources win; a None value never overrides"""
        merged: Dict[str, Any] = {}
        for source in sources:
            merged.update(
                (key, value) for key, value in normalize_keys(source).items() if value is not None
            )
        return merged

    def resolve(self, config: Mapping) -> NexmoConfig:
        """
        Validate settings and apply defaults

        Raises:
            ConfigError: Listing every invalid field in ``details["fields"]``
        """
        settings = normalize_keys(config)
        self._validator.validate_or_raise(settings)
        try:
            return NexmoConfig.model_validate(settings)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigError(
                f"Configuration validation failed: {', '.join(fields)}",
                details={"fields": fields},
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Mapping] = None,
    ) -> NexmoConfig:
        """
        Merge file, environment and programmatic settings, then resolve them

        Priority: programmatic > environment > file
        """
        sources: List[Mapping] = []
        if file is not None:
            sources.append(self.from_file(file))
        if env:
            sources.append(self.from_environment())
        if config:
            sources.append(config)
        return self.resolve(self.merge(*sources))


def _coerce(key: str, raw: str) -> Any:
    """Convert an environment string to the field's type; invalid text is kept for the validator"""
    field = NexmoConfig.model_fields.get(key)
    if field is None:
        return raw
    try:
        return TypeAdapter(field.annotation).validate_python(raw)
    except PydanticValidationError:
        return raw
