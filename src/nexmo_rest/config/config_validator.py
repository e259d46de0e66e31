"""
Configuration Validator
Validates client configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from nexmo_rest.config.nexmo_config import CONFIG_ALIASES


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Provides comprehensive validation for client configuration
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate, snake_case or camelCase keys

        Returns:
            ValidationResult with any errors
        """
        self._errors = []
        config = normalize_keys(config)

        self._validate_required(config)
        self._validate_formats(config)
        self._validate_ranges(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ConfigError: If configuration is invalid
        """
        from nexmo_rest.exceptions import ConfigError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ConfigError(
                f"Configuration validation failed: {error_messages}",
                details={"fields": [e.field for e in result.errors]},
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate credentials are present and non-empty"""
        for field_name in ("api_key", "api_secret"):
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif not isinstance(value, str):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a string",
                ))
            elif value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                ))

    def _validate_formats(self, config: Dict[str, Any]) -> None:
        """Validate field formats"""
        base_url = config.get("base_url")
        if base_url is not None:
            if not isinstance(base_url, str) or base_url.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field="base_url",
                    message="base_url must be a non-empty host name",
                    value=base_url
                ))
            elif "://" in base_url or "/" in base_url:
                self._errors.append(ValidationErrorDetail(
                    field="base_url",
                    message="base_url must be a host name without scheme or path",
                    value=base_url
                ))

        for flag in ("use_tls", "debug"):
            value = config.get(flag)
            if value is not None and not isinstance(value, bool):
                self._errors.append(ValidationErrorDetail(
                    field=flag,
                    message=f"{flag} must be a boolean",
                    value=value
                ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        timeout = config.get("timeout")
        if timeout is not None:
            if not _is_int(timeout) or timeout <= 0:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout must be a positive integer (milliseconds)",
                    value=timeout
                ))
            elif timeout < 1000:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout should be at least 1000ms for reliable operation",
                    value=timeout
                ))
            elif timeout > 300000:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout should not exceed 300000ms (5 minutes)",
                    value=timeout
                ))

        max_workers = config.get("max_workers")
        if max_workers is not None:
            if not _is_int(max_workers) or not 1 <= max_workers <= 64:
                self._errors.append(ValidationErrorDetail(
                    field="max_workers",
                    message="max_workers must be an integer between 1 and 64",
                    value=max_workers
                ))

        min_length = config.get("msisdn_min_length")
        if min_length is not None:
            if not _is_int(min_length) or min_length < 1:
                self._errors.append(ValidationErrorDetail(
                    field="msisdn_min_length",
                    message="msisdn_min_length must be a positive integer",
                    value=min_length
                ))


def normalize_keys(config: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase option names onto their snake_case field names"""
    return {CONFIG_ALIASES.get(key, key): value for key, value in config.items()}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
