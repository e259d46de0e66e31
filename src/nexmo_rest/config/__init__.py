"""
Configuration module
"""

from nexmo_rest.config.nexmo_config import (
    NexmoConfig,
    DEFAULT_HOST,
    VOICE_HOST,
    ENV_VAR_MAPPING,
    CONFIG_ALIASES,
    ConfigDefaults,
)
from nexmo_rest.config.config_loader import ConfigLoader
from nexmo_rest.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "NexmoConfig",
    "DEFAULT_HOST",
    "VOICE_HOST",
    "ENV_VAR_MAPPING",
    "CONFIG_ALIASES",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
