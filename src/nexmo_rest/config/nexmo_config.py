"""
Nexmo Client Configuration Types and Schema
Type-safe configuration objects for the Nexmo REST client
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# Default REST host, overridable per client
DEFAULT_HOST = "rest.nexmo.com"

# Text-to-speech requests always go to this host
VOICE_HOST = "api.nexmo.com"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = DEFAULT_HOST
    USE_TLS = True
    DEBUG = False
    TIMEOUT = 30000
    MAX_WORKERS = 4


# Environment variable mapping
ENV_VAR_MAPPING = {
    "NEXMO_API_KEY": "api_key",
    "NEXMO_API_SECRET": "api_secret",
    "NEXMO_BASE_URL": "base_url",
    "NEXMO_USE_TLS": "use_tls",
    "NEXMO_DEBUG": "debug",
    "NEXMO_TIMEOUT": "timeout",
    "NEXMO_MAX_WORKERS": "max_workers",
    "NEXMO_MSISDN_MIN_LENGTH": "msisdn_min_length",
}

# camelCase option names accepted on input
CONFIG_ALIASES = {
    "apiKey": "api_key",
    "apiSecret": "api_secret",
    "baseUrl": "base_url",
    "useTLS": "use_tls",
    "useTls": "use_tls",
    "maxWorkers": "max_workers",
    "msisdnMinLength": "msisdn_min_length",
}


class NexmoConfig(BaseModel):
    """
    Client configuration

    Created once per client and never mutated afterwards; every client
    instance owns its own copy of the credentials.
    """

    api_key: str = Field(
        ...,
        alias="apiKey",
        description="Account API key",
        min_length=1,
    )
    api_secret: str = Field(
        ...,
        alias="apiSecret",
        description="Account API secret",
        min_length=1,
        repr=False,
    )
    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        alias="baseUrl",
        description="REST host name, without scheme",
        min_length=1,
    )
    use_tls: bool = Field(
        default=ConfigDefaults.USE_TLS,
        alias="useTLS",
        description="Use HTTPS on port 443 instead of HTTP on port 80",
    )
    debug: bool = Field(
        default=ConfigDefaults.DEBUG,
        description="Log requests and responses at DEBUG level",
    )
    timeout: int = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds",
        ge=1000,
        le=300000,
    )
    max_workers: int = Field(
        default=ConfigDefaults.MAX_WORKERS,
        alias="maxWorkers",
        description="Threads used to dispatch requests",
        ge=1,
        le=64,
    )
    msisdn_min_length: Optional[int] = Field(
        default=None,
        alias="msisdnMinLength",
        description="Minimum MSISDN length for buy/cancel; unset defers to the service",
        ge=1,
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base_url is a bare host name"""
        if "://" in v or "/" in v:
            raise ValueError("base_url must be a host name without scheme or path")
        return v

    @property
    def port(self) -> int:
        """Port matching the transport security setting"""
        return 443 if self.use_tls else 80

    @property
    def scheme(self) -> str:
        """URL scheme matching the transport security setting"""
        return "https" if self.use_tls else "http"

