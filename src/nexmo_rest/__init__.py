"""
Nexmo REST client for Python

Main entry point for the library
"""

from nexmo_rest.client import NexmoClient
from nexmo_rest.exceptions import (
    NexmoError,
    ErrorCategory,
    ConfigError,
    ValidationError,
    TransportError,
    ParseError,
    ApiError,
    StatusError,
)

# HTTP Client
from nexmo_rest.client import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    Transport,
)

# Configuration
from nexmo_rest.config import (
    NexmoConfig,
    ConfigLoader,
    ConfigValidator,
    DEFAULT_HOST,
    VOICE_HOST,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from nexmo_rest.models import (
    HttpMethod,
    Endpoint,
    OperationRequest,
    CallOutcome,
    MessageType,
    SmsOptions,
    TtsOptions,
    CallOptions,
    AccountSettingsOptions,
    NumberListOptions,
    NumberSearchOptions,
    NumberOptions,
    NumberUpdateOptions,
    RecipientSearchOptions,
    RejectionSearchOptions,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "NexmoClient",
    # HTTP Client
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "Transport",
    # Exceptions
    "NexmoError",
    "ErrorCategory",
    "ConfigError",
    "ValidationError",
    "TransportError",
    "ParseError",
    "ApiError",
    "StatusError",
    # Configuration
    "NexmoConfig",
    "ConfigLoader",
    "ConfigValidator",
    "DEFAULT_HOST",
    "VOICE_HOST",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "HttpMethod",
    "Endpoint",
    "OperationRequest",
    "CallOutcome",
    "MessageType",
    "SmsOptions",
    "TtsOptions",
    "CallOptions",
    "AccountSettingsOptions",
    "NumberListOptions",
    "NumberSearchOptions",
    "NumberOptions",
    "NumberUpdateOptions",
    "RecipientSearchOptions",
    "RejectionSearchOptions",
]
