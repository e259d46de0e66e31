"""Models module initialization"""

from nexmo_rest.models.request import (
    HttpMethod,
    Endpoint,
    OperationRequest,
    CallOutcome,
)
from nexmo_rest.models.messaging import (
    MessageType,
    SmsOptions,
    TtsOptions,
    CallOptions,
)
from nexmo_rest.models.account import (
    AccountSettingsOptions,
    NumberListOptions,
)
from nexmo_rest.models.numbers import (
    NumberSearchOptions,
    NumberOptions,
    NumberUpdateOptions,
)
from nexmo_rest.models.search import (
    RecipientSearchOptions,
    RejectionSearchOptions,
)

__all__ = [
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
