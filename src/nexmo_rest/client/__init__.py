"""
Client module for the Nexmo REST API
"""

from nexmo_rest.client.nexmo_client import NexmoClient, Callback, execute
from nexmo_rest.client.composer import RequestComposer, encode_params
from nexmo_rest.client.http_client import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    Transport,
    DEFAULT_HEADERS,
)
from nexmo_rest.client.normalizer import (
    normalize_response,
    from_transport_error,
    decode_message_error,
)

__all__ = [
    "NexmoClient",
    "Callback",
    "execute",
    "RequestComposer",
    "encode_params",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "Transport",
    "DEFAULT_HEADERS",
    "normalize_response",
    "from_transport_error",
    "decode_message_error",
]
