"""Endpoint, request and outcome models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Optional, Tuple

from nexmo_rest.exceptions import ApiError, NexmoError


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"


class Endpoint(Enum):
    """Remote endpoints, with their HTTP method"""

    SEND_MESSAGE = ("/sms/json", HttpMethod.POST)
    SEND_TTS = ("/tts/json", HttpMethod.POST)
    CALL = ("/call/json", HttpMethod.POST)
    GET_BALANCE = ("/account/get-balance", HttpMethod.GET)
    GET_PRICING = ("/account/get-pricing/outbound", HttpMethod.GET)
    UPDATE_SETTINGS = ("/account/settings", HttpMethod.POST)
    TOP_UP = ("/account/top-up", HttpMethod.POST)
    GET_NUMBERS = ("/account/numbers", HttpMethod.GET)
    SEARCH_NUMBERS = ("/number/search", HttpMethod.GET)
    BUY_NUMBER = ("/number/buy", HttpMethod.POST)
    CANCEL_NUMBER = ("/number/cancel", HttpMethod.POST)
    UPDATE_NUMBER = ("/number/update", HttpMethod.POST)
    SEARCH_MESSAGE = ("/search/message", HttpMethod.GET)
    SEARCH_MESSAGES = ("/search/messages", HttpMethod.GET)
    SEARCH_REJECTIONS = ("/search/rejections", HttpMethod.GET)

    def __init__(self, path: str, method: HttpMethod) -> None:
        self.path = path
        self.method = method

    @property
    def status_only(self) -> bool:
        """Whether the endpoint answers with a bare HTTP status"""
        return self in _STATUS_ONLY_ENDPOINTS


_STATUS_ONLY_ENDPOINTS = frozenset({
    Endpoint.BUY_NUMBER,
    Endpoint.CANCEL_NUMBER,
    Endpoint.UPDATE_NUMBER,
})


@dataclass(frozen=True)
class OperationRequest:
    """
    Validated, endpoint specific request

    ``fields`` keeps insertion order and may repeat a name for list valued
    parameters. Names in ``encoded`` already hold percent-encoded values.
    """
    endpoint: Endpoint
    fields: Tuple[Tuple[str, str], ...] = ()
    encoded: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def http_method(self) -> HttpMethod:
        return self.endpoint.method

    @property
    def endpoint_path(self) -> str:
        return self.endpoint.path

    def values(self, name: str) -> Tuple[str, ...]:
        """All values recorded for a field name"""
        return tuple(value for key, value in self.fields if key == name)

    def get(self, name: str) -> Optional[str]:
        """First value recorded for a field name"""
        values = self.values(name)
        return values[0] if values else None


@dataclass(frozen=True)
class CallOutcome:
    """
    Normalized outcome of a single call

    Exactly one of ``error`` or a successful ``result`` is meaningful. An
    ``ApiError`` outcome also keeps the decoded payload in ``result``.
    """
    error: Optional[NexmoError] = None
    result: Any = None

    @classmethod
    def success(cls, result: Any) -> "CallOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: NexmoError) -> "CallOutcome":
        result = error.payload if isinstance(error, ApiError) else None
        return cls(error=error, result=result)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the result, raising the error if the call failed"""
        if self.error is not None:
            raise self.error
        return self.result
