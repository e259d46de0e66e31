"""
Response normalization

Every transport outcome becomes exactly one ``CallOutcome``:

1. transport failure -> ``TransportError``
2. buy, cancel and update number -> HTTP 200 succeeds with the status code,
   anything else fails with ``StatusError``; the body is ignored
3. body that is not JSON -> ``ParseError`` (raw body is dropped)
4. SMS response whose first message has a nonzero status -> ``ApiError``
5. anything else -> success with the decoded payload
"""

import json
import logging
from typing import Any, Optional

from nexmo_rest.client.http_client import HttpResponse
from nexmo_rest.exceptions import ApiError, ParseError, StatusError, TransportError
from nexmo_rest.models.request import CallOutcome, Endpoint
from nexmo_rest.utils.logger import ClientLogger, redact_sensitive_data

logger = logging.getLogger(__name__)


def from_transport_error(error: TransportError) -> CallOutcome:
    return CallOutcome.failure(error)


def normalize_response(
    endpoint: Endpoint,
    response: HttpResponse,
    log: Optional[ClientLogger] = None,
) -> CallOutcome:
    """Interpret a complete HTTP response for the given endpoint"""
    _log = log.bind(__name__) if log is not None else logger

    if endpoint.status_only:
        if response.status == 200:
            return CallOutcome.success(response.status)
        return CallOutcome.failure(StatusError(response.status))

    try:
        payload = json.loads(response.body)
    except ValueError as e:
        _log.warning(
            "[%s] could not decode %s response as JSON (HTTP %s)",
            response.request_id, endpoint.path, response.status,
        )
        return CallOutcome.failure(ParseError(cause=e, status_code=response.status))

    _log.debug("[%s] payload: %s", response.request_id, redact_sensitive_data(payload))

    if endpoint is Endpoint.SEND_MESSAGE:
        error = decode_message_error(payload)
        if error is not None:
            return CallOutcome.failure(error)

    return CallOutcome.success(payload)


def decode_message_error(payload: Any) -> Optional[ApiError]:
    """
    Decode the status of an SMS submission

    Returns an ``ApiError`` when the first message entry reports a nonzero
    status, None when the submission was accepted or the payload carries no
    message entries.
    """
    if not isinstance(payload, dict):
        return None

    messages = payload.get("messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return None

    first = messages[0]
    status = first.get("status")
    if status is None or _is_zero(status):
        return None

    message = first.get("error-text") or f"Message rejected with status {status}"
    return ApiError(message, payload=payload, api_status=str(status))


def _is_zero(status: Any) -> bool:
    try:
        return int(status) == 0
    except (TypeError, ValueError):
        return False
