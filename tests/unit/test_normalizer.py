"""
Response Normalizer Unit Tests
"""

import pytest

from nexmo_rest.client.http_client import HttpResponse
from nexmo_rest.client.normalizer import (
    decode_message_error,
    from_transport_error,
    normalize_response,
)
from nexmo_rest.exceptions import ApiError, ParseError, StatusError, TransportError
from nexmo_rest.models import Endpoint

from conftest import json_response


class TestStatusOnlyEndpoints:
    """Tests for buy, cancel and update number responses"""

    @pytest.mark.parametrize(
        "endpoint", [Endpoint.BUY_NUMBER, Endpoint.CANCEL_NUMBER, Endpoint.UPDATE_NUMBER]
    )
    def test_200_succeeds_with_status(self, endpoint: Endpoint):
        """Should succeed with the status code and ignore the body"""
        outcome = normalize_response(endpoint, HttpResponse(status=200, body=b"not json"))
        assert outcome.ok
        assert outcome.result == 200

    @pytest.mark.parametrize("status", [401, 420, 500])
    def test_other_status_fails(self, status: int):
        """Should fail with StatusError without parsing the body"""
        outcome = normalize_response(
            Endpoint.BUY_NUMBER, HttpResponse(status=status, body=b"<html>")
        )
        assert isinstance(outcome.error, StatusError)
        assert outcome.error.status_code == status
        assert outcome.result is None


class TestJsonEndpoints:
    """Tests for JSON decoded responses"""

    def test_payload_returned(self):
        payload = {"value": 3.14, "autoReload": False}
        outcome = normalize_response(Endpoint.GET_BALANCE, json_response(payload))
        assert outcome.ok
        assert outcome.result == payload

    def test_invalid_json(self):
        """Should fail with ParseError and drop the raw body"""
        outcome = normalize_response(
            Endpoint.GET_BALANCE, HttpResponse(status=200, body=b"not json")
        )
        assert isinstance(outcome.error, ParseError)
        assert isinstance(outcome.error.cause, ValueError)
        assert outcome.result is None

    def test_empty_body(self):
        outcome = normalize_response(Endpoint.GET_PRICING, HttpResponse(status=200, body=b""))
        assert isinstance(outcome.error, ParseError)

    def test_non_200_json_is_payload(self):
        """Should treat a decodable error body as a payload"""
        payload = {"error-code": "401", "error-code-label": "authentication failed"}
        outcome = normalize_response(Endpoint.GET_BALANCE, json_response(payload, status=401))
        assert outcome.ok
        assert outcome.result == payload

    def test_message_status_zero(self):
        payload = {"message-count": "1", "messages": [{"status": "0", "message-id": "abc"}]}
        outcome = normalize_response(Endpoint.SEND_MESSAGE, json_response(payload))
        assert outcome.ok
        assert outcome.result == payload

    def test_message_status_nonzero(self):
        """Should fail with ApiError carrying error-text and the payload"""
        payload = {
            "message-count": "1",
            "messages": [{"status": "2", "error-text": "Missing to param"}],
        }
        outcome = normalize_response(Endpoint.SEND_MESSAGE, json_response(payload))
        assert isinstance(outcome.error, ApiError)
        assert str(outcome.error) == "Missing to param"
        assert outcome.error.api_status == "2"
        assert outcome.error.payload == payload
        assert outcome.result == payload

    def test_message_status_only_checked_for_sms(self):
        payload = {"messages": [{"status": "1", "error-text": "throttled"}]}
        outcome = normalize_response(Endpoint.SEARCH_MESSAGES, json_response(payload))
        assert outcome.ok


class TestDecodeMessageError:
    """Tests for SMS status decoding"""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            [],
            {"messages": []},
            {"messages": "x"},
            {"messages": [{"message-id": "abc"}]},
            {"messages": [{"status": 0}]},
        ],
    )
    def test_no_error(self, payload):
        assert decode_message_error(payload) is None

    def test_integer_status(self):
        error = decode_message_error({"messages": [{"status": 9}]})
        assert error.api_status == "9"
        assert str(error) == "Message rejected with status 9"

    def test_first_message_decides(self):
        payload = {"messages": [{"status": "0"}, {"status": "5", "error-text": "later part"}]}
        assert decode_message_error(payload) is None


def test_from_transport_error():
    error = TransportError.timeout()
    outcome = from_transport_error(error)
    assert outcome.error is error
    assert not outcome.ok
    with pytest.raises(TransportError):
        outcome.unwrap()
