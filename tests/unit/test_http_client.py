"""
HTTP Client Unit Tests
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from nexmo_rest.builders import build_get_balance, build_send_message
from nexmo_rest.client.composer import RequestComposer
from nexmo_rest.client.http_client import HttpClient, HttpRequest
from nexmo_rest.config import NexmoConfig
from nexmo_rest.exceptions import TransportError


def fake_response(status: int = 200, content: bytes = b"{}") -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = content
    response.headers = {"Content-Type": "application/json"}
    return response


class TestHttpClient:
    """Tests for HttpClient"""

    @pytest.fixture
    def composer(self, config: NexmoConfig) -> RequestComposer:
        return RequestComposer(config)

    @pytest.fixture
    def client(self):
        client = HttpClient(timeout=5000)
        yield client
        client.close()

    def test_request_id_format(self, client: HttpClient):
        """Should generate nexmo-<hex>-<8 hex> ids"""
        request_id = client._generate_request_id()
        prefix, timestamp, unique = request_id.split("-")
        assert prefix == "nexmo"
        int(timestamp, 16)
        assert len(unique) == 8

    def test_get_sends_query(self, client: HttpClient, composer: RequestComposer):
        """Should put parameters in the query string with no body"""
        request = composer.compose(build_get_balance())
        with patch.object(client._session, "send", return_value=fake_response()) as send:
            response = client.send(request)

        prepared = send.call_args[0][0]
        assert prepared.method == "GET"
        assert prepared.url == request.url
        assert prepared.body is None
        assert send.call_args[1]["timeout"] == 5.0
        assert response.status == 200
        assert response.body == b"{}"
        assert response.request_id.startswith("nexmo-")

    def test_post_sends_body(self, client: HttpClient, composer: RequestComposer):
        """Should send form parameters in the body with a content length"""
        request = composer.compose(
            build_send_message({"from": "Acme", "to": "447700900000", "type": "text", "text": "hi"})
        )
        with patch.object(client._session, "send", return_value=fake_response()) as send:
            client.send(request)

        prepared = send.call_args[0][0]
        assert prepared.method == "POST"
        assert prepared.url == "https://rest.nexmo.com:443/sms/json"
        assert prepared.body == request.params.encode("utf-8")
        assert prepared.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert prepared.headers["Content-Length"] == str(len(request.params.encode("utf-8")))

    def test_non_200_is_returned(self, client: HttpClient, composer: RequestComposer):
        """Should hand back error statuses instead of raising"""
        request = composer.compose(build_get_balance())
        with patch.object(client._session, "send", return_value=fake_response(401, b"")):
            response = client.send(request)
        assert response.status == 401

    @pytest.mark.parametrize(
        "raised, code",
        [
            (requests.exceptions.ConnectTimeout("slow"), "NET01"),
            (requests.exceptions.ReadTimeout("slow"), "NET01"),
            (requests.exceptions.SSLError("bad cert"), "NET04"),
            (requests.exceptions.ChunkedEncodingError("cut"), "NET06"),
            (requests.exceptions.ConnectionError("refused"), "NET02"),
            (requests.exceptions.TooManyRedirects("loop"), "NET10"),
        ],
    )
    def test_error_mapping(self, client: HttpClient, composer: RequestComposer, raised, code):
        """Should map requests failures onto TransportError codes"""
        request = composer.compose(build_get_balance())
        with patch.object(client._session, "send", side_effect=raised):
            with pytest.raises(TransportError) as exc_info:
                client.send(request)
        assert exc_info.value.code == code
        assert exc_info.value.cause is raised

    def test_retries_disabled(self, client: HttpClient):
        adapter = client._session.get_adapter("https://rest.nexmo.com")
        assert adapter.max_retries.total == 0

    def test_context_manager_closes_session(self):
        session = MagicMock(spec=requests.Session)
        with HttpClient(session=session):
            pass
        session.close.assert_called_once()


class TestHttpRequest:
    """Tests for HttpRequest"""

    def test_get_without_params(self):
        request = HttpRequest(
            endpoint=build_get_balance().endpoint,
            scheme="https",
            host="rest.nexmo.com",
            port=443,
            params="",
        )
        assert request.url == "https://rest.nexmo.com:443/account/get-balance"
