"""
Shared fixtures for unit tests
"""

import json
import threading
from typing import Any, Callable, List, Optional, Union
from urllib.parse import parse_qsl, urlsplit

import pytest

from nexmo_rest.client.http_client import HttpRequest, HttpResponse
from nexmo_rest.config import NexmoConfig


class FakeTransport:
    """
    Records every request and answers with a canned response

    ``reply`` may be an ``HttpResponse``, an exception to raise, or a
    callable receiving the request.
    """

    def __init__(self, reply: Union[HttpResponse, Exception, Callable[[HttpRequest], HttpResponse]]) -> None:
        self.reply = reply
        self.requests: List[HttpRequest] = []
        self._lock = threading.Lock()

    def send(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if isinstance(self.reply, Exception):
            raise self.reply
        if callable(self.reply):
            return self.reply(request)
        return self.reply

    @property
    def last(self) -> Optional[HttpRequest]:
        return self.requests[-1] if self.requests else None

    def last_params(self) -> List[tuple]:
        return parse_qsl(self.last.params, keep_blank_values=True)


def json_response(payload: Any, status: int = 200) -> HttpResponse:
    return HttpResponse(status=status, body=json.dumps(payload).encode("utf-8"))


def query_params(url: str) -> List[tuple]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


@pytest.fixture
def config() -> NexmoConfig:
    return NexmoConfig(api_key="key123", api_secret="secret45")


@pytest.fixture
def balance_transport() -> FakeTransport:
    return FakeTransport(json_response({"value": 10.5, "autoReload": False}))
