"""
Nexmo REST client facade

Each operation validates its options, then dispatches one HTTP request on
the client's thread pool. The returned ``Future`` resolves to the decoded
result or fails with a ``NexmoError``; an optional ``callback(error,
result)`` is invoked exactly once when the call completes.
"""

import logging
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Union

from nexmo_rest.builders import (
    build_buy_number,
    build_call,
    build_cancel_number,
    build_get_balance,
    build_get_numbers,
    build_get_pricing,
    build_search_message,
    build_search_messages_by_ids,
    build_search_messages_by_recipient,
    build_search_numbers,
    build_search_rejections,
    build_send_message,
    build_top_up,
    build_tts_message,
    build_update_number,
    build_update_settings,
)
from nexmo_rest.client.composer import RequestComposer
from nexmo_rest.client.http_client import HttpClient, Transport
from nexmo_rest.client.normalizer import from_transport_error, normalize_response
from nexmo_rest.config.config_loader import ConfigLoader
from nexmo_rest.config.nexmo_config import NexmoConfig
from nexmo_rest.exceptions import ApiError, ConfigError, TransportError, ValidationError
from nexmo_rest.models.messaging import MessageType
from nexmo_rest.models.request import CallOutcome, OperationRequest
from nexmo_rest.utils.logger import ClientLogger

logger = logging.getLogger(__name__)


Callback = Callable[[Optional[Exception], Any], None]

INITIALIZE_REQUIRED = (
    "client not initialized, construct it with an api key and secret "
    "or call initialize() before calling any API operation"
)

CLIENT_CLOSED = "client closed, create a new client to send further requests"


def execute(
    composer: RequestComposer,
    transport: Transport,
    request: OperationRequest,
    log: Optional[ClientLogger] = None,
) -> CallOutcome:
    """Compose, send and normalize a single request"""
    http_request = composer.compose(request)
    try:
        response = transport.send(http_request)
    except TransportError as e:
        return from_transport_error(e)
    return normalize_response(request.endpoint, response, log)


class NexmoClient:
    """
    Client for the Nexmo SMS, voice and account REST API

    Example:
        >>> client = NexmoClient({"apiKey": "key", "apiSecret": "secret"})
        >>> future = client.send_text_message("Acme", "447700900000", "Hello")
        >>> future.result()["messages"][0]["message-id"]
    """

    def __init__(
        self,
        config: Optional[Union[NexmoConfig, Mapping[str, Any]]] = None,
        *,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Create a client

        Args:
            config: Resolved config or a mapping with apiKey, apiSecret and
                optional baseUrl, useTLS, debug. Without it the client stays
                uninitialized until ``initialize`` is called.
            transport: Replaces the default HTTP transport
        """
        self._config: Optional[NexmoConfig] = None
        self._composer: Optional[RequestComposer] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        self._custom_transport = transport
        self._transport: Optional[Transport] = transport
        self._log = ClientLogger(logger)
        self._closed = False

        if config is not None:
            self.initialize(config)

    @classmethod
    def from_environment(cls, transport: Optional[Transport] = None) -> "NexmoClient":
        """Create a client configured from NEXMO_* environment variables"""
        return cls(ConfigLoader().load(env=True), transport=transport)

    def initialize(self, config: Union[NexmoConfig, Mapping[str, Any]]) -> "NexmoClient":
        """
        Install credentials and settings

        Raises:
            ConfigError: When key or secret is missing or a setting is invalid
        """
        if self._closed:
            raise ConfigError(CLIENT_CLOSED, code="CLIENT_CLOSED")
        resolved = self._resolve_config(config)
        log = ClientLogger(logger, debug=resolved.debug)

        previous_executor = self._executor
        previous_transport = None if self._custom_transport else self._transport
        previous_log = self._log

        self._executor = ThreadPoolExecutor(
            max_workers=resolved.max_workers, thread_name_prefix="nexmo"
        )
        self._transport = self._custom_transport or HttpClient(timeout=resolved.timeout, log=log)
        self._composer = RequestComposer(resolved)
        self._config = resolved
        self._log = log

        if previous_executor is not None:
            previous_executor.shutdown(wait=False)
        if isinstance(previous_transport, HttpClient):
            previous_transport.close()
        previous_log.close()

        self._log.debug(
            "client initialized for %s://%s:%s",
            resolved.scheme, resolved.base_url, resolved.port,
        )
        return self

    def _resolve_config(self, config: Union[NexmoConfig, Mapping[str, Any]]) -> NexmoConfig:
        if isinstance(config, NexmoConfig):
            return config
        if isinstance(config, Mapping):
            return ConfigLoader().resolve(dict(config))
        raise ConfigError(
            f"config must be a NexmoConfig or a mapping, not {type(config).__name__}"
        )

    @property
    def initialized(self) -> bool:
        return self._config is not None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def config(self) -> NexmoConfig:
        return self._require_config()

    def _require_config(self) -> NexmoConfig:
        if self._config is None:
            raise ConfigError(INITIALIZE_REQUIRED, code="CONFIG_NOT_INITIALIZED")
        return self._config

    def _submit(
        self,
        build: Callable[[NexmoConfig], OperationRequest],
        callback: Optional[Callback],
    ) -> "Future[Any]":
        if self._closed:
            raise ConfigError(CLIENT_CLOSED, code="CLIENT_CLOSED")
        config = self._require_config()

        try:
            request = build(config)
        except ValidationError as e:
            if callback is None:
                raise
            self._log.debug("validation failed on %s: %s", e.field, e)
            future: "Future[Any]" = Future()
            future.set_exception(e)
            _attach_callback(future, callback)
            return future

        self._log.debug(
            "dispatching %s %s", request.http_method.value, request.endpoint_path
        )
        try:
            future = self._executor.submit(
                _run, self._composer, self._transport, request, self._log
            )
        except RuntimeError as e:
            raise ConfigError(CLIENT_CLOSED, code="CLIENT_CLOSED") from e
        if callback is not None:
            _attach_callback(future, callback)
        return future

    # Messaging

    def send_message(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """
        Send an SMS

        Args:
            options: from, to, type and the payload fields the type requires
            callback: Optional ``callback(error, result)``

        Returns:
            Future resolving to the decoded API response
        """
        return self._submit(lambda config: build_send_message(options), callback)

    def send_text_message(
        self, sender: str, recipient: str, text: str, callback: Optional[Callback] = None
    ) -> "Future[Any]":
        return self.send_message(
            {"from": sender, "to": recipient, "type": MessageType.UNICODE, "text": text},
            callback,
        )

    def send_binary_message(
        self,
        sender: str,
        recipient: str,
        body: str,
        udh: str,
        callback: Optional[Callback] = None,
    ) -> "Future[Any]":
        return self.send_message(
            {"from": sender, "to": recipient, "type": MessageType.BINARY, "body": body, "udh": udh},
            callback,
        )

    def send_wap_push_message(
        self,
        sender: str,
        recipient: str,
        title: str,
        url: str,
        validity: Optional[int] = None,
        callback: Optional[Callback] = None,
    ) -> "Future[Any]":
        return self.send_message(
            {
                "from": sender,
                "to": recipient,
                "type": MessageType.WAPPUSH,
                "title": title,
                "url": url,
                "validity": validity,
            },
            callback,
        )

    def send_tts_message(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Read ``text`` out to ``to`` over a voice call"""
        return self._submit(lambda config: build_tts_message(options), callback)

    def call(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Place a call to ``to`` driven by the instructions at ``answer_url``"""
        return self._submit(lambda config: build_call(options), callback)

    # Account

    def get_balance(self, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_get_balance(), callback)

    def get_pricing(self, country: str, callback: Optional[Callback] = None) -> "Future[Any]":
        """Outbound pricing for a two letter country code"""
        return self._submit(lambda config: build_get_pricing(country), callback)

    def update_settings(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Change the API secret and/or the inbound and delivery receipt callback URLs"""
        return self._submit(lambda config: build_update_settings(options), callback)

    def update_secret(self, new_secret: str, callback: Optional[Callback] = None) -> "Future[Any]":
        return self.update_settings({"newSecret": new_secret}, callback)

    def update_mo_callback_url(self, url: str, callback: Optional[Callback] = None) -> "Future[Any]":
        return self.update_settings({"moCallBackUrl": url}, callback)

    def update_dr_callback_url(self, url: str, callback: Optional[Callback] = None) -> "Future[Any]":
        return self.update_settings({"drCallBackUrl": url}, callback)

    def top_up(self, transaction_id: str, callback: Optional[Callback] = None) -> "Future[Any]":
        """Top up an auto-reload account using a previous transaction id"""
        return self._submit(lambda config: build_top_up(transaction_id), callback)

    def get_numbers(self, options: Any = None, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_get_numbers(options), callback)

    # Numbers

    def search_numbers(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_search_numbers(options), callback)

    def buy_number(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Resolves to 200 on success, fails with ``StatusError`` otherwise"""
        return self._submit(
            lambda config: build_buy_number(options, config.msisdn_min_length), callback
        )

    def cancel_number(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Resolves to 200 on success, fails with ``StatusError`` otherwise"""
        return self._submit(
            lambda config: build_cancel_number(options, config.msisdn_min_length), callback
        )

    def update_number(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Resolves to 200 on success, fails with ``StatusError`` otherwise"""
        return self._submit(lambda config: build_update_number(options), callback)

    # Search

    def search_message(self, message_id: str, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_search_message(message_id), callback)

    def search_messages_by_ids(self, message_ids: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        """Look up at most ten messages by id"""
        return self._submit(lambda config: build_search_messages_by_ids(message_ids), callback)

    def search_messages_by_recipient(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_search_messages_by_recipient(options), callback)

    def search_rejections(self, options: Any, callback: Optional[Callback] = None) -> "Future[Any]":
        return self._submit(lambda config: build_search_rejections(options), callback)

    def close(self) -> None:
        """
        Wait for in-flight calls and release the thread pool and HTTP session

        The client rejects further operations with ``ConfigError``.
        """
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)
        if self._custom_transport is None and isinstance(self._transport, HttpClient):
            self._transport.close()
        self._log.close()

    def __enter__(self) -> "NexmoClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()


def _run(
    composer: RequestComposer,
    transport: Transport,
    request: OperationRequest,
    log: ClientLogger,
) -> Any:
    return execute(composer, transport, request, log).unwrap()


def _attach_callback(future: "Future[Any]", callback: Callback) -> None:
    """Invoke ``callback(error, result)`` once the future settles"""

    def deliver(done: "Future[Any]") -> None:
        if done.cancelled():
            callback(TransportError("Request cancelled", network_code="NET07"), None)
            return
        error = done.exception()
        if error is None:
            callback(None, done.result())
        elif isinstance(error, ApiError):
            callback(error, error.payload)
        else:
            callback(error, None)

    future.add_done_callback(deliver)
