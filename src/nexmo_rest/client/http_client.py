"""
HTTP transport layer for the Nexmo REST API
Sends one form encoded request per call and hands back the raw response
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nexmo_rest.exceptions import TransportError
from nexmo_rest.models.request import Endpoint, HttpMethod
from nexmo_rest.utils.logger import ClientLogger

logger = logging.getLogger(__name__)


# Headers sent with every request
DEFAULT_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class HttpRequest:
    """
    Fully composed request, ready for the wire

    ``params`` is the form encoded parameter string. GET requests carry it as
    the query string, POST requests as the body.
    """
    endpoint: Endpoint
    scheme: str
    host: str
    port: int
    params: str
    log_params: str = ""

    @property
    def method(self) -> HttpMethod:
        return self.endpoint.method

    @property
    def path(self) -> str:
        return self.endpoint.path

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}{self.path}"

    @property
    def url(self) -> str:
        if self.method is HttpMethod.GET and self.params:
            return f"{self.base_url}?{self.params}"
        return self.base_url

    @property
    def body(self) -> Optional[bytes]:
        if self.method is HttpMethod.POST:
            return self.params.encode("utf-8")
        return None


@dataclass
class HttpResponse:
    """HTTP response wrapper"""
    status: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    duration: int = 0  # milliseconds
    request_id: str = ""


class Transport(Protocol):
    """Anything able to deliver an ``HttpRequest``"""

    def send(self, request: HttpRequest) -> HttpResponse:
        """Return the complete response or raise ``TransportError``"""
        ...


class HttpClient:
    """
    HTTP Client for the Nexmo REST API

    Features:
    - Form encoded parameters, in the query for GET and the body for POST
    - Configured timeout on every request
    - No automatic retries
    - Request ID generation for log correlation

    Example:
        >>> client = HttpClient(timeout=30000)
        >>> response = client.send(request)
        >>> print(response.status)
    """

    def __init__(
        self,
        timeout: int = 30000,
        session: Optional[requests.Session] = None,
        log: Optional[ClientLogger] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            timeout: Request timeout in milliseconds
            session: Optional preconfigured requests session
            log: Owning client's logger, carries its debug switch
        """
        self.timeout = timeout
        self._log = log.bind(__name__) if log is not None else logger
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with retries disabled"""
        session = requests.Session()
        session.headers.update(DEFAULT_HEADERS)

        adapter = HTTPAdapter(max_retries=Retry(0, read=False))
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"nexmo-{timestamp}-{unique_id}"

    def _normalize_error(self, error: requests.exceptions.RequestException) -> TransportError:
        """Map requests exceptions onto transport errors"""
        if isinstance(error, requests.exceptions.Timeout):
            return TransportError.timeout(cause=error)

        if isinstance(error, requests.exceptions.SSLError):
            return TransportError.ssl_error(f"SSL/TLS error: {error}", cause=error)

        if isinstance(error, requests.exceptions.ChunkedEncodingError):
            return TransportError.connection_closed(cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return TransportError.connection_refused(f"Connection error: {error}", cause=error)

        return TransportError(f"Request error: {error}", cause=error)

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a composed request

        Args:
            request: Composed request

        Returns:
            Status code, raw body and headers

        Raises:
            TransportError: Connection failure, timeout or premature close
        """
        request_id = self._generate_request_id()
        start_time = time.time()

        headers = dict(DEFAULT_HEADERS)
        body = request.body
        if body is not None:
            headers["Content-Length"] = str(len(body))

        self._log.debug(
            "[%s] %s %s params=%s",
            request_id, request.method.value, request.base_url, request.log_params,
        )

        try:
            prepared = self._session.prepare_request(
                requests.Request(
                    method=request.method.value,
                    url=request.url,
                    headers=headers,
                    data=body,
                )
            )
            response = self._session.send(prepared, timeout=self.timeout / 1000.0)
            content = response.content
        except requests.exceptions.RequestException as e:
            error = self._normalize_error(e)
            self._log.warning(
                "[%s] %s %s failed: %s",
                request_id, request.method.value, request.base_url, error,
            )
            raise error from e

        duration = int((time.time() - start_time) * 1000)
        self._log.debug(
            "[%s] HTTP %s in %dms (%d bytes)",
            request_id, response.status_code, duration, len(content),
        )

        return HttpResponse(
            status=response.status_code,
            body=content,
            headers=dict(response.headers),
            duration=duration,
            request_id=request_id,
        )

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()
