"""
Credential and path composition
Turns a validated operation request into a wire ready ``HttpRequest``
"""

from typing import Iterable, List, Tuple
from urllib.parse import quote_plus, urlencode

from nexmo_rest.client.http_client import HttpRequest
from nexmo_rest.config.nexmo_config import NexmoConfig, VOICE_HOST
from nexmo_rest.models.request import Endpoint, OperationRequest
from nexmo_rest.utils.logger import redact_pairs


class RequestComposer:
    """
    Adds credentials to validated fields and routes the request

    ``api_key`` and ``api_secret`` always lead the parameter string, followed
    by the operation fields in the order the builder recorded them.
    """

    def __init__(self, config: NexmoConfig) -> None:
        self.config = config

    def host_for(self, endpoint: Endpoint) -> str:
        """Text-to-speech has its own host, every other endpoint uses the configured one"""
        if endpoint is Endpoint.SEND_TTS:
            return VOICE_HOST
        return self.config.base_url

    def parameters(self, request: OperationRequest) -> List[Tuple[str, str]]:
        credentials = [
            ("api_key", self.config.api_key),
            ("api_secret", self.config.api_secret),
        ]
        return credentials + list(request.fields)

    def compose(self, request: OperationRequest) -> HttpRequest:
        pairs = self.parameters(request)
        return HttpRequest(
            endpoint=request.endpoint,
            scheme=self.config.scheme,
            host=self.host_for(request.endpoint),
            port=self.config.port,
            params=encode_params(pairs, request.encoded),
            log_params=encode_params(redact_pairs(pairs), request.encoded),
        )


def encode_params(pairs: Iterable[Tuple[str, str]], encoded: Iterable[str] = ()) -> str:
    """
    Serialize parameters as application/x-www-form-urlencoded

    Values of fields named in ``encoded`` were percent-encoded by the builder
    and are written as is.
    """
    encoded = frozenset(encoded)
    parts = []
    for key, value in pairs:
        if key in encoded:
            parts.append(f"{quote_plus(key)}={value}")
        else:
            parts.append(urlencode([(key, value)]))
    return "&".join(parts)
