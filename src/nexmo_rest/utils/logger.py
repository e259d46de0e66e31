"""Logging helpers"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

PACKAGE_LOGGER = "nexmo_rest"

# Parameters that must never reach a log line
SENSITIVE_FIELDS = [
    "secret",
    "password",
    "authorization",
]

_DEBUG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class ClientLogger(logging.LoggerAdapter):
    """
    Logger adapter carrying one client's debug switch

    DEBUG records are emitted only by clients configured with ``debug=True``
    and never change the level of the shared package logger. They travel
    through the logging hierarchy when the application enabled DEBUG for
    it, otherwise to a stream handler owned by the client. INFO and above
    log normally.

    Example:
        >>> log = ClientLogger(logging.getLogger(__name__), debug=True)
        >>> log.bind("nexmo_rest.client.http_client").debug("sent")
    """

    def __init__(
        self,
        logger: logging.Logger,
        debug: bool = False,
        handler: Optional[logging.Handler] = None,
    ) -> None:
        super().__init__(logger, {})
        self.debug_enabled = debug
        if debug and handler is None:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
        self.handler = handler

    def bind(self, name: str) -> "ClientLogger":
        """Same switch and handler, logging under another module name"""
        return ClientLogger(logging.getLogger(name), self.debug_enabled, self.handler)

    def isEnabledFor(self, level: int) -> bool:
        if level < logging.INFO:
            return self.debug_enabled
        return self.logger.isEnabledFor(level)

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if not self.isEnabledFor(level):
            return
        if level >= logging.INFO:
            self.logger.log(level, msg, *args, **kwargs)
            return

        record = self.logger.makeRecord(
            self.logger.name, level, "(unknown file)", 0, msg, args,
            None,
        )
        if self.logger.isEnabledFor(level):
            self.logger.handle(record)
        else:
            self.handler.handle(record)

    def close(self) -> None:
        if self.handler is not None:
            self.handler.close()


def is_sensitive(name: str) -> bool:
    lower_name = name.lower()
    return any(field in lower_name for field in SENSITIVE_FIELDS)


def redact_sensitive_data(obj: Any) -> Any:
    """Redact sensitive data from object for logging"""
    if isinstance(obj, list):
        return [redact_sensitive_data(item) for item in obj]

    if isinstance(obj, dict):
        redacted = {}
        for key, value in obj.items():
            if is_sensitive(str(key)):
                redacted[key] = "[REDACTED]"
            elif isinstance(value, (dict, list)):
                redacted[key] = redact_sensitive_data(value)
            else:
                redacted[key] = value
        return redacted

    return obj


def redact_pairs(pairs: Iterable[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """Redact sensitive values from ordered request parameters"""
    return [(key, "[REDACTED]" if is_sensitive(key) else value) for key, value in pairs]
