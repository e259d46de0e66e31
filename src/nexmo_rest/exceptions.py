"""Exception classes for the Nexmo REST client"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Error category codes"""
    CONFIG = "CONFIG"
    VALIDATION = "VAL"
    TRANSPORT = "NET"
    PARSE = "PARSE"
    API = "API"
    STATUS = "STATUS"
    UNKNOWN = "UNKNOWN"


class NexmoError(Exception):
    """
    Base exception for Nexmo client errors

    All errors raised or delivered by the client extend from this class.
    Provides consistent error handling and categorization.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> ErrorCategory:
        """Determine error category from code"""
        if not code:
            return ErrorCategory.UNKNOWN

        for category in ErrorCategory:
            if category is not ErrorCategory.UNKNOWN and code.startswith(category.value):
                return category

        return ErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: ErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ConfigError(NexmoError):
    """
    Configuration error

    Raised synchronously for programmer errors such as missing credentials
    or calling an operation on a client that was never initialized.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ValidationError(NexmoError):
    """Invalid operation parameter, tagged with the offending field"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VAL01", details=details)
        self.field = field


class TransportError(NexmoError):
    """
    Transport error for HTTP layer failures
    """

    def __init__(
        self,
        message: str,
        network_code: str = "NET10",
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, code=network_code, status_code=status_code, cause=cause)
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[BaseException] = None
    ) -> "TransportError":
        """Create a timeout error"""
        return cls(message, network_code="NET01", status_code=408, cause=cause)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused", cause: Optional[BaseException] = None
    ) -> "TransportError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", cause=cause)

    @classmethod
    def connection_closed(
        cls,
        message: str = "Connection closed before the response completed",
        cause: Optional[BaseException] = None,
    ) -> "TransportError":
        """Create a premature close error"""
        return cls(message, network_code="NET06", cause=cause)

    @classmethod
    def ssl_error(
        cls, message: str = "SSL/TLS error", cause: Optional[BaseException] = None
    ) -> "TransportError":
        """Create an SSL error"""
        return cls(message, network_code="NET04", cause=cause)


class ParseError(NexmoError):
    """Response body could not be decoded as JSON"""

    def __init__(
        self,
        message: str = "Could not decode API response as JSON",
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code="PARSE01", status_code=status_code, cause=cause)


class ApiError(NexmoError):
    """
    Business-level failure reported inside a successful HTTP exchange

    Carries the error text reported by the service and the full decoded
    payload so callers can branch on service specific status codes.
    """

    def __init__(
        self,
        message: str,
        payload: Any = None,
        api_status: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code="API01",
            details={"status": api_status} if api_status is not None else None,
        )
        self.payload = payload
        self.api_status = api_status


class StatusError(NexmoError):
    """Non-200 HTTP status from an endpoint that only reports a status code"""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Request failed with HTTP status {status_code}",
            code="STATUS01",
            status_code=status_code,
        )
