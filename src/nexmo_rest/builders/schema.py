"""
Field schema primitives for request building

A ``RequestBuilder`` reads a loosely typed options bag (mapping or pydantic
options model), checks each field against its ``FieldSpec`` and records the
normalized string values in declaration order. The first failing field
raises ``ValidationError`` and nothing is sent.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple
from urllib.parse import quote

from pydantic import BaseModel

from nexmo_rest.exceptions import ValidationError
from nexmo_rest.models.request import Endpoint, OperationRequest


MAX_MESSAGE_IDS = 10
MAX_PAGE_SIZE = 100
MAX_SECRET_LENGTH = 8


ERROR_MESSAGES = {
    "required": "{field} is required",
    "invalid_message_type": "invalid message type",
    "invalid_country_code": "invalid country code",
    "invalid_msisdn": "invalid msisdn",
    "invalid_message_ids": "invalid message ids",
    "too_many_message_ids": "too many message ids",
    "invalid_new_secret": "invalid new secret",
    "not_numeric": "{field} must be numeric",
    "not_positive": "{field} must be greater than 0",
    "page_size_too_large": "{field} must not exceed {limit}",
    "settings_required": "at least one of newSecret, moCallBackUrl or drCallBackUrl is required",
    "filter_required": "at least one of index, size, pattern or search_pattern is required",
    "invalid_options": "options must be a mapping or an options model",
}


Check = Callable[["FieldSpec", str], None]


@dataclass(frozen=True)
class FieldSpec:
    """
    Declares one request parameter

    Args:
        name: Parameter name on the wire
        alias: Python friendly option key accepted in addition to ``name``
        url: Percent-encode the value before it is recorded
        check: Extra validation applied to the string value
    """
    name: str
    alias: Optional[str] = None
    url: bool = False
    check: Optional[Check] = None

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.name, self.alias) if self.alias else (self.name,)


def stringify(value: Any) -> Optional[str]:
    """Convert an option value to its wire form; None and "" mean absent"""
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    value = str(value)
    return value if value != "" else None


def read_options(options: Any) -> Dict[str, Any]:
    """Turn the caller's options into a plain dictionary"""
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        return options.model_dump(by_alias=True, exclude_none=True)
    if isinstance(options, Mapping):
        return dict(options)
    raise ValidationError(ERROR_MESSAGES["invalid_options"], field="options")


# Value checks


def country_code(spec: FieldSpec, value: str) -> None:
    if len(value) != 2:
        raise ValidationError(ERROR_MESSAGES["invalid_country_code"], field=spec.name)


def page_index(spec: FieldSpec, value: str) -> None:
    if _as_int(spec, value) <= 0:
        raise ValidationError(
            ERROR_MESSAGES["not_positive"].format(field=spec.name), field=spec.name
        )


def page_size(spec: FieldSpec, value: str) -> None:
    size = _as_int(spec, value)
    if size <= 0:
        raise ValidationError(
            ERROR_MESSAGES["not_positive"].format(field=spec.name), field=spec.name
        )
    if size > MAX_PAGE_SIZE:
        raise ValidationError(
            ERROR_MESSAGES["page_size_too_large"].format(field=spec.name, limit=MAX_PAGE_SIZE),
            field=spec.name,
        )


def max_length(limit: int, message: str) -> Check:
    def check(spec: FieldSpec, value: str) -> None:
        if len(value) > limit:
            raise ValidationError(message, field=spec.name)
    return check


def min_length(limit: int, message: str) -> Check:
    def check(spec: FieldSpec, value: str) -> None:
        if len(value) < limit:
            raise ValidationError(message, field=spec.name)
    return check


def _as_int(spec: FieldSpec, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValidationError(
            ERROR_MESSAGES["not_numeric"].format(field=spec.name), field=spec.name
        ) from None


class RequestBuilder:
    """
    Accumulates validated fields for one operation

    Example:
        >>> request = (
        ...     RequestBuilder(Endpoint.GET_PRICING, {"country": "GB"})
        ...     .require(COUNTRY)
        ...     .build()
        ... )
    """

    def __init__(self, endpoint: Endpoint, options: Any = None) -> None:
        self.endpoint = endpoint
        self.options = read_options(options)
        self._fields: List[Tuple[str, str]] = []
        self._encoded: Set[str] = set()

    def value(self, spec: FieldSpec) -> Optional[str]:
        """String value supplied for a field, None when absent or empty"""
        for key in spec.keys:
            value = stringify(self.options.get(key))
            if value is not None:
                return value
        return None

    def provided(self, *specs: FieldSpec) -> bool:
        """Whether any of the fields was supplied"""
        return any(self.value(spec) is not None for spec in specs)

    def require(self, *specs: FieldSpec) -> "RequestBuilder":
        for spec in specs:
            value = self.value(spec)
            if value is None:
                raise ValidationError(
                    ERROR_MESSAGES["required"].format(field=spec.name), field=spec.name
                )
            self.add(spec, value)
        return self

    def optional(self, *specs: FieldSpec) -> "RequestBuilder":
        for spec in specs:
            value = self.value(spec)
            if value is not None:
                self.add(spec, value)
        return self

    def add(self, spec: FieldSpec, value: str) -> "RequestBuilder":
        if spec.check is not None:
            spec.check(spec, value)
        if spec.url:
            value = quote(value, safe="")
            self._encoded.add(spec.name)
        self._fields.append((spec.name, value))
        return self

    def add_list(self, spec: FieldSpec, values: Iterable[str]) -> "RequestBuilder":
        for value in values:
            self.add(spec, value)
        return self

    def build(self) -> OperationRequest:
        return OperationRequest(
            endpoint=self.endpoint,
            fields=tuple(self._fields),
            encoded=frozenset(self._encoded),
        )


# Shared field declarations

FROM = FieldSpec("from", alias="from_")
TO = FieldSpec("to")
TEXT = FieldSpec("text")
COUNTRY = FieldSpec("country", check=country_code)
MSISDN = FieldSpec("msisdn")
PATTERN = FieldSpec("pattern")
SEARCH_PATTERN = FieldSpec("search_pattern")
INDEX = FieldSpec("index", check=page_index)
SIZE = FieldSpec("size", check=page_size)
DATE = FieldSpec("date")
