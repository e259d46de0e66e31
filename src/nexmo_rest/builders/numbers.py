"""Inbound number requests: search, buy, cancel and update"""

from typing import Any, Optional

from nexmo_rest.builders.schema import (
    COUNTRY,
    ERROR_MESSAGES,
    INDEX,
    MSISDN,
    PATTERN,
    SEARCH_PATTERN,
    SIZE,
    FieldSpec,
    RequestBuilder,
    min_length,
)
from nexmo_rest.models.request import Endpoint, OperationRequest


FEATURES = FieldSpec("features")

UPDATE_OPTIONAL = (
    FieldSpec("moHttpUrl", alias="mo_http_url", url=True),
    FieldSpec("moSmppSysType", alias="mo_smpp_sys_type"),
    FieldSpec("voiceCallbackType", alias="voice_callback_type"),
    FieldSpec("voiceCallbackValue", alias="voice_callback_value"),
    FieldSpec("voiceStatusCallback", alias="voice_status_callback"),
)


def build_search_numbers(options: Any) -> OperationRequest:
    return (
        RequestBuilder(Endpoint.SEARCH_NUMBERS, options)
        .require(COUNTRY)
        .optional(PATTERN, SEARCH_PATTERN, FEATURES, INDEX, SIZE)
        .build()
    )


def build_buy_number(options: Any, msisdn_min_length: Optional[int] = None) -> OperationRequest:
    return _number_request(Endpoint.BUY_NUMBER, options, msisdn_min_length)


def build_cancel_number(options: Any, msisdn_min_length: Optional[int] = None) -> OperationRequest:
    return _number_request(Endpoint.CANCEL_NUMBER, options, msisdn_min_length)


def build_update_number(options: Any) -> OperationRequest:
    return (
        RequestBuilder(Endpoint.UPDATE_NUMBER, options)
        .require(COUNTRY, MSISDN)
        .optional(*UPDATE_OPTIONAL)
        .build()
    )


def _number_request(
    endpoint: Endpoint, options: Any, msisdn_min_length: Optional[int]
) -> OperationRequest:
    """Buy and cancel share a schema; the MSISDN length check is opt-in"""
    msisdn = MSISDN
    if msisdn_min_length:
        msisdn = FieldSpec(
            MSISDN.name,
            check=min_length(msisdn_min_length, ERROR_MESSAGES["invalid_msisdn"]),
        )
    return RequestBuilder(endpoint, options).require(COUNTRY, msisdn).build()
