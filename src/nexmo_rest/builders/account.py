"""Account requests: balance, pricing, settings, top-up and owned numbers"""

from typing import Any

from nexmo_rest.builders.schema import (
    COUNTRY,
    ERROR_MESSAGES,
    INDEX,
    MAX_SECRET_LENGTH,
    PATTERN,
    SEARCH_PATTERN,
    SIZE,
    FieldSpec,
    RequestBuilder,
    max_length,
)
from nexmo_rest.exceptions import ValidationError
from nexmo_rest.models.request import Endpoint, OperationRequest


NEW_SECRET = FieldSpec(
    "newSecret",
    alias="new_secret",
    check=max_length(MAX_SECRET_LENGTH, ERROR_MESSAGES["invalid_new_secret"]),
)
MO_CALLBACK_URL = FieldSpec("moCallBackUrl", alias="mo_callback_url", url=True)
DR_CALLBACK_URL = FieldSpec("drCallBackUrl", alias="dr_callback_url", url=True)
TRANSACTION_ID = FieldSpec("trx", alias="transaction_id")


def build_get_balance() -> OperationRequest:
    return RequestBuilder(Endpoint.GET_BALANCE).build()


def build_get_pricing(country: Any) -> OperationRequest:
    return RequestBuilder(Endpoint.GET_PRICING, {"country": country}).require(COUNTRY).build()


def build_update_settings(options: Any) -> OperationRequest:
    """
    Build an account settings update

    At least one of the new secret or the two callback URLs must be given.
    """
    builder = RequestBuilder(Endpoint.UPDATE_SETTINGS, options)
    settings = (NEW_SECRET, MO_CALLBACK_URL, DR_CALLBACK_URL)
    if not builder.provided(*settings):
        raise ValidationError(ERROR_MESSAGES["settings_required"], field="newSecret")
    return builder.optional(*settings).build()


def build_top_up(transaction_id: Any) -> OperationRequest:
    return (
        RequestBuilder(Endpoint.TOP_UP, {"trx": transaction_id})
        .require(TRANSACTION_ID)
        .build()
    )


def build_get_numbers(options: Any) -> OperationRequest:
    """Build a listing of owned numbers; one filter at least is required"""
    builder = RequestBuilder(Endpoint.GET_NUMBERS, options)
    filters = (INDEX, SIZE, PATTERN, SEARCH_PATTERN)
    if not builder.provided(*filters):
        raise ValidationError(ERROR_MESSAGES["filter_required"], field="index")
    return builder.optional(*filters).build()
