"""Sent message and rejection search requests"""

from collections.abc import Iterable
from typing import Any, List, Optional

from nexmo_rest.builders.schema import (
    DATE,
    ERROR_MESSAGES,
    MAX_MESSAGE_IDS,
    TO,
    FieldSpec,
    RequestBuilder,
    stringify,
)
from nexmo_rest.exceptions import ValidationError
from nexmo_rest.models.request import Endpoint, OperationRequest


MESSAGE_ID = FieldSpec("id", alias="message_id")
MESSAGE_IDS = FieldSpec("ids")


def build_search_message(message_id: Any) -> OperationRequest:
    return (
        RequestBuilder(Endpoint.SEARCH_MESSAGE, {"id": message_id})
        .require(MESSAGE_ID)
        .build()
    )


def build_search_messages_by_ids(message_ids: Any) -> OperationRequest:
    """
    Build a lookup of up to ten messages, sent as one ``ids`` parameter each

    Raises:
        ValidationError: When no id is given, an id is empty, or more than
            ten ids are given
    """
    ids = _id_list(message_ids)
    if not ids or any(value is None for value in ids):
        raise ValidationError(ERROR_MESSAGES["invalid_message_ids"], field=MESSAGE_IDS.name)
    if len(ids) > MAX_MESSAGE_IDS:
        raise ValidationError(
            ERROR_MESSAGES["too_many_message_ids"],
            field=MESSAGE_IDS.name,
            details={"count": len(ids), "limit": MAX_MESSAGE_IDS},
        )
    return RequestBuilder(Endpoint.SEARCH_MESSAGES).add_list(MESSAGE_IDS, ids).build()


def build_search_messages_by_recipient(options: Any) -> OperationRequest:
    return RequestBuilder(Endpoint.SEARCH_MESSAGES, options).require(DATE, TO).build()


def build_search_rejections(options: Any) -> OperationRequest:
    return (
        RequestBuilder(Endpoint.SEARCH_REJECTIONS, options)
        .require(DATE)
        .optional(TO)
        .build()
    )


def _id_list(message_ids: Any) -> List[Any]:
    if message_ids is None:
        return []
    if isinstance(message_ids, (str, bytes, bytearray)) or not isinstance(message_ids, Iterable):
        message_ids = [message_ids]
    return [_message_id(value) for value in message_ids]


def _message_id(value: Any) -> Optional[str]:
    """Wire form of one id; bytes must be UTF-8, anything undecodable is absent"""
    if isinstance(value, (bytes, bytearray)):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return stringify(value)
