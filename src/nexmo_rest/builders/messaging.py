"""SMS, text-to-speech and voice call requests"""

from typing import Any, Dict, Tuple

from nexmo_rest.builders.schema import (
    ERROR_MESSAGES,
    FROM,
    TEXT,
    TO,
    FieldSpec,
    RequestBuilder,
)
from nexmo_rest.exceptions import ValidationError
from nexmo_rest.models.messaging import MessageType
from nexmo_rest.models.request import Endpoint, OperationRequest


# Default WAP push validity, 48 hours in milliseconds
DEFAULT_WAP_VALIDITY = 172800000

TYPE = FieldSpec("type")
BODY = FieldSpec("body")
UDH = FieldSpec("udh")
TITLE = FieldSpec("title")
URL = FieldSpec("url", url=True)
VALIDITY = FieldSpec("validity")
VCARD = FieldSpec("vcard")
VCAL = FieldSpec("vcal")

# Required fields for each message type
MESSAGE_TYPE_FIELDS: Dict[MessageType, Tuple[FieldSpec, ...]] = {
    MessageType.TEXT: (TEXT,),
    MessageType.UNICODE: (TEXT,),
    MessageType.BINARY: (BODY, UDH),
    MessageType.WAPPUSH: (TITLE, URL),
    MessageType.VCAL: (VCAL,),
    MessageType.VCARD: (VCARD,),
}

SMS_PASSTHROUGH = (
    FieldSpec("status-report-req", alias="status_report_req"),
    FieldSpec("client-ref", alias="client_ref"),
    FieldSpec("network-code", alias="network_code"),
    FieldSpec("ttl"),
    FieldSpec("message-class", alias="message_class"),
)

TTS_OPTIONAL = (
    FROM,
    FieldSpec("lg"),
    FieldSpec("voice"),
    FieldSpec("repeat"),
    FieldSpec("machine_detection"),
    FieldSpec("machine_timeout"),
    FieldSpec("callback"),
    FieldSpec("callback_method"),
)

CALL_OPTIONAL = (
    FROM,
    FieldSpec("answer_method"),
    FieldSpec("status_url"),
    FieldSpec("status_method"),
    FieldSpec("machine_detection"),
    FieldSpec("machine_timeout"),
    FieldSpec("error_url"),
    FieldSpec("error_method"),
)


def build_send_message(options: Any) -> OperationRequest:
    """
    Build an SMS request

    ``type`` selects which payload fields are required: ``text`` for text
    and unicode, ``body`` and ``udh`` for binary, ``title`` and ``url`` for
    WAP push, ``vcal`` or ``vcard`` for calendar and contact messages.

    Raises:
        ValidationError: On a missing field or an unknown message type
    """
    builder = RequestBuilder(Endpoint.SEND_MESSAGE, options)
    builder.require(FROM, TO)

    raw_type = builder.value(TYPE)
    if raw_type is None:
        raise ValidationError(ERROR_MESSAGES["required"].format(field="type"), field="type")
    try:
        message_type = MessageType(raw_type)
    except ValueError:
        raise ValidationError(
            ERROR_MESSAGES["invalid_message_type"],
            field="type",
            details={"type": raw_type},
        ) from None
    builder.add(TYPE, message_type.value)

    builder.require(*MESSAGE_TYPE_FIELDS[message_type])
    if message_type is MessageType.WAPPUSH:
        builder.add(VALIDITY, builder.value(VALIDITY) or str(DEFAULT_WAP_VALIDITY))

    return builder.optional(*SMS_PASSTHROUGH).build()


def build_tts_message(options: Any) -> OperationRequest:
    """Build a text-to-speech request"""
    return (
        RequestBuilder(Endpoint.SEND_TTS, options)
        .require(TO, TEXT)
        .optional(*TTS_OPTIONAL)
        .build()
    )


def build_call(options: Any) -> OperationRequest:
    """Build an outbound call request driven by ``answer_url``"""
    return (
        RequestBuilder(Endpoint.CALL, options)
        .require(TO, FieldSpec("answer_url"))
        .optional(*CALL_OPTIONAL)
        .build()
    )
