"""
Request builders

One function per operation turns caller options into a validated
``OperationRequest``.
"""

from nexmo_rest.builders.schema import (
    ERROR_MESSAGES,
    MAX_MESSAGE_IDS,
    FieldSpec,
    RequestBuilder,
)
from nexmo_rest.builders.messaging import (
    DEFAULT_WAP_VALIDITY,
    build_send_message,
    build_tts_message,
    build_call,
)
from nexmo_rest.builders.account import (
    build_get_balance,
    build_get_pricing,
    build_update_settings,
    build_top_up,
    build_get_numbers,
)
from nexmo_rest.builders.numbers import (
    build_search_numbers,
    build_buy_number,
    build_cancel_number,
    build_update_number,
)
from nexmo_rest.builders.search import (
    build_search_message,
    build_search_messages_by_ids,
    build_search_messages_by_recipient,
    build_search_rejections,
)

__all__ = [
    "ERROR_MESSAGES",
    "MAX_MESSAGE_IDS",
    "DEFAULT_WAP_VALIDITY",
    "FieldSpec",
    "RequestBuilder",
    "build_send_message",
    "build_tts_message",
    "build_call",
    "build_get_balance",
    "build_get_pricing",
    "build_update_settings",
    "build_top_up",
    "build_get_numbers",
    "build_search_numbers",
    "build_buy_number",
    "build_cancel_number",
    "build_update_number",
    "build_search_message",
    "build_search_messages_by_ids",
    "build_search_messages_by_recipient",
    "build_search_rejections",
]
