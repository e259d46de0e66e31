"""Messaging and voice option models"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class MessageType(str, Enum):
    """SMS message types"""
    TEXT = "text"
    UNICODE = "unicode"
    BINARY = "binary"
    WAPPUSH = "wappush"
    VCAL = "vcal"
    VCARD = "vcard"


class SmsOptions(BaseModel):
    """Options for sending an SMS"""

    from_: Optional[str] = Field(None, alias="from", description="Sender address")
    to: Optional[str] = Field(None, description="Recipient MSISDN")
    type: Optional[Union[MessageType, str]] = Field(None, description="Message type")
    text: Optional[str] = Field(None, description="Body for text and unicode messages")
    body: Optional[str] = Field(None, description="Hex encoded binary payload")
    udh: Optional[str] = Field(None, description="Hex encoded user data header")
    title: Optional[str] = Field(None, description="WAP push title")
    url: Optional[str] = Field(None, description="WAP push URL")
    validity: Optional[int] = Field(None, description="WAP push validity in milliseconds")
    vcard: Optional[str] = Field(None, description="vCard payload")
    vcal: Optional[str] = Field(None, description="vCal payload")
    status_report_req: Optional[Union[bool, int]] = Field(
        None, alias="status-report-req", description="Request a delivery receipt"
    )
    client_ref: Optional[str] = Field(None, alias="client-ref", description="Client reference")
    network_code: Optional[str] = Field(None, alias="network-code", description="Network code")
    ttl: Optional[int] = Field(None, description="Message time to live in milliseconds")
    message_class: Optional[int] = Field(None, alias="message-class", description="Message class")

    model_config = {"populate_by_name": True}


class TtsOptions(BaseModel):
    """Options for a text-to-speech message"""

    to: Optional[str] = None
    text: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    lg: Optional[str] = Field(None, description="Language and locale, e.g. en-us")
    voice: Optional[str] = Field(None, description="male or female")
    repeat: Optional[int] = None
    machine_detection: Optional[str] = None
    machine_timeout: Optional[int] = None
    callback: Optional[str] = None
    callback_method: Optional[str] = None

    model_config = {"populate_by_name": True}


class CallOptions(BaseModel):
    """Options for an outbound voice call"""

    to: Optional[str] = None
    answer_url: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    answer_method: Optional[str] = None
    status_url: Optional[str] = None
    status_method: Optional[str] = None
    machine_detection: Optional[str] = None
    machine_timeout: Optional[int] = None
    error_url: Optional[str] = None
    error_method: Optional[str] = None

    model_config = {"populate_by_name": True}
