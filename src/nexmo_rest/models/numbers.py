"""Inbound number option models"""

from typing import Optional

from pydantic import BaseModel, Field


class NumberSearchOptions(BaseModel):
    """Search for numbers available to buy"""

    country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")
    pattern: Optional[str] = None
    search_pattern: Optional[int] = None
    features: Optional[str] = Field(None, description="e.g. SMS or VOICE,SMS")
    index: Optional[int] = None
    size: Optional[int] = None

    model_config = {"populate_by_name": True}


class NumberOptions(BaseModel):
    """Identifies a number to buy or cancel"""

    country: Optional[str] = None
    msisdn: Optional[str] = None

    model_config = {"populate_by_name": True}


class NumberUpdateOptions(BaseModel):
    """Routing and callback update for an owned number"""

    country: Optional[str] = None
    msisdn: Optional[str] = None
    mo_http_url: Optional[str] = Field(None, alias="moHttpUrl")
    mo_smpp_sys_type: Optional[str] = Field(None, alias="moSmppSysType")
    voice_callback_type: Optional[str] = Field(None, alias="voiceCallbackType")
    voice_callback_value: Optional[str] = Field(None, alias="voiceCallbackValue")
    voice_status_callback: Optional[str] = Field(None, alias="voiceStatusCallback")

    model_config = {"populate_by_name": True}
