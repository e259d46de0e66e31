"""Account option models"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountSettingsOptions(BaseModel):
    """Account settings update; at least one field must be set"""

    new_secret: Optional[str] = Field(None, alias="newSecret", description="Up to 8 characters")
    mo_callback_url: Optional[str] = Field(None, alias="moCallBackUrl")
    dr_callback_url: Optional[str] = Field(None, alias="drCallBackUrl")

    model_config = {"populate_by_name": True}


class NumberListOptions(BaseModel):
    """Filters for listing the numbers owned by the account"""

    index: Optional[int] = Field(None, description="Page index, starting at 1")
    size: Optional[int] = Field(None, description="Page size, 1 to 100")
    pattern: Optional[str] = None
    search_pattern: Optional[int] = Field(
        None, description="0 starts with, 1 anywhere, 2 ends with"
    )

    model_config = {"populate_by_name": True}
