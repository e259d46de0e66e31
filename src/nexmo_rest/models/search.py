"""Message search option models"""

from typing import Optional

from pydantic import BaseModel, Field


class RecipientSearchOptions(BaseModel):
    """Messages sent to a recipient on a given day"""

    date: Optional[str] = Field(None, description="YYYY-MM-DD")
    to: Optional[str] = None


class RejectionSearchOptions(BaseModel):
    """Rejected messages on a given day, optionally for one recipient"""

    date: Optional[str] = Field(None, description="YYYY-MM-DD")
    to: Optional[str] = None
