from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from marketplace.api.schemas.common import Money
from marketplace.common.models import ProfileType


class ProfileOut(BaseModel):
    """Caller identity resolved from the profile header."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    profession: str
    balance: Money
    type: ProfileType
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")