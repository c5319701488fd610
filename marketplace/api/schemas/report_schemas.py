# This file defines response schemas for the admin reporting endpoints.
# Report rows are aggregates, not ORM entities, so they are built from mapping rows.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from marketplace.api.schemas.common import Money


class BestProfessionOut(BaseModel):
    profession: str
    total_earnings: Money


class BestClientOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    total_paid: Money
