# This file defines response schemas for job listing and payment endpoints.
# Unpaid job rows embed their parent contract as a plain nested record.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from marketplace.api.schemas.common import Money
from marketplace.api.schemas.contract_schemas import ContractOut


class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    description: str
    price: Money
    paid: bool
    payment_date: datetime | None = Field(default=None, alias="paymentDate")
    contract_id: int = Field(alias="ContractId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class UnpaidJobOut(JobOut):
    contract: ContractOut = Field(alias="Contract")
