# This file defines response schemas for contract endpoints.
# Field aliases keep the wire names (`ClientId`, `createdAt`) while attributes stay snake_case.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from marketplace.common.models import ContractStatus


class ContractOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    terms: str
    status: ContractStatus
    client_id: int = Field(alias="ClientId")
    contractor_id: int = Field(alias="ContractorId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    def has_party(self, profile_id: int) -> bool:
        return profile_id in (self.client_id, self.contractor_id)
