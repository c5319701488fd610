# This file defines contract endpoints for the calling profile.
# Access checks and filtering live in the contract service; the router only wires inputs to it.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_contract_service
from marketplace.api.identity import CurrentProfile
from marketplace.api.schemas.common import ErrorResponse
from marketplace.api.schemas.contract_schemas import ContractOut
from marketplace.api.services.contract_service import ContractService

router = APIRouter(prefix="/contracts", tags=["contracts"])
ContractServiceDep = Annotated[ContractService, Depends(get_contract_service)]


@router.get(
    "/{contract_id}",
    response_model=ContractOut,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_contract(
    contract_id: int,
    profile: CurrentProfile,
    service: ContractServiceDep,
) -> ContractOut:
    return service.get_contract_for_profile(contract_id=contract_id, profile_id=profile.id)


@router.get("", response_model=list[ContractOut])
def list_contracts(
    profile: CurrentProfile,
    service: ContractServiceDep,
) -> list[ContractOut]:
    return service.list_active_contracts(profile_id=profile.id)
