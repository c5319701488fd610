from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_balance_service
from marketplace.api.identity import CurrentProfile
from marketplace.api.schemas.balance_schemas import DepositRequest
from marketplace.api.schemas.common import ErrorResponse, MessageResponse
from marketplace.api.services.balance_service import BalanceService

router = APIRouter(prefix="/balances", tags=["balances"])
BalanceServiceDep = Annotated[BalanceService, Depends(get_balance_service)]


@router.post(
    "/deposit/{user_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def deposit(
    user_id: int,
    payload: DepositRequest,
    profile: CurrentProfile,
    service: BalanceServiceDep,
) -> dict[str, str]:
    service.deposit(user_id=user_id, amount=payload.amount)
    return {"message": "Deposit successful"}
