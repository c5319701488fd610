from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    """Body of `POST /balances/deposit/{userId}`."""

    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
