# This file implements client balance deposits.
# A deposit is capped at a configured share of the client's current balance (25% by default).

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select

from marketplace.api.api_config import ApiConfig
from marketplace.api.db_access import DatabaseClient
from marketplace.api.error_handlers import APIError
from marketplace.common.models import Profile, ProfileType, is_storable_id

logger = logging.getLogger(__name__)


class BalanceService:
    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db

    def deposit_cap(self, balance: Decimal) -> Decimal:
        return balance * self.config.deposit_cap_ratio

    def cap_percent_label(self) -> str:
        return f"{(self.config.deposit_cap_ratio * 100).normalize():f}"

    def deposit(self, *, user_id: int, amount: Decimal) -> Decimal:
        """Add `amount` to a client's balance and return the new balance."""

        if not is_storable_id(user_id):
            raise APIError(status_code=404, error_code="CLIENT_NOT_FOUND", message="Client not found")

        with self.db.transaction() as session:
            client = session.scalars(
                select(Profile)
                .where(Profile.id == user_id, Profile.type == ProfileType.CLIENT)
                .with_for_update()
            ).first()
            if client is None:
                raise APIError(status_code=404, error_code="CLIENT_NOT_FOUND", message="Client not found")

            cap = self.deposit_cap(client.balance)
            if amount > cap:
                logger.warning(
                    "Rejected deposit of %s for client %s: cap is %s", amount, user_id, cap
                )
                raise APIError(
                    status_code=400,
                    error_code="DEPOSIT_LIMIT_EXCEEDED",
                    message=(
                        f"Deposited amount exceeds {self.cap_percent_label()}% of the total jobs to pay"
                    ),
                    details={"max_deposit": cap},
                )

            client.balance += amount
            new_balance = client.balance

        logger.info("Deposited %s for client %s", amount, user_id)
        return new_balance
