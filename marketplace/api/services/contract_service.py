# This file implements read services for contract endpoints.
# Access rules live here so routers stay transport-focused: only the two parties may read a contract.

from __future__ import annotations

from sqlalchemy import or_, select

from marketplace.api.db_access import DatabaseClient
from marketplace.api.error_handlers import APIError
from marketplace.api.schemas.contract_schemas import ContractOut
from marketplace.common.models import Contract, ContractStatus, is_storable_id


class ContractService:
    """Data retrieval and access checks for contract API routes."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def get_contract_for_profile(self, *, contract_id: int, profile_id: int) -> ContractOut:
        with self.db.session() as session:
            contract = session.get(Contract, contract_id) if is_storable_id(contract_id) else None
            if contract is None:
                raise APIError(
                    status_code=404,
                    error_code="CONTRACT_NOT_FOUND",
                    message="Contract not found",
                )
            result = ContractOut.model_validate(contract)

        if not result.has_party(profile_id):
            raise APIError(
                status_code=403,
                error_code="FORBIDDEN",
                message="Unauthorized access to the contract",
            )
        return result

    def list_active_contracts(self, *, profile_id: int) -> list[ContractOut]:
        query = (
            select(Contract)
            .where(
                Contract.status != ContractStatus.TERMINATED,
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
            )
            .order_by(Contract.id.asc())
        )
        with self.db.session() as session:
            return [ContractOut.model_validate(row) for row in session.scalars(query)]
