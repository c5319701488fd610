# This file implements job listing and the job payment transfer.
# Payment locks the job row and both profile rows, then applies all four mutations in one transaction.
# Any rule violation raises before commit, so the caller never observes a partial transfer.

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.orm import contains_eager

from marketplace.api.db_access import DatabaseClient
from marketplace.api.error_handlers import APIError
from marketplace.api.schemas.job_schemas import UnpaidJobOut
from marketplace.common.models import Contract, ContractStatus, Job, Profile, is_storable_id, utc_now

logger = logging.getLogger(__name__)


class JobService:
    """Unpaid job listing and payment for job API routes."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_unpaid_jobs(self, *, profile_id: int) -> list[UnpaidJobOut]:
        query = (
            select(Job)
            .join(Job.contract)
            .options(contains_eager(Job.contract))
            .where(
                Job.paid.is_(False),
                Contract.status == ContractStatus.IN_PROGRESS,
                or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id),
            )
            .order_by(Job.id.asc())
        )
        with self.db.session() as session:
            return [UnpaidJobOut.model_validate(job) for job in session.scalars(query)]

    def pay_job(self, *, job_id: int) -> None:
        if not is_storable_id(job_id):
            raise APIError(status_code=404, error_code="JOB_NOT_FOUND", message="Job not found")

        with self.db.transaction() as session:
            job = session.scalars(select(Job).where(Job.id == job_id).with_for_update()).first()
            if job is None:
                raise APIError(status_code=404, error_code="JOB_NOT_FOUND", message="Job not found")
            if job.paid:
                logger.warning("Rejected payment for job %s: already paid", job_id)
                raise APIError(
                    status_code=400,
                    error_code="JOB_ALREADY_PAID",
                    message="Job is already paid",
                )

            contract = job.contract
            # Both parties are locked in ascending id order.
            profiles = session.scalars(
                select(Profile)
                .where(Profile.id.in_(sorted({contract.client_id, contract.contractor_id})))
                .order_by(Profile.id.asc())
                .with_for_update()
            ).all()
            by_id = {profile.id: profile for profile in profiles}
            client = by_id[contract.client_id]
            contractor = by_id[contract.contractor_id]

            if client.balance < job.price:
                logger.warning(
                    "Rejected payment for job %s: client %s balance %s below price %s",
                    job_id,
                    client.id,
                    client.balance,
                    job.price,
                )
                raise APIError(
                    status_code=400,
                    error_code="INSUFFICIENT_BALANCE",
                    message="Client balance is insufficient for payment",
                )

            job.paid = True
            job.payment_date = utc_now()
            client.balance -= job.price
            contractor.balance += job.price

        logger.info(
            "Paid job %s: %s moved from profile %s to profile %s",
            job_id,
            job.price,
            client.id,
            contractor.id,
        )
