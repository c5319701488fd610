# This file implements the admin reporting aggregations.
# Both reports sum the price of paid jobs whose payment date falls inside an inclusive window.
# Grouping and ordering run in SQL; ties are broken deterministically.

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Select, func, select

from marketplace.api.db_access import DatabaseClient
from marketplace.api.error_handlers import APIError
from marketplace.api.schemas.report_schemas import BestClientOut, BestProfessionOut
from marketplace.common.models import Contract, Job, Profile

NO_REPORT_DATA_MESSAGE = "No data found for the given time range"


def _paid_in_window(query: Select, *, start: datetime, end: datetime) -> Select:
    return query.where(
        Job.paid.is_(True),
        Job.payment_date >= start,
        Job.payment_date <= end,
    )


def _no_data() -> APIError:
    return APIError(status_code=404, error_code="NO_REPORT_DATA", message=NO_REPORT_DATA_MESSAGE)


class ReportService:
    """Aggregations behind `/admin/best-profession` and `/admin/best-clients`."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def best_profession(self, *, start: datetime, end: datetime) -> BestProfessionOut:
        total_earnings = func.sum(Job.price).label("total_earnings")
        query = (
            select(Profile.profession.label("profession"), total_earnings)
            .select_from(Job)
            .join(Contract, Contract.id == Job.contract_id)
            .join(Profile, Profile.id == Contract.contractor_id)
        )
        query = (
            _paid_in_window(query, start=start, end=end)
            .group_by(Profile.profession)
            .order_by(total_earnings.desc(), Profile.profession.asc())
            .limit(1)
        )

        with self.db.session() as session:
            row = session.execute(query).mappings().first()
        if row is None:
            raise _no_data()
        return BestProfessionOut.model_validate(dict(row))

    def best_clients(self, *, start: datetime, end: datetime, limit: int) -> list[BestClientOut]:
        total_paid = func.sum(Job.price).label("total_paid")
        query = (
            select(
                Profile.id.label("id"),
                Profile.first_name.label("first_name"),
                Profile.last_name.label("last_name"),
                total_paid,
            )
            .select_from(Job)
            .join(Contract, Contract.id == Job.contract_id)
            .join(Profile, Profile.id == Contract.client_id)
        )
        query = (
            _paid_in_window(query, start=start, end=end)
            .group_by(Profile.id, Profile.first_name, Profile.last_name)
            .order_by(total_paid.desc(), Profile.id.asc())
            .limit(limit)
        )

        with self.db.session() as session:
            rows = session.execute(query).mappings().all()
        if not rows:
            raise _no_data()
        return [BestClientOut.model_validate(dict(row)) for row in rows]
