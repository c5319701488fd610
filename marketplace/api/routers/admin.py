# This file defines the admin reporting endpoints.
# The router validates the date window and limit; aggregation happens in the report service.
# Any resolved profile may call these routes; there is no separate admin role.

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from marketplace.api.date_bounds import parse_window
from marketplace.api.dependencies import ConfigDep, get_report_service
from marketplace.api.error_handlers import APIError
from marketplace.api.identity import CurrentProfile
from marketplace.api.schemas.common import ErrorResponse
from marketplace.api.schemas.report_schemas import BestClientOut, BestProfessionOut
from marketplace.api.services.report_service import ReportService

router = APIRouter(prefix="/admin", tags=["admin"])
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]

_REPORT_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _resolve_window(start: str, end: str) -> tuple[datetime, datetime]:
    try:
        start_ts, end_ts = parse_window(start, end)
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc

    if start_ts > end_ts:
        raise APIError(
            status_code=400,
            error_code="INVALID_TIME_WINDOW",
            message="start must be less than or equal to end.",
        )
    return start_ts, end_ts


@router.get("/best-profession", response_model=BestProfessionOut, responses=_REPORT_ERRORS)
def best_profession(
    profile: CurrentProfile,
    service: ReportServiceDep,
    start: str = Query(..., description="ISO-8601 date or datetime, inclusive."),
    end: str = Query(..., description="ISO-8601 date or datetime, inclusive."),
) -> BestProfessionOut:
    start_ts, end_ts = _resolve_window(start, end)
    return service.best_profession(start=start_ts, end=end_ts)


@router.get("/best-clients", response_model=list[BestClientOut], responses=_REPORT_ERRORS)
def best_clients(
    profile: CurrentProfile,
    service: ReportServiceDep,
    config: ConfigDep,
    start: str = Query(..., description="ISO-8601 date or datetime, inclusive."),
    end: str = Query(..., description="ISO-8601 date or datetime, inclusive."),
    limit: int | None = Query(default=None, ge=1),
) -> list[BestClientOut]:
    start_ts, end_ts = _resolve_window(start, end)

    effective_limit = limit or config.default_best_clients_limit
    if effective_limit > config.max_best_clients_limit:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=f"limit must be less than or equal to {config.max_best_clients_limit}.",
        )
    return service.best_clients(start=start_ts, end=end_ts, limit=effective_limit)
