# This file defines job endpoints: the caller's unpaid jobs and paying a single job.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_job_service
from marketplace.api.identity import CurrentProfile
from marketplace.api.schemas.common import ErrorResponse, MessageResponse
from marketplace.api.schemas.job_schemas import UnpaidJobOut
from marketplace.api.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])
JobServiceDep = Annotated[JobService, Depends(get_job_service)]


@router.get("/unpaid", response_model=list[UnpaidJobOut])
def list_unpaid_jobs(
    profile: CurrentProfile,
    service: JobServiceDep,
) -> list[UnpaidJobOut]:
    return service.list_unpaid_jobs(profile_id=profile.id)


@router.post(
    "/{job_id}/pay",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def pay_job(
    job_id: int,
    profile: CurrentProfile,
    service: JobServiceDep,
) -> dict[str, str]:
    service.pay_job(job_id=job_id)
    return {"message": "Job payment successful"}
