# This file resolves the calling profile from the request header.
# Every business route depends on `get_current_profile`; unknown callers are rejected before handler logic runs.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from marketplace.api.dependencies import ConfigDep, get_profile_service
from marketplace.api.error_handlers import APIError
from marketplace.api.schemas.profile_schemas import ProfileOut
from marketplace.api.services.profile_service import ProfileService


def _unauthorized() -> APIError:
    return APIError(status_code=401, error_code="UNAUTHORIZED", message="Unauthorized")


def get_current_profile(
    request: Request,
    config: ConfigDep,
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileOut:
    raw_id = request.headers.get(config.profile_header_name)
    if raw_id is None or not raw_id.strip().isdigit():
        raise _unauthorized()

    profile = service.get_profile(int(raw_id.strip()))
    if profile is None:
        raise _unauthorized()

    request.state.profile = profile
    return profile


CurrentProfile = Annotated[ProfileOut, Depends(get_current_profile)]
