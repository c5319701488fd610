# This file provides dependency factories for FastAPI routes and middleware.
# The database client is created once per process; services are cheap and built per request on top of it.
# Tests override `get_config` and `get_database_client` and every service follows.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from marketplace.api.api_config import ApiConfig, get_api_config
from marketplace.api.db_access import DatabaseClient
from marketplace.api.services.balance_service import BalanceService
from marketplace.api.services.contract_service import ContractService
from marketplace.api.services.job_service import JobService
from marketplace.api.services.profile_service import ProfileService
from marketplace.api.services.report_service import ReportService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


def get_config() -> ApiConfig:
    return get_api_config()


ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def get_profile_service(db: DBDep) -> ProfileService:
    return ProfileService(db=db)


def get_contract_service(db: DBDep) -> ContractService:
    return ContractService(db=db)


def get_job_service(db: DBDep) -> JobService:
    return JobService(db=db)


def get_balance_service(config: ConfigDep, db: DBDep) -> BalanceService:
    return BalanceService(config=config, db=db)


def get_report_service(db: DBDep) -> ReportService:
    return ReportService(db=db)
