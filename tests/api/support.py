# This file provides shared helpers for API endpoint tests.
# It exists so tests run against an isolated in-memory SQLite database seeded with the demo dataset.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

from fastapi.testclient import TestClient

from marketplace.api.api_config import ApiConfig
from marketplace.api.app import app
from marketplace.api.db_access import DatabaseClient
from marketplace.api.dependencies import (
    get_balance_service,
    get_config,
    get_contract_service,
    get_database_client,
    get_job_service,
    get_report_service,
)
from marketplace.common.models import Job, Profile
from marketplace.common.seed import seed_database


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Marketplace API",
        "host": "0.0.0.0",
        "port": 3001,
        "environment": "test",
        "database_url": "sqlite://",
        "app_version": "0.1.0",
        "allowed_origins": [],
        "profile_header_name": "profile_id",
        "deposit_cap_ratio": Decimal("0.25"),
        "default_best_clients_limit": 2,
        "max_best_clients_limit": 100,
        "enable_request_logging": False,
        "create_schema_on_startup": True,
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_seeded_database() -> DatabaseClient:
    """Fresh in-memory database with the demo profiles, contracts, and jobs."""

    db = DatabaseClient(database_url="sqlite://")
    with db.session() as session:
        seed_database(session)
    return db


def as_profile(profile_id: int) -> dict[str, str]:
    return {"profile_id": str(profile_id)}


def profile_balance(db: DatabaseClient, profile_id: int) -> Decimal:
    with db.session() as session:
        profile = session.get(Profile, profile_id)
        assert profile is not None
        return profile.balance


def set_balance(db: DatabaseClient, profile_id: int, balance: Decimal) -> None:
    with db.transaction() as session:
        profile = session.get(Profile, profile_id)
        assert profile is not None
        profile.balance = balance


def load_job(db: DatabaseClient, job_id: int) -> Job:
    with db.session() as session:
        job = session.get(Job, job_id)
        assert job is not None
        return job


class FakeDBClient:
    """Simple fake DB dependency for readiness tests without a database."""

    def __init__(self, *, connected: bool = True, missing: list[str] | None = None) -> None:
        self._connected = connected
        self._missing = list(missing or [])

    def can_connect(self) -> bool:
        return self._connected

    def missing_tables(self) -> list[str]:
        return list(self._missing)

    def create_schema(self) -> None:
        return None


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    contract_service: Any | None = None,
    job_service: Any | None = None,
    balance_service: Any | None = None,
    report_service: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    resolved_db = db_client if db_client is not None else build_seeded_database()

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_database_client] = lambda: resolved_db
    if contract_service is not None:
        app.dependency_overrides[get_contract_service] = lambda: contract_service
    if job_service is not None:
        app.dependency_overrides[get_job_service] = lambda: job_service
    if balance_service is not None:
        app.dependency_overrides[get_balance_service] = lambda: balance_service
    if report_service is not None:
        app.dependency_overrides[get_report_service] = lambda: report_service

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
