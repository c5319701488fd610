# This file wraps database access so API services share one explicit persistence context.
# It exists to keep engine, session, and transaction handling out of router and service code.
# Read paths use short-lived sessions; write paths run inside `transaction()` so they commit or roll back as a unit.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.common.db import create_db_engine, create_session_factory, test_connection
from marketplace.common.models import MANAGED_TABLES, Base


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        if not database_url:
            raise ValueError("database_url is required.")
        self._engine: Engine = create_db_engine(database_url)
        self._session_factory = create_session_factory(self._engine)

    def can_connect(self) -> bool:
        return test_connection(self._engine)

    def table_exists(self, table_name: str) -> bool:
        try:
            return inspect(self._engine).has_table(table_name)
        except SQLAlchemyError:
            return False

    def missing_tables(self) -> list[str]:
        return [name for name in MANAGED_TABLES if not self.table_exists(name)]

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self._engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session for reads; nothing is committed."""

        with self._session_factory() as session:
            yield session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session inside BEGIN; commits on exit, rolls back on any exception."""

        with self._session_factory() as session, session.begin():
            yield session
