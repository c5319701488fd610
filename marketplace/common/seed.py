"""
Demo dataset for local runs and API tests.
`seed_database` recreates the schema and loads the same rows every time, so ids are stable.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from marketplace.common.models import Base, Contract, ContractStatus, Job, Profile, ProfileType

logger = logging.getLogger(__name__)


def _paid_at(day: int, hour: int = 19) -> datetime:
    return datetime(2020, 8, day, hour, 11, 26, 737000, tzinfo=UTC)


DEMO_PROFILES: tuple[dict[str, Any], ...] = (
    {"id": 1, "first_name": "Harry", "last_name": "Potter", "profession": "Wizard",
     "balance": Decimal("1150"), "type": ProfileType.CLIENT},
    {"id": 2, "first_name": "Mr", "last_name": "Robot", "profession": "Hacker",
     "balance": Decimal("231.11"), "type": ProfileType.CLIENT},
    {"id": 3, "first_name": "John", "last_name": "Snow", "profession": "Knows nothing",
     "balance": Decimal("451.3"), "type": ProfileType.CLIENT},
    {"id": 4, "first_name": "Ash", "last_name": "Kethcum", "profession": "Pokemon master",
     "balance": Decimal("1.3"), "type": ProfileType.CLIENT},
    {"id": 5, "first_name": "John", "last_name": "Lenon", "profession": "Musician",
     "balance": Decimal("64"), "type": ProfileType.CONTRACTOR},
    {"id": 6, "first_name": "Linus", "last_name": "Torvalds", "profession": "Programmer",
     "balance": Decimal("1214"), "type": ProfileType.CONTRACTOR},
    {"id": 7, "first_name": "Alan", "last_name": "Turing", "profession": "Programmer",
     "balance": Decimal("22"), "type": ProfileType.CONTRACTOR},
    {"id": 8, "first_name": "Aragorn", "last_name": "II Elessar Telcontarion", "profession": "Fighter",
     "balance": Decimal("314"), "type": ProfileType.CONTRACTOR},
)

DEMO_CONTRACTS: tuple[dict[str, Any], ...] = (
    {"id": 1, "terms": "bla bla bla", "status": ContractStatus.TERMINATED, "client_id": 1, "contractor_id": 5},
    {"id": 2, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 1, "contractor_id": 6},
    {"id": 3, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 2, "contractor_id": 6},
    {"id": 4, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 2, "contractor_id": 7},
    {"id": 5, "terms": "bla bla bla", "status": ContractStatus.NEW, "client_id": 3, "contractor_id": 8},
    {"id": 6, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 3, "contractor_id": 7},
    {"id": 7, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 4, "contractor_id": 7},
    {"id": 8, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 4, "contractor_id": 6},
    {"id": 9, "terms": "bla bla bla", "status": ContractStatus.IN_PROGRESS, "client_id": 4, "contractor_id": 8},
)

DEMO_JOBS: tuple[dict[str, Any], ...] = (
    {"id": 1, "description": "work", "price": Decimal("200"), "contract_id": 1},
    {"id": 2, "description": "work", "price": Decimal("201"), "contract_id": 2},
    {"id": 3, "description": "work", "price": Decimal("202"), "contract_id": 3},
    {"id": 4, "description": "work", "price": Decimal("200"), "contract_id": 4},
    {"id": 5, "description": "work", "price": Decimal("200"), "contract_id": 7},
    {"id": 6, "description": "work", "price": Decimal("2020"), "contract_id": 7,
     "paid": True, "payment_date": _paid_at(15)},
    {"id": 7, "description": "work", "price": Decimal("200"), "contract_id": 2,
     "paid": True, "payment_date": _paid_at(15)},
    {"id": 8, "description": "work", "price": Decimal("200"), "contract_id": 3,
     "paid": True, "payment_date": _paid_at(16)},
    {"id": 9, "description": "work", "price": Decimal("200"), "contract_id": 1,
     "paid": True, "payment_date": _paid_at(17)},
    {"id": 10, "description": "work", "price": Decimal("200"), "contract_id": 5,
     "paid": True, "payment_date": _paid_at(17)},
    {"id": 11, "description": "work", "price": Decimal("21"), "contract_id": 1,
     "paid": True, "payment_date": _paid_at(10)},
    {"id": 12, "description": "work", "price": Decimal("21"), "contract_id": 2,
     "paid": True, "payment_date": _paid_at(15)},
    {"id": 13, "description": "work", "price": Decimal("121"), "contract_id": 3,
     "paid": True, "payment_date": _paid_at(15)},
    {"id": 14, "description": "work", "price": Decimal("121"), "contract_id": 3,
     "paid": True, "payment_date": _paid_at(14, hour=23)},
)


def load_demo_rows(session: Session) -> None:
    session.add_all(Profile(**row) for row in DEMO_PROFILES)
    session.flush()
    session.add_all(Contract(**row) for row in DEMO_CONTRACTS)
    session.flush()
    session.add_all(Job(**row) for row in DEMO_JOBS)


def seed_database(session: Session, *, reset: bool = True) -> dict[str, int]:
    """Recreate the schema on the session's bind and load the demo dataset.

    With `reset=False` existing tables are kept, and loading is skipped when
    profiles are already present; the returned counts are then all zero.
    """

    bind = session.get_bind()
    if reset:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)

    if not reset and session.scalar(select(func.count()).select_from(Profile)):
        logger.info("Demo dataset already present; nothing loaded")
        return {"profiles": 0, "contracts": 0, "jobs": 0}

    load_demo_rows(session)
    session.commit()

    counts = {
        "profiles": len(DEMO_PROFILES),
        "contracts": len(DEMO_CONTRACTS),
        "jobs": len(DEMO_JOBS),
    }
    logger.info("Seeded demo dataset: %s", counts)
    return counts
