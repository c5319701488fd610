"""
ORM models for profiles, contracts, and jobs.
The declarative metadata doubles as the schema definition used by `create_all`.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

MONEY = Numeric(12, 2)

# Largest value a 64-bit signed INTEGER primary key can hold.
MAX_ROW_ID = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def is_storable_id(value: int) -> bool:
    return 0 < value <= MAX_ROW_ID


class Base(DeclarativeBase):
    pass


class ProfileType(str, enum.Enum):
    CLIENT = "client"
    CONTRACTOR = "contractor"


class ContractStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    profession: Mapped[str] = mapped_column(String(255), nullable=False)
    balance: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    type: Mapped[ProfileType] = mapped_column(
        Enum(
            ProfileType,
            name="profile_type",
            native_enum=False,
            values_callable=_enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )

    contracts_as_client: Mapped[list[Contract]] = relationship(
        back_populates="client", foreign_keys="Contract.client_id"
    )
    contracts_as_contractor: Mapped[list[Contract]] = relationship(
        back_populates="contractor", foreign_keys="Contract.contractor_id"
    )

    def __repr__(self) -> str:
        return f"Profile(id={self.id!r}, type={self.type!r})"


class Contract(TimestampMixin, Base):
    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    terms: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ContractStatus] = mapped_column(
        Enum(
            ContractStatus,
            name="contract_status",
            native_enum=False,
            values_callable=_enum_values,
            validate_strings=True,
        ),
        nullable=False,
        default=ContractStatus.NEW,
        index=True,
    )
    client_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), nullable=False, index=True)

    client: Mapped[Profile] = relationship(
        back_populates="contracts_as_client", foreign_keys=[client_id]
    )
    contractor: Mapped[Profile] = relationship(
        back_populates="contracts_as_contractor", foreign_keys=[contractor_id]
    )
    jobs: Mapped[list[Job]] = relationship(back_populates="contract")

    def __repr__(self) -> str:
        return f"Contract(id={self.id!r}, status={self.status!r})"


class Job(TimestampMixin, Base):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    payment_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    contract_id: Mapped[int] = mapped_column(ForeignKey("contracts.id"), nullable=False, index=True)

    contract: Mapped[Contract] = relationship(back_populates="jobs")

    def __repr__(self) -> str:
        return f"Job(id={self.id!r}, paid={self.paid!r})"


MANAGED_TABLES: tuple[str, ...] = (
    Profile.__tablename__,
    Contract.__tablename__,
    Job.__tablename__,
)
