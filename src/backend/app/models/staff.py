"""SQLAlchemy ORM models for people: Specialization, Employee."""

from datetime import date, datetime

from sqlalchemy import Date, ForeignKey, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.org import Base


class Specialization(Base):
    __tablename__ = "specializations"

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class Employee(Base):
    """A NULL department_id reads as "in Reserve", a NULL position_id as "Unemployed"."""

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    call_sign: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, server_default=text("''"), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    hire_date: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=text("now()"), nullable=False
    )
    department_id: Mapped[str | None] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    position_id: Mapped[str | None] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("positions.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    specialization_id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("specializations.id", ondelete="RESTRICT"),
        nullable=False,
    )
