"""SQLAlchemy ORM models for the org structure: Department, Position, DepartmentPosition.

Exactly one department carries is_reserve and exactly one position carries
is_unemployed. The partial unique indexes below enforce "at most one"; the
sentinel resolver supplies "at least one".
"""

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class Department(Base):
    __tablename__ = "departments"
    __table_args__ = (
        Index(
            "uq_departments_reserve",
            "is_reserve",
            unique=True,
            postgresql_where=text("is_reserve"),
        ),
    )

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_reserve: Mapped[bool] = mapped_column(
        Boolean, server_default=text("false"), default=False, nullable=False
    )


class Position(Base):
    __tablename__ = "positions"
    __table_args__ = (
        Index(
            "uq_positions_unemployed",
            "is_unemployed",
            unique=True,
            postgresql_where=text("is_unemployed"),
        ),
    )

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    is_unemployed: Mapped[bool] = mapped_column(
        Boolean, server_default=text("false"), default=False, nullable=False
    )


class DepartmentPosition(Base):
    """Availability link: the position may be held by employees of the department."""

    __tablename__ = "department_positions"

    department_id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("departments.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    position_id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("positions.id", ondelete="RESTRICT"),
        primary_key=True,
    )

    department: Mapped[Department] = relationship("Department")
    position: Mapped[Position] = relationship("Position")
