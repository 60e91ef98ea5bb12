"""SQLAlchemy ORM models for equipment: EquipmentCategory, Equipment."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.org import Base


class EquipmentCategory(Base):
    __tablename__ = "equipment_categories"

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, server_default=text("''"), nullable=False)


class Equipment(Base):
    """A NULL department_id means the item sits in the Reserve warehouse."""

    __tablename__ = "equipment"

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, server_default=text("''"), nullable=False)
    serial_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_date: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(Text, server_default=text("'Used'"), nullable=False)
    measurement: Mapped[str] = mapped_column(Text, server_default=text("'Unit'"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), server_default=text("1"), nullable=False
    )
    department_id: Mapped[str | None] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category_id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("equipment_categories.id", ondelete="RESTRICT"),
        nullable=False,
    )
    responsible_employee_id: Mapped[str | None] = mapped_column(
        PG_UUID(as_uuid=False),
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True,
    )
