"""Repository for equipment records."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.inventory import Equipment


class EquipmentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_equipment(self, equipment_id: str) -> Equipment:
        result = await self.session.execute(select(Equipment).where(Equipment.id == equipment_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Equipment with ID {equipment_id} not found")
        return row

    async def list_equipment(
        self, department_id: str | None = None, include_unassigned: bool = False
    ) -> list[Equipment]:
        stmt = select(Equipment).order_by(Equipment.name)
        if department_id is not None:
            if include_unassigned:
                stmt = stmt.where(
                    or_(Equipment.department_id == department_id, Equipment.department_id.is_(None))
                )
            else:
                stmt = stmt.where(Equipment.department_id == department_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_equipment(
        self,
        name: str,
        category_id: str,
        purchase_date: datetime,
        description: str = "",
        serial_number: str | None = None,
        status: str = "Used",
        measurement: str = "Unit",
        amount: Decimal = Decimal("1"),
        department_id: str | None = None,
        responsible_employee_id: str | None = None,
    ) -> Equipment:
        item = Equipment(
            name=name,
            category_id=category_id,
            purchase_date=purchase_date,
            description=description,
            serial_number=serial_number,
            status=status,
            measurement=measurement,
            amount=amount,
            department_id=department_id,
            responsible_employee_id=responsible_employee_id,
        )
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update_equipment(self, item: Equipment, **fields) -> Equipment:
        for name, value in fields.items():
            setattr(item, name, value)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def move_equipment(self, item: Equipment, department_id: str) -> Equipment:
        item.department_id = department_id
        await self.session.flush()
        return item

    async def delete_equipment(self, item: Equipment) -> None:
        await self.session.delete(item)
        await self.session.flush()

    async def reassign_department(self, from_dept_id: str, to_dept_id: str) -> int:
        result = await self.session.execute(
            update(Equipment)
            .where(Equipment.department_id == from_dept_id)
            .values(department_id=to_dept_id)
        )
        return result.rowcount

    async def count_by_category(self, category_id: str) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Equipment).where(Equipment.category_id == category_id)
        )
        return result.scalar_one()
