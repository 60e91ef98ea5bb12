"""Equipment service — equipment records and two-stage removal (to Reserve, then gone).

Equipment with no department belongs to Reserve, and create/update fill a
missing department with it.
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, InvalidOperationError
from app.repositories.equipment_repo import EquipmentRepository
from app.schemas.inventory import EquipmentResponse
from app.services.sentinel_service import SentinelResolver

log = logging.getLogger(__name__)

_DANGLING_REFERENCE = (
    "Equipment references a department, category or employee that does not exist"
)


class EquipmentService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = EquipmentRepository(session)
        self.sentinels = SentinelResolver(session)
        self.session = session

    async def list_equipment(self, department_id: str | None = None) -> list[EquipmentResponse]:
        include_unassigned = False
        if department_id is not None:
            reserve = await self.sentinels.get_reserve_department()
            include_unassigned = reserve is not None and reserve.id == department_id

        rows = await self.repo.list_equipment(
            department_id=department_id, include_unassigned=include_unassigned
        )
        items = [EquipmentResponse.model_validate(q) for q in rows]
        if include_unassigned:
            items = [q.model_copy(update={"department_id": department_id}) for q in items]
        return items

    async def get_equipment(self, equipment_id: str) -> EquipmentResponse:
        item = await self.repo.get_equipment(equipment_id)
        return EquipmentResponse.model_validate(item)

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
    ) -> EquipmentResponse:
        try:
            async with self.session.begin():
                if department_id is None:
                    department_id = (await self.sentinels.get_or_create_reserve_department()).id
                item = await self.repo.create_equipment(
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
        except IntegrityError as exc:
            raise ConflictError(_DANGLING_REFERENCE) from exc
        return EquipmentResponse.model_validate(item)

    async def update_equipment(
        self,
        equipment_id: str,
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
    ) -> EquipmentResponse:
        try:
            async with self.session.begin():
                item = await self.repo.get_equipment(equipment_id)
                if department_id is None:
                    department_id = (await self.sentinels.get_or_create_reserve_department()).id
                item = await self.repo.update_equipment(
                    item,
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
        except IntegrityError as exc:
            raise ConflictError(_DANGLING_REFERENCE) from exc
        return EquipmentResponse.model_validate(item)

    async def delete_equipment(
        self, equipment_id: str, department_id: str | None = None
    ) -> EquipmentResponse | None:
        """Move the item to Reserve, or delete it if it is already there.

        Returns the moved item, or None when the row was deleted.
        """
        try:
            async with self.session.begin():
                item = await self.repo.get_equipment(equipment_id)
                reserve = await self.sentinels.get_or_create_reserve_department()
                current = item.department_id or reserve.id
                if department_id is not None and current != department_id:
                    raise InvalidOperationError(
                        f"Equipment {equipment_id} does not belong to department {department_id}"
                    )

                if current == reserve.id:
                    await self.repo.delete_equipment(item)
                    moved = None
                else:
                    moved = await self.repo.move_equipment(item, department_id=reserve.id)
        except IntegrityError as exc:
            log.warning("Equipment %s delete rolled back: %s", equipment_id, exc.orig)
            raise ConflictError("Cannot delete equipment with linked records") from exc

        if moved is None:
            log.info("Deleted equipment %s", equipment_id)
            return None
        log.info("Moved equipment %s to Reserve", equipment_id)
        return EquipmentResponse.model_validate(moved)
