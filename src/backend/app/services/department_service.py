"""Department service — department CRUD and the deletion cascade.

Deleting a department never deletes the people or equipment in it:
  employees  → Reserve department, Unemployed position
  equipment  → Reserve department
  availability links (department_positions) → removed
  department row → removed

The whole cascade is one transaction. A foreign key the cascade did not
anticipate surfaces as IntegrityError at flush/commit; the transaction is
rolled back and the caller gets a ConflictError with nothing changed.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, InvalidOperationError
from app.repositories.department_position_repo import DepartmentPositionRepository
from app.repositories.department_repo import DepartmentRepository
from app.repositories.employee_repo import EmployeeRepository
from app.repositories.equipment_repo import EquipmentRepository
from app.repositories.position_repo import PositionRepository
from app.schemas.inventory import EquipmentResponse
from app.schemas.org import DepartmentDetailResponse, DepartmentResponse, PositionResponse
from app.schemas.staff import EmployeeResponse
from app.services.sentinel_service import SentinelResolver

log = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = DepartmentRepository(session)
        self.position_repo = PositionRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.equipment_repo = EquipmentRepository(session)
        self.link_repo = DepartmentPositionRepository(session)
        self.sentinels = SentinelResolver(session)
        self.session = session

    async def list_departments(self) -> list[DepartmentResponse]:
        rows = await self.repo.list_departments()
        return [DepartmentResponse.model_validate(d) for d in rows]

    async def get_department(self, dept_id: str) -> DepartmentDetailResponse:
        dept = await self.repo.get_dept(dept_id)
        # Rows with no department belong to Reserve
        include_unassigned = dept.is_reserve

        positions = await self.position_repo.list_positions(department_id=dept.id)
        employees = await self.employee_repo.list_employees(
            department_id=dept.id, include_unassigned=include_unassigned
        )
        equipment = await self.equipment_repo.list_equipment(
            department_id=dept.id, include_unassigned=include_unassigned
        )

        return DepartmentDetailResponse(
            id=dept.id,
            name=dept.name,
            is_reserve=dept.is_reserve,
            positions=[PositionResponse.model_validate(p) for p in positions],
            employees=[
                EmployeeResponse.model_validate(e).model_copy(update={"department_id": dept.id})
                for e in employees
            ],
            equipment=[
                EquipmentResponse.model_validate(q).model_copy(update={"department_id": dept.id})
                for q in equipment
            ],
        )

    async def create_department(self, name: str) -> DepartmentResponse:
        async with self.session.begin():
            dept = await self.repo.create_department(name=name)
        return DepartmentResponse.model_validate(dept)

    async def update_department(self, dept_id: str, name: str) -> DepartmentResponse:
        async with self.session.begin():
            dept = await self.repo.get_dept(dept_id)
            dept = await self.repo.update_department(dept, name=name)
        return DepartmentResponse.model_validate(dept)

    async def delete_department(self, dept_id: str) -> None:
        try:
            async with self.session.begin():
                reserve = await self.sentinels.get_reserve_department()
                if reserve is not None and reserve.id == dept_id:
                    raise InvalidOperationError("Cannot delete the Reserve department")

                dept = await self.repo.get_dept(dept_id)

                reserve = await self.sentinels.get_or_create_reserve_department()
                unemployed = await self.sentinels.get_or_create_unemployed_position()

                moved_employees = await self.employee_repo.reassign_department(
                    dept.id, reserve.id, position_id=unemployed.id
                )
                moved_equipment = await self.equipment_repo.reassign_department(
                    dept.id, reserve.id
                )
                removed_links = await self.link_repo.delete_for_department(dept.id)
                await self.repo.delete_department(dept)
        except IntegrityError as exc:
            log.warning("Department %s delete rolled back: %s", dept_id, exc.orig)
            raise ConflictError("Cannot delete department with linked records") from exc

        log.info(
            "Deleted department %s: %d employees and %d equipment moved to Reserve, "
            "%d position links removed",
            dept_id,
            moved_employees,
            moved_equipment,
            removed_links,
        )
