"""Employee service — employee records and two-stage removal.

An employee with no department belongs to the Reserve department. Create and
update fill a missing department with Reserve and a missing position with
Unemployed. Removing an employee who is still in a regular department moves
them to Reserve with the Unemployed position; removing one who is already in
Reserve deletes the row.
"""

import logging
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, InvalidOperationError
from app.repositories.employee_repo import EmployeeRepository
from app.schemas.staff import EmployeeResponse
from app.services.sentinel_service import SentinelResolver

log = logging.getLogger(__name__)

_DANGLING_REFERENCE = (
    "Employee references a department, position or specialization that does not exist"
)


class EmployeeService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = EmployeeRepository(session)
        self.sentinels = SentinelResolver(session)
        self.session = session

    async def list_employees(self, department_id: str | None = None) -> list[EmployeeResponse]:
        include_unassigned = False
        if department_id is not None:
            reserve = await self.sentinels.get_reserve_department()
            include_unassigned = reserve is not None and reserve.id == department_id

        rows = await self.repo.list_employees(
            department_id=department_id, include_unassigned=include_unassigned
        )
        employees = [EmployeeResponse.model_validate(e) for e in rows]
        if include_unassigned:
            employees = [e.model_copy(update={"department_id": department_id}) for e in employees]
        return employees

    async def get_employee(self, employee_id: str) -> EmployeeResponse:
        employee = await self.repo.get_employee(employee_id)
        return EmployeeResponse.model_validate(employee)

    async def create_employee(
        self,
        call_sign: str,
        specialization_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone_number: str = "",
        birth_date: date | None = None,
        department_id: str | None = None,
        position_id: str | None = None,
    ) -> EmployeeResponse:
        try:
            async with self.session.begin():
                department_id, position_id = await self._with_defaults(department_id, position_id)
                employee = await self.repo.create_employee(
                    call_sign=call_sign,
                    specialization_id=specialization_id,
                    first_name=first_name,
                    last_name=last_name,
                    phone_number=phone_number,
                    birth_date=birth_date,
                    department_id=department_id,
                    position_id=position_id,
                )
        except IntegrityError as exc:
            raise ConflictError(_DANGLING_REFERENCE) from exc
        return EmployeeResponse.model_validate(employee)

    async def update_employee(
        self,
        employee_id: str,
        call_sign: str,
        specialization_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone_number: str = "",
        birth_date: date | None = None,
        department_id: str | None = None,
        position_id: str | None = None,
    ) -> EmployeeResponse:
        try:
            async with self.session.begin():
                employee = await self.repo.get_employee(employee_id)
                department_id, position_id = await self._with_defaults(department_id, position_id)
                employee = await self.repo.update_employee(
                    employee,
                    call_sign=call_sign,
                    specialization_id=specialization_id,
                    first_name=first_name,
                    last_name=last_name,
                    phone_number=phone_number,
                    birth_date=birth_date,
                    department_id=department_id,
                    position_id=position_id,
                )
        except IntegrityError as exc:
            raise ConflictError(_DANGLING_REFERENCE) from exc
        return EmployeeResponse.model_validate(employee)

    async def delete_employee(
        self, employee_id: str, department_id: str | None = None
    ) -> EmployeeResponse | None:
        """Move the employee to Reserve, or delete them if they are already there.

        Returns the moved employee, or None when the row was deleted.
        """
        try:
            async with self.session.begin():
                employee = await self.repo.get_employee(employee_id)
                reserve = await self.sentinels.get_or_create_reserve_department()
                current = employee.department_id or reserve.id
                if department_id is not None and current != department_id:
                    raise InvalidOperationError(
                        f"Employee {employee_id} does not belong to department {department_id}"
                    )

                if current == reserve.id:
                    await self.repo.delete_employee(employee)
                    moved = None
                else:
                    unemployed = await self.sentinels.get_or_create_unemployed_position()
                    moved = await self.repo.move_employee(
                        employee, department_id=reserve.id, position_id=unemployed.id
                    )
        except IntegrityError as exc:
            log.warning("Employee %s delete rolled back: %s", employee_id, exc.orig)
            raise ConflictError("Cannot delete employee with linked records") from exc

        if moved is None:
            log.info("Deleted employee %s", employee_id)
            return None
        log.info("Moved employee %s to Reserve", employee_id)
        return EmployeeResponse.model_validate(moved)

    async def _with_defaults(
        self, department_id: str | None, position_id: str | None
    ) -> tuple[str, str]:
        """Fill a missing department with Reserve and a missing position with Unemployed."""
        if department_id is None:
            department_id = (await self.sentinels.get_or_create_reserve_department()).id
        if position_id is None:
            position_id = (await self.sentinels.get_or_create_unemployed_position()).id
        return department_id, position_id
