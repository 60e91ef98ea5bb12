"""Repository for employee records.

The reassign_* methods issue a single UPDATE and return the number of rows
moved; callers run them inside their own transaction.
"""

from datetime import date

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.staff import Employee


class EmployeeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_employee(self, employee_id: str) -> Employee:
        result = await self.session.execute(select(Employee).where(Employee.id == employee_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Employee with ID {employee_id} not found")
        return row

    async def list_employees(
        self, department_id: str | None = None, include_unassigned: bool = False
    ) -> list[Employee]:
        stmt = select(Employee).order_by(Employee.last_name, Employee.call_sign)
        if department_id is not None:
            if include_unassigned:
                stmt = stmt.where(
                    or_(Employee.department_id == department_id, Employee.department_id.is_(None))
                )
            else:
                stmt = stmt.where(Employee.department_id == department_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

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
    ) -> Employee:
        employee = Employee(
            call_sign=call_sign,
            specialization_id=specialization_id,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            birth_date=birth_date,
            department_id=department_id,
            position_id=position_id,
        )
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def update_employee(self, employee: Employee, **fields) -> Employee:
        for name, value in fields.items():
            setattr(employee, name, value)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def move_employee(
        self, employee: Employee, department_id: str, position_id: str
    ) -> Employee:
        employee.department_id = department_id
        employee.position_id = position_id
        await self.session.flush()
        return employee

    async def delete_employee(self, employee: Employee) -> None:
        await self.session.delete(employee)
        await self.session.flush()

    async def reassign_department(
        self, from_dept_id: str, to_dept_id: str, position_id: str
    ) -> int:
        result = await self.session.execute(
            update(Employee)
            .where(Employee.department_id == from_dept_id)
            .values(department_id=to_dept_id, position_id=position_id)
        )
        return result.rowcount

    async def reassign_position(self, from_position_id: str, to_position_id: str) -> int:
        result = await self.session.execute(
            update(Employee)
            .where(Employee.position_id == from_position_id)
            .values(position_id=to_position_id)
        )
        return result.rowcount

    async def count_by_specialization(self, specialization_id: str) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(Employee)
            .where(Employee.specialization_id == specialization_id)
        )
        return result.scalar_one()
