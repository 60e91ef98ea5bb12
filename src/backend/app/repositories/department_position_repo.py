"""Repository for department_positions availability links."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.org import Department, DepartmentPosition


class DepartmentPositionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_department_ids(self, position_id: str) -> set[str]:
        result = await self.session.execute(
            select(DepartmentPosition.department_id).where(
                DepartmentPosition.position_id == position_id
            )
        )
        return set(result.scalars().all())

    async def list_departments_for_position(self, position_id: str) -> list[Department]:
        result = await self.session.execute(
            select(Department)
            .join(DepartmentPosition, DepartmentPosition.department_id == Department.id)
            .where(DepartmentPosition.position_id == position_id)
            .order_by(Department.name)
        )
        return list(result.scalars().all())

    async def add_links(self, position_id: str, department_ids: set[str]) -> None:
        for dept_id in department_ids:
            self.session.add(DepartmentPosition(department_id=dept_id, position_id=position_id))
        await self.session.flush()

    async def remove_links(self, position_id: str, department_ids: set[str]) -> int:
        if not department_ids:
            return 0
        result = await self.session.execute(
            delete(DepartmentPosition).where(
                DepartmentPosition.position_id == position_id,
                DepartmentPosition.department_id.in_(department_ids),
            )
        )
        return result.rowcount

    async def delete_for_department(self, dept_id: str) -> int:
        result = await self.session.execute(
            delete(DepartmentPosition).where(DepartmentPosition.department_id == dept_id)
        )
        return result.rowcount

    async def delete_for_position(self, position_id: str) -> int:
        result = await self.session.execute(
            delete(DepartmentPosition).where(DepartmentPosition.position_id == position_id)
        )
        return result.rowcount
