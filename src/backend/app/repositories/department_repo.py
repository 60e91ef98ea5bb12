"""Repository for department records, including the Reserve sentinel row."""

from sqlalchemy import select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.org import Department


class DepartmentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_dept(self, dept_id: str) -> Department:
        result = await self.session.execute(select(Department).where(Department.id == dept_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Department with ID {dept_id} not found")
        return row

    async def list_departments(self) -> list[Department]:
        result = await self.session.execute(select(Department).order_by(Department.name))
        return list(result.scalars().all())

    async def create_department(self, name: str) -> Department:
        dept = Department(name=name, is_reserve=False)
        self.session.add(dept)
        await self.session.flush()
        await self.session.refresh(dept)
        return dept

    async def update_department(self, dept: Department, name: str) -> Department:
        dept.name = name
        await self.session.flush()
        return dept

    async def delete_department(self, dept: Department) -> None:
        await self.session.delete(dept)
        await self.session.flush()

    # ── Reserve sentinel ───────────────────────────────────────────────────────

    async def get_reserve(self) -> Department | None:
        result = await self.session.execute(
            select(Department).where(Department.is_reserve.is_(True))
        )
        return result.scalar_one_or_none()

    async def insert_reserve_if_absent(self, name: str) -> None:
        """Insert the Reserve row unless one exists; a concurrent insert wins silently."""
        stmt = (
            pg_insert(Department)
            .values(name=name, is_reserve=True)
            .on_conflict_do_nothing(
                index_elements=["is_reserve"], index_where=text("is_reserve")
            )
        )
        await self.session.execute(stmt)
