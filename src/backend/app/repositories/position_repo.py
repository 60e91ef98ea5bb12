"""Repository for position records, including the Unemployed sentinel row."""

from sqlalchemy import select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.org import DepartmentPosition, Position


class PositionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_position(self, position_id: str) -> Position:
        result = await self.session.execute(select(Position).where(Position.id == position_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Position with ID {position_id} not found")
        return row

    async def list_positions(self, department_id: str | None = None) -> list[Position]:
        stmt = select(Position).order_by(Position.title)
        if department_id is not None:
            stmt = stmt.join(
                DepartmentPosition, DepartmentPosition.position_id == Position.id
            ).where(DepartmentPosition.department_id == department_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_position(self, title: str) -> Position:
        position = Position(title=title, is_unemployed=False)
        self.session.add(position)
        await self.session.flush()
        await self.session.refresh(position)
        return position

    async def update_position(self, position: Position, title: str) -> Position:
        position.title = title
        await self.session.flush()
        return position

    async def delete_position(self, position: Position) -> None:
        await self.session.delete(position)
        await self.session.flush()

    # ── Unemployed sentinel ────────────────────────────────────────────────────

    async def get_unemployed(self) -> Position | None:
        result = await self.session.execute(
            select(Position).where(Position.is_unemployed.is_(True))
        )
        return result.scalar_one_or_none()

    async def insert_unemployed_if_absent(self, title: str) -> None:
        stmt = (
            pg_insert(Position)
            .values(title=title, is_unemployed=True)
            .on_conflict_do_nothing(
                index_elements=["is_unemployed"], index_where=text("is_unemployed")
            )
        )
        await self.session.execute(stmt)
