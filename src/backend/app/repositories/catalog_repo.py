"""Repository for reference tables: specializations and equipment categories."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.inventory import EquipmentCategory
from app.models.staff import Specialization


class CatalogRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ── Specializations ────────────────────────────────────────────────────────

    async def get_specialization(self, specialization_id: str) -> Specialization:
        result = await self.session.execute(
            select(Specialization).where(Specialization.id == specialization_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Specialization with ID {specialization_id} not found")
        return row

    async def list_specializations(self) -> list[Specialization]:
        result = await self.session.execute(select(Specialization).order_by(Specialization.name))
        return list(result.scalars().all())

    async def create_specialization(self, name: str) -> Specialization:
        spec = Specialization(name=name)
        self.session.add(spec)
        await self.session.flush()
        await self.session.refresh(spec)
        return spec

    async def update_specialization(self, spec: Specialization, name: str) -> Specialization:
        spec.name = name
        await self.session.flush()
        return spec

    async def delete_specialization(self, spec: Specialization) -> None:
        await self.session.delete(spec)
        await self.session.flush()

    # ── Equipment categories ───────────────────────────────────────────────────

    async def get_category(self, category_id: str) -> EquipmentCategory:
        result = await self.session.execute(
            select(EquipmentCategory).where(EquipmentCategory.id == category_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Category with ID {category_id} not found")
        return row

    async def list_categories(self) -> list[EquipmentCategory]:
        result = await self.session.execute(
            select(EquipmentCategory).order_by(EquipmentCategory.name)
        )
        return list(result.scalars().all())

    async def create_category(self, name: str, description: str) -> EquipmentCategory:
        category = EquipmentCategory(name=name, description=description)
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def update_category(
        self, category: EquipmentCategory, name: str, description: str
    ) -> EquipmentCategory:
        category.name = name
        category.description = description
        await self.session.flush()
        return category

    async def delete_category(self, category: EquipmentCategory) -> None:
        await self.session.delete(category)
        await self.session.flush()
