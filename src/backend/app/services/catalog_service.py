"""Catalog service — specializations and equipment categories.

Reference rows cannot be deleted while anything still points at them.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError
from app.repositories.catalog_repo import CatalogRepository
from app.repositories.employee_repo import EmployeeRepository
from app.repositories.equipment_repo import EquipmentRepository
from app.schemas.inventory import EquipmentCategoryResponse
from app.schemas.staff import SpecializationResponse

log = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = CatalogRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.equipment_repo = EquipmentRepository(session)
        self.session = session

    # ── Specializations ────────────────────────────────────────────────────────

    async def list_specializations(self) -> list[SpecializationResponse]:
        rows = await self.repo.list_specializations()
        return [SpecializationResponse.model_validate(s) for s in rows]

    async def create_specialization(self, name: str) -> SpecializationResponse:
        async with self.session.begin():
            spec = await self.repo.create_specialization(name=name)
        return SpecializationResponse.model_validate(spec)

    async def update_specialization(
        self, specialization_id: str, name: str
    ) -> SpecializationResponse:
        async with self.session.begin():
            spec = await self.repo.get_specialization(specialization_id)
            spec = await self.repo.update_specialization(spec, name=name)
        return SpecializationResponse.model_validate(spec)

    async def delete_specialization(self, specialization_id: str) -> None:
        try:
            async with self.session.begin():
                spec = await self.repo.get_specialization(specialization_id)
                if await self.employee_repo.count_by_specialization(spec.id) > 0:
                    raise ConflictError(
                        "Cannot delete specialization that is assigned to employees"
                    )
                await self.repo.delete_specialization(spec)
        except IntegrityError as exc:
            log.warning("Specialization %s delete rolled back: %s", specialization_id, exc.orig)
            raise ConflictError("Cannot delete specialization with linked records") from exc

    # ── Equipment categories ───────────────────────────────────────────────────

    async def list_categories(self) -> list[EquipmentCategoryResponse]:
        rows = await self.repo.list_categories()
        return [EquipmentCategoryResponse.model_validate(c) for c in rows]

    async def create_category(self, name: str, description: str) -> EquipmentCategoryResponse:
        async with self.session.begin():
            category = await self.repo.create_category(name=name, description=description)
        return EquipmentCategoryResponse.model_validate(category)

    async def update_category(
        self, category_id: str, name: str, description: str
    ) -> EquipmentCategoryResponse:
        async with self.session.begin():
            category = await self.repo.get_category(category_id)
            category = await self.repo.update_category(
                category, name=name, description=description
            )
        return EquipmentCategoryResponse.model_validate(category)

    async def delete_category(self, category_id: str) -> None:
        try:
            async with self.session.begin():
                category = await self.repo.get_category(category_id)
                if await self.equipment_repo.count_by_category(category.id) > 0:
                    raise ConflictError("Cannot delete category that is assigned to equipment")
                await self.repo.delete_category(category)
        except IntegrityError as exc:
            log.warning("Category %s delete rolled back: %s", category_id, exc.orig)
            raise ConflictError("Cannot delete category with linked records") from exc
