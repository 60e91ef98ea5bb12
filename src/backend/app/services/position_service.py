"""Position service — position CRUD, availability links and the deletion cascade.

Deleting a position moves its employees to the Unemployed position, removes
its department links and then the row itself, in one transaction.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, InvalidOperationError
from app.repositories.department_position_repo import DepartmentPositionRepository
from app.repositories.department_repo import DepartmentRepository
from app.repositories.employee_repo import EmployeeRepository
from app.repositories.position_repo import PositionRepository
from app.schemas.org import DepartmentResponse, PositionDetailResponse, PositionResponse
from app.services.sentinel_service import SentinelResolver

log = logging.getLogger(__name__)


class PositionService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = PositionRepository(session)
        self.department_repo = DepartmentRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.link_repo = DepartmentPositionRepository(session)
        self.sentinels = SentinelResolver(session)
        self.session = session

    async def list_positions(self, department_id: str | None = None) -> list[PositionResponse]:
        rows = await self.repo.list_positions(department_id=department_id)
        return [PositionResponse.model_validate(p) for p in rows]

    async def get_position(self, position_id: str) -> PositionDetailResponse:
        position = await self.repo.get_position(position_id)
        departments = await self.link_repo.list_departments_for_position(position.id)
        return PositionDetailResponse(
            id=position.id,
            title=position.title,
            is_unemployed=position.is_unemployed,
            departments=[DepartmentResponse.model_validate(d) for d in departments],
        )

    async def create_position(self, title: str, department_ids: list[str]) -> PositionResponse:
        async with self.session.begin():
            wanted = await self._existing_departments(department_ids)
            position = await self.repo.create_position(title=title)
            await self.link_repo.add_links(position.id, wanted)
        return PositionResponse.model_validate(position)

    async def update_position(
        self, position_id: str, title: str, department_ids: list[str]
    ) -> PositionResponse:
        async with self.session.begin():
            position = await self.repo.get_position(position_id)
            wanted = await self._existing_departments(department_ids)
            current = await self.link_repo.list_department_ids(position.id)

            await self.link_repo.remove_links(position.id, current - wanted)
            await self.link_repo.add_links(position.id, wanted - current)
            position = await self.repo.update_position(position, title=title)
        return PositionResponse.model_validate(position)

    async def delete_position(self, position_id: str) -> None:
        try:
            async with self.session.begin():
                position = await self.repo.get_position(position_id)
                if position.is_unemployed:
                    raise InvalidOperationError("Cannot delete the default Unemployed position")

                unemployed = await self.sentinels.get_or_create_unemployed_position()

                moved = await self.employee_repo.reassign_position(position.id, unemployed.id)
                removed_links = await self.link_repo.delete_for_position(position.id)
                await self.repo.delete_position(position)
        except IntegrityError as exc:
            log.warning("Position %s delete rolled back: %s", position_id, exc.orig)
            raise ConflictError("Error deleting position") from exc

        log.info(
            "Deleted position %s: %d employees moved to Unemployed, %d department links removed",
            position_id,
            moved,
            removed_links,
        )

    async def _existing_departments(self, department_ids: list[str]) -> set[str]:
        """Return the ids as a set, raising NotFoundError for any unknown department."""
        wanted = set(department_ids)
        for dept_id in wanted:
            await self.department_repo.get_dept(dept_id)
        return wanted
