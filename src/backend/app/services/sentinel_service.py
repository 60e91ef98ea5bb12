"""Sentinel resolver — locates or lazily creates the Reserve department and
the Unemployed position.

Sentinels are identified by the is_reserve / is_unemployed flags. Creation is
an INSERT ... ON CONFLICT DO NOTHING against the partial unique index followed
by a re-select, so two requests that both see "absent" still end up sharing a
single row. Everything runs in the caller's transaction.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.errors import InvalidOperationError
from app.models.org import Department, Position
from app.repositories.department_repo import DepartmentRepository
from app.repositories.position_repo import PositionRepository

log = logging.getLogger(__name__)


class SentinelResolver:
    def __init__(self, session: AsyncSession) -> None:
        self.department_repo = DepartmentRepository(session)
        self.position_repo = PositionRepository(session)

    async def get_reserve_department(self) -> Department | None:
        return await self.department_repo.get_reserve()

    async def get_or_create_reserve_department(self) -> Department:
        reserve = await self.department_repo.get_reserve()
        if reserve is not None:
            return reserve

        await self.department_repo.insert_reserve_if_absent(settings.RESERVE_DEPARTMENT_NAME)
        reserve = await self.department_repo.get_reserve()
        if reserve is None:
            raise InvalidOperationError("Reserve department not found")
        log.info("Created Reserve department %s", reserve.id)
        return reserve

    async def get_unemployed_position(self) -> Position | None:
        return await self.position_repo.get_unemployed()

    async def get_or_create_unemployed_position(self) -> Position:
        unemployed = await self.position_repo.get_unemployed()
        if unemployed is not None:
            return unemployed

        await self.position_repo.insert_unemployed_if_absent(settings.UNEMPLOYED_POSITION_TITLE)
        unemployed = await self.position_repo.get_unemployed()
        if unemployed is None:
            raise InvalidOperationError("Default position not found")
        log.info("Created Unemployed position %s", unemployed.id)
        return unemployed
