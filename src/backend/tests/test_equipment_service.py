"""Tests for EquipmentService — two-stage removal via the Reserve department."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.errors import ConflictError, InvalidOperationError, NotFoundError
from app.services.equipment_service import EquipmentService

RESERVE_ID = "d-reserve"


def _make_item(id: str = "q-1", department_id: str | None = "d-it") -> SimpleNamespace:
    return SimpleNamespace(
        id=id,
        name="Laptop",
        description="",
        serial_number="SN-001",
        purchase_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
        status="Used",
        measurement="Unit",
        amount=Decimal("1.00"),
        department_id=department_id,
        category_id="c-1",
        responsible_employee_id=None,
    )


def _make_service() -> tuple[EquipmentService, AsyncMock]:
    session = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=None)
    ctx.__aexit__ = AsyncMock(return_value=False)
    session.begin = MagicMock(return_value=ctx)

    svc = EquipmentService(session)
    svc.repo = AsyncMock()
    svc.sentinels = AsyncMock()
    reserve = SimpleNamespace(id=RESERVE_ID, name="Reserve", is_reserve=True)
    svc.sentinels.get_reserve_department = AsyncMock(return_value=reserve)
    svc.sentinels.get_or_create_reserve_department = AsyncMock(return_value=reserve)
    return svc, ctx


class TestDeleteEquipment:
    async def test_regular_item_is_moved_to_reserve(self):
        svc, _ = _make_service()
        item = _make_item()
        svc.repo.get_equipment = AsyncMock(return_value=item)
        svc.repo.move_equipment = AsyncMock(return_value=_make_item(department_id=RESERVE_ID))

        result = await svc.delete_equipment("q-1")

        assert result.department_id == RESERVE_ID
        svc.repo.move_equipment.assert_awaited_once_with(item, department_id=RESERVE_ID)
        svc.sentinels.get_or_create_unemployed_position.assert_not_awaited()

    async def test_reserve_item_is_deleted(self):
        svc, _ = _make_service()
        item = _make_item(department_id=RESERVE_ID)
        svc.repo.get_equipment = AsyncMock(return_value=item)

        assert await svc.delete_equipment("q-1") is None
        svc.repo.delete_equipment.assert_awaited_once_with(item)

    async def test_department_mismatch_raises_invalid_operation(self):
        svc, _ = _make_service()
        svc.repo.get_equipment = AsyncMock(return_value=_make_item(department_id="d-it"))

        with pytest.raises(InvalidOperationError):
            await svc.delete_equipment("q-1", department_id="d-ops")

    async def test_integrity_error_becomes_conflict(self):
        svc, _ = _make_service()
        svc.repo.get_equipment = AsyncMock(return_value=_make_item(department_id=None))
        svc.repo.delete_equipment = AsyncMock(
            side_effect=IntegrityError("DELETE", {}, Exception("fk violation"))
        )

        with pytest.raises(ConflictError, match="Cannot delete equipment"):
            await svc.delete_equipment("q-1")

    async def test_unassigned_item_matches_reserve_scope(self):
        svc, _ = _make_service()
        item = _make_item(department_id=None)
        svc.repo.get_equipment = AsyncMock(return_value=item)

        assert await svc.delete_equipment("q-1", department_id=RESERVE_ID) is None
        svc.repo.delete_equipment.assert_awaited_once_with(item)


class TestListEquipment:
    async def test_reserve_filter_includes_unassigned_rows(self):
        svc, _ = _make_service()
        svc.repo.list_equipment = AsyncMock(
            return_value=[_make_item(id="q-1", department_id=None)]
        )

        result = await svc.list_equipment(department_id=RESERVE_ID)

        svc.repo.list_equipment.assert_awaited_once_with(
            department_id=RESERVE_ID, include_unassigned=True
        )
        assert result[0].department_id == RESERVE_ID

    async def test_regular_filter_excludes_unassigned_rows(self):
        svc, _ = _make_service()
        svc.repo.list_equipment = AsyncMock(return_value=[])

        await svc.list_equipment(department_id="d-it")

        svc.repo.list_equipment.assert_awaited_once_with(
            department_id="d-it", include_unassigned=False
        )


class TestCreateAndUpdateEquipment:
    async def test_create_defaults_department_to_reserve(self):
        svc, _ = _make_service()
        svc.repo.create_equipment = AsyncMock(return_value=_make_item(department_id=RESERVE_ID))

        result = await svc.create_equipment(
            name="Laptop", category_id="c-1", purchase_date=datetime(2024, 3, 1)
        )

        assert result.department_id == RESERVE_ID
        assert svc.repo.create_equipment.await_args.kwargs["department_id"] == RESERVE_ID

    async def test_create_keeps_explicit_department(self):
        svc, _ = _make_service()
        svc.repo.create_equipment = AsyncMock(return_value=_make_item())

        await svc.create_equipment(
            name="Laptop",
            category_id="c-1",
            purchase_date=datetime(2024, 3, 1),
            department_id="d-it",
        )

        assert svc.repo.create_equipment.await_args.kwargs["department_id"] == "d-it"
        svc.sentinels.get_or_create_reserve_department.assert_not_awaited()

    async def test_update_defaults_department_to_reserve(self):
        svc, _ = _make_service()
        item = _make_item()
        svc.repo.get_equipment = AsyncMock(return_value=item)
        svc.repo.update_equipment = AsyncMock(return_value=_make_item(department_id=RESERVE_ID))

        result = await svc.update_equipment(
            "q-1", name="Laptop Pro", category_id="c-1", purchase_date=datetime(2024, 3, 1)
        )

        assert result.department_id == RESERVE_ID
        args = svc.repo.update_equipment.await_args
        assert args.args[0] is item
        assert args.kwargs["name"] == "Laptop Pro"
        assert args.kwargs["department_id"] == RESERVE_ID

    async def test_update_missing_item_raises_not_found(self):
        svc, _ = _make_service()
        svc.repo.get_equipment = AsyncMock(side_effect=NotFoundError("missing"))

        with pytest.raises(NotFoundError):
            await svc.update_equipment(
                "q-ghost", name="Laptop", category_id="c-1", purchase_date=datetime(2024, 3, 1)
            )

    async def test_update_dangling_reference_becomes_conflict(self):
        svc, _ = _make_service()
        svc.repo.get_equipment = AsyncMock(return_value=_make_item())
        svc.repo.update_equipment = AsyncMock(
            side_effect=IntegrityError("UPDATE", {}, Exception("fk violation"))
        )

        with pytest.raises(ConflictError):
            await svc.update_equipment(
                "q-1", name="Laptop", category_id="c-ghost", purchase_date=datetime(2024, 3, 1)
            )
