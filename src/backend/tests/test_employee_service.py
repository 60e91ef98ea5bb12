"""Tests for EmployeeService — two-stage removal via the Reserve department."""

from datetime import date, datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.errors import ConflictError, InvalidOperationError, NotFoundError
from app.services.employee_service import EmployeeService

RESERVE_ID = "d-reserve"
UNEMPLOYED_ID = "p-unemployed"


def _make_employee(
    id: str = "e-1", department_id: str | None = "d-it", position_id: str | None = "p-dev"
) -> SimpleNamespace:
    return SimpleNamespace(
        id=id,
        first_name="John",
        last_name="Smith",
        call_sign="Falcon",
        phone_number="",
        birth_date=date(1990, 5, 1),
        hire_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        department_id=department_id,
        position_id=position_id,
        specialization_id="s-1",
    )


def _make_service() -> tuple[EmployeeService, AsyncMock]:
    session = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=None)
    ctx.__aexit__ = AsyncMock(return_value=False)
    session.begin = MagicMock(return_value=ctx)

    svc = EmployeeService(session)
    svc.repo = AsyncMock()
    svc.sentinels = AsyncMock()
    reserve = SimpleNamespace(id=RESERVE_ID, name="Reserve", is_reserve=True)
    svc.sentinels.get_reserve_department = AsyncMock(return_value=reserve)
    svc.sentinels.get_or_create_reserve_department = AsyncMock(return_value=reserve)
    svc.sentinels.get_or_create_unemployed_position = AsyncMock(
        return_value=SimpleNamespace(id=UNEMPLOYED_ID, title="Unemployed", is_unemployed=True)
    )
    return svc, ctx


class TestDeleteEmployee:
    async def test_regular_employee_is_moved_to_reserve(self):
        svc, _ = _make_service()
        employee = _make_employee()
        svc.repo.get_employee = AsyncMock(return_value=employee)
        svc.repo.move_employee = AsyncMock(
            return_value=_make_employee(department_id=RESERVE_ID, position_id=UNEMPLOYED_ID)
        )

        result = await svc.delete_employee("e-1")

        assert result.department_id == RESERVE_ID
        assert result.position_id == UNEMPLOYED_ID
        svc.repo.move_employee.assert_awaited_once_with(
            employee, department_id=RESERVE_ID, position_id=UNEMPLOYED_ID
        )
        svc.repo.delete_employee.assert_not_awaited()

    async def test_reserve_employee_is_deleted(self):
        svc, _ = _make_service()
        employee = _make_employee(department_id=RESERVE_ID, position_id=UNEMPLOYED_ID)
        svc.repo.get_employee = AsyncMock(return_value=employee)

        result = await svc.delete_employee("e-1")

        assert result is None
        svc.repo.delete_employee.assert_awaited_once_with(employee)
        svc.repo.move_employee.assert_not_awaited()

    async def test_unassigned_employee_is_deleted(self):
        svc, _ = _make_service()
        employee = _make_employee(department_id=None, position_id=None)
        svc.repo.get_employee = AsyncMock(return_value=employee)

        assert await svc.delete_employee("e-1") is None
        svc.repo.delete_employee.assert_awaited_once_with(employee)

    async def test_department_mismatch_raises_invalid_operation(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(return_value=_make_employee(department_id="d-it"))

        with pytest.raises(InvalidOperationError):
            await svc.delete_employee("e-1", department_id="d-ops")

        svc.repo.move_employee.assert_not_awaited()
        svc.repo.delete_employee.assert_not_awaited()

    async def test_missing_employee_raises_not_found(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(side_effect=NotFoundError("missing"))

        with pytest.raises(NotFoundError):
            await svc.delete_employee("e-ghost")

    async def test_integrity_error_becomes_conflict(self):
        svc, ctx = _make_service()
        svc.repo.get_employee = AsyncMock(
            return_value=_make_employee(department_id=RESERVE_ID)
        )
        svc.repo.delete_employee = AsyncMock(
            side_effect=IntegrityError("DELETE", {}, Exception("fk violation"))
        )

        with pytest.raises(ConflictError, match="linked records"):
            await svc.delete_employee("e-1")

        assert ctx.__aexit__.await_args.args[0] is IntegrityError

    async def test_unassigned_employee_matches_reserve_scope(self):
        svc, _ = _make_service()
        employee = _make_employee(department_id=None, position_id=None)
        svc.repo.get_employee = AsyncMock(return_value=employee)

        result = await svc.delete_employee("e-1", department_id=RESERVE_ID)

        assert result is None
        svc.repo.delete_employee.assert_awaited_once_with(employee)

    async def test_unassigned_employee_does_not_match_other_department(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(return_value=_make_employee(department_id=None))

        with pytest.raises(InvalidOperationError):
            await svc.delete_employee("e-1", department_id="d-it")

        svc.repo.delete_employee.assert_not_awaited()


class TestListEmployees:
    async def test_reserve_filter_includes_unassigned_rows(self):
        svc, _ = _make_service()
        svc.repo.list_employees = AsyncMock(
            return_value=[
                _make_employee(id="e-1", department_id=RESERVE_ID),
                _make_employee(id="e-2", department_id=None, position_id=None),
            ]
        )

        result = await svc.list_employees(department_id=RESERVE_ID)

        svc.repo.list_employees.assert_awaited_once_with(
            department_id=RESERVE_ID, include_unassigned=True
        )
        assert [e.department_id for e in result] == [RESERVE_ID, RESERVE_ID]

    async def test_regular_filter_excludes_unassigned_rows(self):
        svc, _ = _make_service()
        svc.repo.list_employees = AsyncMock(return_value=[_make_employee()])

        result = await svc.list_employees(department_id="d-it")

        svc.repo.list_employees.assert_awaited_once_with(
            department_id="d-it", include_unassigned=False
        )
        assert result[0].department_id == "d-it"

    async def test_reserve_filter_without_reserve_row(self):
        svc, _ = _make_service()
        svc.sentinels.get_reserve_department = AsyncMock(return_value=None)
        svc.repo.list_employees = AsyncMock(return_value=[])

        assert await svc.list_employees(department_id=RESERVE_ID) == []
        svc.repo.list_employees.assert_awaited_once_with(
            department_id=RESERVE_ID, include_unassigned=False
        )

    async def test_unfiltered_list_skips_reserve_lookup(self):
        svc, _ = _make_service()
        svc.repo.list_employees = AsyncMock(return_value=[])

        await svc.list_employees()

        svc.sentinels.get_reserve_department.assert_not_awaited()
        svc.repo.list_employees.assert_awaited_once_with(
            department_id=None, include_unassigned=False
        )


class TestCreateEmployee:
    async def test_missing_department_and_position_default_to_sentinels(self):
        svc, _ = _make_service()
        svc.repo.create_employee = AsyncMock(
            return_value=_make_employee(department_id=RESERVE_ID, position_id=UNEMPLOYED_ID)
        )

        result = await svc.create_employee(call_sign="Falcon", specialization_id="s-1")

        assert result.department_id == RESERVE_ID
        kwargs = svc.repo.create_employee.await_args.kwargs
        assert kwargs["department_id"] == RESERVE_ID
        assert kwargs["position_id"] == UNEMPLOYED_ID

    async def test_explicit_department_and_position_are_kept(self):
        svc, _ = _make_service()
        svc.repo.create_employee = AsyncMock(return_value=_make_employee())

        await svc.create_employee(
            call_sign="Falcon", specialization_id="s-1", department_id="d-it", position_id="p-dev"
        )

        kwargs = svc.repo.create_employee.await_args.kwargs
        assert kwargs["department_id"] == "d-it"
        assert kwargs["position_id"] == "p-dev"
        svc.sentinels.get_or_create_reserve_department.assert_not_awaited()
        svc.sentinels.get_or_create_unemployed_position.assert_not_awaited()

    async def test_dangling_reference_becomes_conflict(self):
        svc, _ = _make_service()
        svc.repo.create_employee = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("fk violation"))
        )

        with pytest.raises(ConflictError):
            await svc.create_employee(call_sign="Falcon", specialization_id="s-ghost")


class TestUpdateEmployee:
    async def test_replaces_fields(self):
        svc, ctx = _make_service()
        employee = _make_employee()
        svc.repo.get_employee = AsyncMock(return_value=employee)
        svc.repo.update_employee = AsyncMock(
            return_value=_make_employee(department_id="d-ops", position_id="p-lead")
        )

        result = await svc.update_employee(
            "e-1",
            call_sign="Hawk",
            specialization_id="s-2",
            department_id="d-ops",
            position_id="p-lead",
        )

        assert result.department_id == "d-ops"
        args = svc.repo.update_employee.await_args
        assert args.args[0] is employee
        assert args.kwargs["call_sign"] == "Hawk"
        assert args.kwargs["specialization_id"] == "s-2"
        assert ctx.__aexit__.await_args.args[0] is None

    async def test_cleared_department_and_position_default_to_sentinels(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(return_value=_make_employee())
        svc.repo.update_employee = AsyncMock(
            return_value=_make_employee(department_id=RESERVE_ID, position_id=UNEMPLOYED_ID)
        )

        await svc.update_employee("e-1", call_sign="Falcon", specialization_id="s-1")

        kwargs = svc.repo.update_employee.await_args.kwargs
        assert kwargs["department_id"] == RESERVE_ID
        assert kwargs["position_id"] == UNEMPLOYED_ID

    async def test_missing_employee_raises_not_found(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(side_effect=NotFoundError("missing"))

        with pytest.raises(NotFoundError):
            await svc.update_employee("e-ghost", call_sign="Falcon", specialization_id="s-1")

        svc.repo.update_employee.assert_not_awaited()

    async def test_dangling_reference_becomes_conflict(self):
        svc, _ = _make_service()
        svc.repo.get_employee = AsyncMock(return_value=_make_employee())
        svc.repo.update_employee = AsyncMock(
            side_effect=IntegrityError("UPDATE", {}, Exception("fk violation"))
        )

        with pytest.raises(ConflictError):
            await svc.update_employee(
                "e-1",
                call_sign="Falcon",
                specialization_id="s-ghost",
                department_id="d-it",
                position_id="p-dev",
            )
