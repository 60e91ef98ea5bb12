"""Employee endpoints.

GET    /api/v1/employees?department_id=
GET    /api/v1/employees/{id}
POST   /api/v1/employees
PUT    /api/v1/employees/{id}
DELETE /api/v1/employees/{id}?department_id=   — 200 + body when moved to
                                                 Reserve, 204 when deleted
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.database import get_db
from app.schemas.staff import EmployeeRequest, EmployeeResponse
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


def _service(session=Depends(get_db)) -> EmployeeService:
    return EmployeeService(session)


def _opt(value: UUID | None) -> str | None:
    return str(value) if value is not None else None


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    department_id: UUID | None = None,
    svc: EmployeeService = Depends(_service),
) -> list[EmployeeResponse]:
    return await svc.list_employees(department_id=_opt(department_id))


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: UUID,
    svc: EmployeeService = Depends(_service),
) -> EmployeeResponse:
    return await svc.get_employee(str(employee_id))


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeRequest,
    svc: EmployeeService = Depends(_service),
) -> EmployeeResponse:
    return await svc.create_employee(
        call_sign=body.call_sign,
        specialization_id=str(body.specialization_id),
        first_name=body.first_name,
        last_name=body.last_name,
        phone_number=body.phone_number,
        birth_date=body.birth_date,
        department_id=_opt(body.department_id),
        position_id=_opt(body.position_id),
    )


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    body: EmployeeRequest,
    svc: EmployeeService = Depends(_service),
) -> EmployeeResponse:
    return await svc.update_employee(
        str(employee_id),
        call_sign=body.call_sign,
        specialization_id=str(body.specialization_id),
        first_name=body.first_name,
        last_name=body.last_name,
        phone_number=body.phone_number,
        birth_date=body.birth_date,
        department_id=_opt(body.department_id),
        position_id=_opt(body.position_id),
    )


@router.delete(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={204: {"description": "Employee was already in Reserve and has been deleted"}},
)
async def delete_employee(
    employee_id: UUID,
    department_id: UUID | None = None,
    svc: EmployeeService = Depends(_service),
):
    moved = await svc.delete_employee(str(employee_id), department_id=_opt(department_id))
    if moved is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return moved
