"""Department endpoints.

GET    /api/v1/departments         — list departments
GET    /api/v1/departments/{id}    — department with positions, employees, equipment
POST   /api/v1/departments         — create department
PUT    /api/v1/departments/{id}    — rename department
DELETE /api/v1/departments/{id}    — delete department, moving its people and
                                     equipment to Reserve
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.database import get_db
from app.schemas.org import DepartmentDetailResponse, DepartmentRequest, DepartmentResponse
from app.services.department_service import DepartmentService

router = APIRouter(prefix="/api/v1/departments", tags=["departments"])


def _service(session=Depends(get_db)) -> DepartmentService:
    return DepartmentService(session)


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    svc: DepartmentService = Depends(_service),
) -> list[DepartmentResponse]:
    return await svc.list_departments()


@router.get("/{dept_id}", response_model=DepartmentDetailResponse)
async def get_department(
    dept_id: UUID,
    svc: DepartmentService = Depends(_service),
) -> DepartmentDetailResponse:
    return await svc.get_department(str(dept_id))


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    body: DepartmentRequest,
    svc: DepartmentService = Depends(_service),
) -> DepartmentResponse:
    return await svc.create_department(name=body.name)


@router.put("/{dept_id}", response_model=DepartmentResponse)
async def update_department(
    dept_id: UUID,
    body: DepartmentRequest,
    svc: DepartmentService = Depends(_service),
) -> DepartmentResponse:
    return await svc.update_department(str(dept_id), name=body.name)


@router.delete("/{dept_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
    dept_id: UUID,
    svc: DepartmentService = Depends(_service),
) -> None:
    await svc.delete_department(str(dept_id))
