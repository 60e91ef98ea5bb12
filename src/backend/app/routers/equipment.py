"""Equipment endpoints.

GET    /api/v1/equipment?department_id=
GET    /api/v1/equipment/{id}
POST   /api/v1/equipment
PUT    /api/v1/equipment/{id}
DELETE /api/v1/equipment/{id}?department_id=   — 200 + body when moved to
                                                 Reserve, 204 when deleted
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.database import get_db
from app.schemas.inventory import EquipmentRequest, EquipmentResponse
from app.services.equipment_service import EquipmentService

router = APIRouter(prefix="/api/v1/equipment", tags=["equipment"])


def _service(session=Depends(get_db)) -> EquipmentService:
    return EquipmentService(session)


def _opt(value: UUID | None) -> str | None:
    return str(value) if value is not None else None


@router.get("", response_model=list[EquipmentResponse])
async def list_equipment(
    department_id: UUID | None = None,
    svc: EquipmentService = Depends(_service),
) -> list[EquipmentResponse]:
    return await svc.list_equipment(department_id=_opt(department_id))


@router.get("/{equipment_id}", response_model=EquipmentResponse)
async def get_equipment(
    equipment_id: UUID,
    svc: EquipmentService = Depends(_service),
) -> EquipmentResponse:
    return await svc.get_equipment(str(equipment_id))


@router.post("", response_model=EquipmentResponse, status_code=status.HTTP_201_CREATED)
async def create_equipment(
    body: EquipmentRequest,
    svc: EquipmentService = Depends(_service),
) -> EquipmentResponse:
    return await svc.create_equipment(
        name=body.name,
        category_id=str(body.category_id),
        purchase_date=body.purchase_date,
        description=body.description,
        serial_number=body.serial_number,
        status=body.status,
        measurement=body.measurement,
        amount=body.amount,
        department_id=_opt(body.department_id),
        responsible_employee_id=_opt(body.responsible_employee_id),
    )


@router.put("/{equipment_id}", response_model=EquipmentResponse)
async def update_equipment(
    equipment_id: UUID,
    body: EquipmentRequest,
    svc: EquipmentService = Depends(_service),
) -> EquipmentResponse:
    return await svc.update_equipment(
        str(equipment_id),
        name=body.name,
        category_id=str(body.category_id),
        purchase_date=body.purchase_date,
        description=body.description,
        serial_number=body.serial_number,
        status=body.status,
        measurement=body.measurement,
        amount=body.amount,
        department_id=_opt(body.department_id),
        responsible_employee_id=_opt(body.responsible_employee_id),
    )


@router.delete(
    "/{equipment_id}",
    response_model=EquipmentResponse,
    responses={204: {"description": "Equipment was already in Reserve and has been deleted"}},
)
async def delete_equipment(
    equipment_id: UUID,
    department_id: UUID | None = None,
    svc: EquipmentService = Depends(_service),
):
    moved = await svc.delete_equipment(str(equipment_id), department_id=_opt(department_id))
    if moved is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return moved
