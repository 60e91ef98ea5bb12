"""Position endpoints.

GET    /api/v1/positions?department_id=   — list positions, optionally those
                                            available in one department
GET    /api/v1/positions/{id}             — position with linked departments
POST   /api/v1/positions                  — create position + department links
PUT    /api/v1/positions/{id}             — rename, replace department links
DELETE /api/v1/positions/{id}             — delete, moving employees to Unemployed
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.database import get_db
from app.schemas.org import PositionDetailResponse, PositionRequest, PositionResponse
from app.services.position_service import PositionService

router = APIRouter(prefix="/api/v1/positions", tags=["positions"])


def _service(session=Depends(get_db)) -> PositionService:
    return PositionService(session)


@router.get("", response_model=list[PositionResponse])
async def list_positions(
    department_id: UUID | None = None,
    svc: PositionService = Depends(_service),
) -> list[PositionResponse]:
    return await svc.list_positions(
        department_id=str(department_id) if department_id is not None else None
    )


@router.get("/{position_id}", response_model=PositionDetailResponse)
async def get_position(
    position_id: UUID,
    svc: PositionService = Depends(_service),
) -> PositionDetailResponse:
    return await svc.get_position(str(position_id))


@router.post("", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
async def create_position(
    body: PositionRequest,
    svc: PositionService = Depends(_service),
) -> PositionResponse:
    return await svc.create_position(
        title=body.title, department_ids=[str(d) for d in body.department_ids]
    )


@router.put("/{position_id}", response_model=PositionResponse)
async def update_position(
    position_id: UUID,
    body: PositionRequest,
    svc: PositionService = Depends(_service),
) -> PositionResponse:
    return await svc.update_position(
        str(position_id),
        title=body.title,
        department_ids=[str(d) for d in body.department_ids],
    )


@router.delete("/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_position(
    position_id: UUID,
    svc: PositionService = Depends(_service),
) -> None:
    await svc.delete_position(str(position_id))
