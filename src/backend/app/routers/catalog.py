"""Catalog router — specializations and equipment categories.

GET    /api/v1/specializations
POST   /api/v1/specializations
PUT    /api/v1/specializations/{id}
DELETE /api/v1/specializations/{id}          — 409 while employees use it

GET    /api/v1/equipment-categories
POST   /api/v1/equipment-categories
PUT    /api/v1/equipment-categories/{id}
DELETE /api/v1/equipment-categories/{id}     — 409 while equipment uses it
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.database import get_db
from app.schemas.inventory import EquipmentCategoryRequest, EquipmentCategoryResponse
from app.schemas.staff import SpecializationRequest, SpecializationResponse
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1", tags=["catalog"])


def _service(session=Depends(get_db)) -> CatalogService:
    return CatalogService(session)


# ── Specialization endpoints ───────────────────────────────────────────────────


@router.get("/specializations", response_model=list[SpecializationResponse])
async def list_specializations(
    svc: CatalogService = Depends(_service),
) -> list[SpecializationResponse]:
    return await svc.list_specializations()


@router.post(
    "/specializations",
    response_model=SpecializationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_specialization(
    body: SpecializationRequest,
    svc: CatalogService = Depends(_service),
) -> SpecializationResponse:
    return await svc.create_specialization(name=body.name)


@router.put("/specializations/{specialization_id}", response_model=SpecializationResponse)
async def update_specialization(
    specialization_id: UUID,
    body: SpecializationRequest,
    svc: CatalogService = Depends(_service),
) -> SpecializationResponse:
    return await svc.update_specialization(str(specialization_id), name=body.name)


@router.delete("/specializations/{specialization_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_specialization(
    specialization_id: UUID,
    svc: CatalogService = Depends(_service),
) -> None:
    await svc.delete_specialization(str(specialization_id))


# ── Equipment category endpoints ───────────────────────────────────────────────


@router.get("/equipment-categories", response_model=list[EquipmentCategoryResponse])
async def list_categories(
    svc: CatalogService = Depends(_service),
) -> list[EquipmentCategoryResponse]:
    return await svc.list_categories()


@router.post(
    "/equipment-categories",
    response_model=EquipmentCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: EquipmentCategoryRequest,
    svc: CatalogService = Depends(_service),
) -> EquipmentCategoryResponse:
    return await svc.create_category(name=body.name, description=body.description)


@router.put("/equipment-categories/{category_id}", response_model=EquipmentCategoryResponse)
async def update_category(
    category_id: UUID,
    body: EquipmentCategoryRequest,
    svc: CatalogService = Depends(_service),
) -> EquipmentCategoryResponse:
    return await svc.update_category(
        str(category_id), name=body.name, description=body.description
    )


@router.delete("/equipment-categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    svc: CatalogService = Depends(_service),
) -> None:
    await svc.delete_category(str(category_id))
