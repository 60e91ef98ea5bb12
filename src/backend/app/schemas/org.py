"""Pydantic schemas for department and position endpoints."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.inventory import EquipmentResponse
from app.schemas.staff import EmployeeResponse

# ── Position schemas ───────────────────────────────────────────────────────────


class PositionRequest(BaseModel):
    title: str = Field(min_length=1)
    department_ids: list[UUID] = Field(default_factory=list)


class PositionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    is_unemployed: bool


# ── Department schemas ─────────────────────────────────────────────────────────


class DepartmentRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_reserve: bool


class DepartmentDetailResponse(DepartmentResponse):
    positions: list[PositionResponse]
    employees: list[EmployeeResponse]
    equipment: list[EquipmentResponse]


class PositionDetailResponse(PositionResponse):
    departments: list[DepartmentResponse]
