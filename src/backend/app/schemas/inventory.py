"""Pydantic schemas for equipment and equipment category endpoints."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EquipmentRequest(BaseModel):
    name: str = Field(min_length=1)
    category_id: UUID
    purchase_date: datetime
    description: str = ""
    serial_number: str | None = None
    status: str = "Used"
    measurement: str = "Unit"
    amount: Decimal = Field(default=Decimal("1"), ge=0)
    department_id: UUID | None = None
    responsible_employee_id: UUID | None = None


class EquipmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    serial_number: str | None
    purchase_date: datetime
    status: str
    measurement: str
    amount: Decimal
    department_id: str | None
    category_id: str
    responsible_employee_id: str | None


class EquipmentCategoryRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""


class EquipmentCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
