"""Pydantic schemas for employee and specialization endpoints."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EmployeeRequest(BaseModel):
    call_sign: str = Field(min_length=1)
    specialization_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str = ""
    birth_date: date | None = None
    department_id: UUID | None = None
    position_id: UUID | None = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str | None
    last_name: str | None
    call_sign: str
    phone_number: str
    birth_date: date | None
    hire_date: datetime | None
    department_id: str | None
    position_id: str | None
    specialization_id: str


class SpecializationRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class SpecializationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
