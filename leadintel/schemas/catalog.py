"""Client, project and product schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ProjectStatus = Literal["draft", "active", "paused", "completed", "archived"]


class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ClientRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime


class ProductCreate(BaseModel):
    """Product target profile. Employee range defaults to 0-10000."""

    client_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    target_industries: list[str] = Field(default_factory=list)
    target_employee_min: int = Field(0, ge=0)
    target_employee_max: int = Field(10000, ge=0)
    target_revenue: Optional[dict[str, int]] = None
    target_locations: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)


class ProductRead(ProductCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    target_industries: Optional[list[str]] = None
    target_employee_min: Optional[int] = None
    target_employee_max: Optional[int] = None
    target_locations: Optional[list[str]] = None
    keywords: Optional[list[str]] = None
    benefits: Optional[list[str]] = None


class ProjectCreate(BaseModel):
    """Campaign. min_appointment_rate is a percentage."""

    client_id: int
    product_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: ProjectStatus = "active"
    min_appointment_rate: float = Field(50.0, ge=0, le=100)


class ProjectRead(ProjectCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    min_appointment_rate: Optional[float] = None
    created_at: datetime
