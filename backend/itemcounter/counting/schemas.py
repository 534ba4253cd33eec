"""Pydantic schemas for the counting API."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CountRequest(BaseModel):
    items: list[str]
    data_type: str


class CountResponse(BaseModel):
    success: bool
    message: str
    counts: dict[str, int] = Field(default_factory=dict)
    data_type: str = ""
    total_items: int = 0
    supported_data_types: list[str] | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by every /api/itemcounter route."""

    success: bool
    message: str
    data: T | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RequestExample(BaseModel):
    items: list[str]
    data_type: str


class ApiInfo(BaseModel):
    name: str
    version: str
    description: str
    supported_data_types: list[str]
    examples: dict[str, RequestExample]


class HealthStatus(BaseModel):
    status: str
    uptime: datetime
