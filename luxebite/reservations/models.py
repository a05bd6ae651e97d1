from __future__ import annotations

from datetime import date as calendar_date
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..orders.models import EMAIL_PATTERN

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReservationStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class ReservationCreate(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=5, max_length=30)
    date: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM, 24h")
    guests: int = Field(..., ge=1, le=20)
    occasion: str | None = Field(default=None, max_length=120)
    special_requests: str | None = Field(default=None, max_length=1000)

    @field_validator("date")
    @classmethod
    def _real_date(cls, value: str) -> str:
        # The pattern alone lets through days like 2026-02-30
        calendar_date.fromisoformat(value)
        return value


class Reservation(BaseModel):
    id: str
    reservation_number: str
    customer_name: str
    email: str
    phone: str
    date: str
    time: str
    guests: int
    occasion: str | None = None
    special_requests: str | None = None
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime


class ReservationStatusUpdate(BaseModel):
    status: ReservationStatus
