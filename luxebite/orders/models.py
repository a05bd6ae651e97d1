from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    preparing = "preparing"
    ready = "ready"
    delivered = "delivered"
    cancelled = "cancelled"


class PaymentMethod(str, Enum):
    cash = "cash"
    card = "card"


class OrderLineRequest(BaseModel):
    menu_item_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1, le=50)


class OrderCreate(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=5, max_length=30)
    address: str = Field(..., min_length=1, max_length=300)
    items: list[OrderLineRequest] = Field(..., min_length=1)
    payment_method: PaymentMethod = PaymentMethod.cash
    notes: str | None = Field(default=None, max_length=1000)


class OrderItem(BaseModel):
    id: str
    name: str
    price: int
    quantity: int
    image: str | None = None


class Order(BaseModel):
    id: str
    order_number: str
    customer_name: str
    email: str
    phone: str
    address: str
    items: list[OrderItem]
    subtotal: int
    delivery_fee: int
    total: int
    payment_method: PaymentMethod
    status: OrderStatus
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
