from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from ..menu.catalog import MenuCatalog
from ..store import DocumentNotFound, InMemoryDocumentStore
from ..store.references import reference_number
from .models import Order, OrderCreate, OrderItem, OrderStatus

logger = logging.getLogger(__name__)

ORDERS_COLLECTION = "orders"


class OrderServiceError(RuntimeError):
    pass


class UnknownMenuItem(ValueError):
    def __init__(self, menu_item_id: str) -> None:
        super().__init__(f"Unknown menu item: {menu_item_id}")
        self.menu_item_id = menu_item_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: o.created_at, reverse=True)


class OrderService:
    def __init__(
        self,
        store: InMemoryDocumentStore,
        catalog: MenuCatalog,
        delivery_fee: int,
        tz: str,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._delivery_fee = delivery_fee
        self._tz = ZoneInfo(tz)
        self._clock = clock

    def _price_lines(self, request: OrderCreate) -> list[OrderItem]:
        items: list[OrderItem] = []
        for line in request.items:
            entry = self._catalog.get_by_id(line.menu_item_id)
            if entry is None:
                raise UnknownMenuItem(line.menu_item_id)
            items.append(OrderItem(
                id=entry.id,
                name=entry.name,
                price=entry.price,
                quantity=line.quantity,
                image=entry.image,
            ))
        return items

    def _load_all(self) -> list[Order]:
        return [Order(**doc) for doc in self._store.list(ORDERS_COLLECTION)]

    def _start_of_today(self) -> datetime:
        local_now = self._clock().astimezone(self._tz)
        return local_now.replace(hour=0, minute=0, second=0, microsecond=0)

    def create_order(self, request: OrderCreate) -> Order:
        """Price every line from the catalog and store a new pending order."""
        items = self._price_lines(request)
        subtotal = sum(i.price * i.quantity for i in items)
        delivery_fee = self._delivery_fee if subtotal > 0 else 0
        now = self._clock()

        data = {
            "order_number": reference_number("ORD", now),
            "customer_name": request.customer_name,
            "email": request.email,
            "phone": request.phone,
            "address": request.address,
            "items": [i.model_dump() for i in items],
            "subtotal": subtotal,
            "delivery_fee": delivery_fee,
            "total": subtotal + delivery_fee,
            "payment_method": request.payment_method,
            "status": OrderStatus.pending,
            "notes": request.notes,
            "created_at": now,
            "updated_at": now,
        }
        try:
            order_id = self._store.add(ORDERS_COLLECTION, data)
        except Exception as exc:
            logger.exception("Error creating order")
            raise OrderServiceError("Failed to create order") from exc

        logger.info("Created order %s (%s) total=%d", data["order_number"], order_id, data["total"])
        return Order(id=order_id, **data)

    def get_all_orders(self) -> list[Order]:
        try:
            return _newest_first(self._load_all())
        except Exception as exc:
            logger.exception("Error fetching orders")
            raise OrderServiceError("Failed to fetch orders") from exc

    def get_orders_by_status(self, status: OrderStatus) -> list[Order]:
        try:
            return _newest_first([o for o in self._load_all() if o.status == status])
        except Exception as exc:
            logger.exception("Error fetching orders by status")
            raise OrderServiceError("Failed to fetch orders") from exc

    def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        try:
            self._store.update(ORDERS_COLLECTION, order_id, {
                "status": status,
                "updated_at": self._clock(),
            })
            doc = self._store.get(ORDERS_COLLECTION, order_id)
        except DocumentNotFound:
            raise
        except Exception as exc:
            logger.exception("Error updating order status")
            raise OrderServiceError("Failed to update order status") from exc

        logger.info("Order %s moved to %s", order_id, status.value)
        return Order(**doc)

    def get_today_orders_count(self) -> int:
        try:
            start = self._start_of_today()
            return sum(1 for o in self._load_all() if o.created_at >= start)
        except Exception:
            logger.warning("Could not count today's orders", exc_info=True)
            return 0

    def get_today_revenue(self) -> int:
        """Sum of today's order totals, cancelled orders excluded."""
        try:
            start = self._start_of_today()
            return sum(
                o.total for o in self._load_all()
                if o.created_at >= start and o.status != OrderStatus.cancelled
            )
        except Exception:
            logger.warning("Could not compute today's revenue", exc_info=True)
            return 0

    def subscribe_to_orders(self, callback: Callable[[list[Order]], None]) -> Callable[[], None]:
        def on_snapshot(docs: list[dict]) -> None:
            callback(_newest_first([Order(**d) for d in docs]))

        return self._store.subscribe(ORDERS_COLLECTION, on_snapshot)
