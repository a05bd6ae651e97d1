from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_concierge_analytics
from .analytics.store import get_events, record_chat
from .auth.dependencies import require_admin, require_user
from .auth.models import LoginRequest
from .auth.users import authenticate
from .concierge.engine import Concierge, get_concierge
from .concierge.models import (
    ChatRequest,
    ConciergeReply,
    ConversationContext,
    GreetingResponse,
)
from .config import DEFAULT_APP_CONFIG
from .menu.catalog import ALL_CATEGORIES, MenuCatalog, get_catalog, get_menu_metadata
from .menu.models import MenuEntry, MenuMetadata, Mood
from .orders.models import Order, OrderCreate, OrderStatus, OrderStatusUpdate
from .orders.service import OrderService, OrderServiceError, UnknownMenuItem
from .reservations.models import (
    DATE_PATTERN,
    Reservation,
    ReservationCreate,
    ReservationStatus,
    ReservationStatusUpdate,
)
from .reservations.service import ReservationService, ReservationServiceError
from .store import DocumentNotFound, InMemoryDocumentStore

logging.basicConfig(level=DEFAULT_APP_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="LUXE BITE API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_APP_CONFIG.session_secret)

# The document store is built once here and handed to each service.
app.state.store = InMemoryDocumentStore()
app.state.orders = OrderService(
    app.state.store,
    get_catalog(),
    delivery_fee=DEFAULT_APP_CONFIG.delivery_fee,
    tz=DEFAULT_APP_CONFIG.timezone,
)
app.state.reservations = ReservationService(app.state.store, tz=DEFAULT_APP_CONFIG.timezone)


def get_order_service(request: Request) -> OrderService:
    return request.app.state.orders


def get_reservation_service(request: Request) -> ReservationService:
    return request.app.state.reservations


def _service_unavailable(exc: Exception) -> HTTPException:
    return HTTPException(status_code=503, detail=str(exc))


def _not_found(exc: DocumentNotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/menu", response_model=list[MenuEntry])
def menu(
    category: str = ALL_CATEGORIES,
    catalog: MenuCatalog = Depends(get_catalog),
) -> list[MenuEntry]:
    return catalog.get_by_category(category)


@app.get("/menu/metadata", response_model=MenuMetadata)
def menu_metadata() -> MenuMetadata:
    return get_menu_metadata()


@app.get("/menu/featured", response_model=list[MenuEntry])
def menu_featured(catalog: MenuCatalog = Depends(get_catalog)) -> list[MenuEntry]:
    return catalog.get_featured()


@app.get("/menu/moods/{mood}", response_model=list[MenuEntry])
def menu_by_mood(mood: Mood, catalog: MenuCatalog = Depends(get_catalog)) -> list[MenuEntry]:
    return catalog.get_by_mood(mood)


@app.get("/menu/items/{item_id}", response_model=MenuEntry)
def menu_item(item_id: str, catalog: MenuCatalog = Depends(get_catalog)) -> MenuEntry:
    entry = catalog.get_by_id(item_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return entry


# ── Concierge ────────────────────────────────────────────────────────────


@app.get("/concierge/greeting", response_model=GreetingResponse)
def concierge_greeting(concierge: Concierge = Depends(get_concierge)) -> GreetingResponse:
    return GreetingResponse(reply=concierge.get_initial_greeting())


@app.post("/concierge/chat", response_model=ConciergeReply)
def concierge_chat(
    body: ChatRequest,
    concierge: Concierge = Depends(get_concierge),
) -> ConciergeReply:
    # Every turn starts from an empty context; nothing carries over.
    result = concierge.generate_response(body.message, ConversationContext())
    record_chat(result.intent, body.message, [e.id for e in result.recommendations])
    return result


# ── Orders & reservations ────────────────────────────────────────────────


@app.post("/orders", response_model=Order, status_code=201)
def create_order(
    body: OrderCreate,
    orders: OrderService = Depends(get_order_service),
) -> Order:
    try:
        return orders.create_order(body)
    except UnknownMenuItem as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OrderServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.post("/reservations", response_model=Reservation, status_code=201)
def create_reservation(
    body: ReservationCreate,
    reservations: ReservationService = Depends(get_reservation_service),
) -> Reservation:
    try:
        return reservations.create_reservation(body)
    except ReservationServiceError as exc:
        raise _service_unavailable(exc) from exc


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if not user:
        logger.info("Failed sign-in attempt for %s", body.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/admin/orders", response_model=list[Order])
def admin_orders(
    status: OrderStatus | None = None,
    user: dict = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
) -> list[Order]:
    try:
        if status is not None:
            return orders.get_orders_by_status(status)
        return orders.get_all_orders()
    except OrderServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.patch("/admin/orders/{order_id}", response_model=Order)
def admin_update_order(
    order_id: str,
    body: OrderStatusUpdate,
    user: dict = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
) -> Order:
    try:
        return orders.update_order_status(order_id, body.status)
    except DocumentNotFound as exc:
        raise _not_found(exc) from exc
    except OrderServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.get("/admin/reservations", response_model=list[Reservation])
def admin_reservations(
    status: ReservationStatus | None = None,
    date: str | None = Query(default=None, pattern=DATE_PATTERN),
    user: dict = Depends(require_admin),
    reservations: ReservationService = Depends(get_reservation_service),
) -> list[Reservation]:
    try:
        if date is not None:
            found = reservations.get_reservations_by_date(date)
            return [r for r in found if status is None or r.status == status]
        if status is not None:
            return reservations.get_reservations_by_status(status)
        return reservations.get_all_reservations()
    except ReservationServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.get("/admin/reservations/upcoming", response_model=list[Reservation])
def admin_upcoming_reservations(
    user: dict = Depends(require_admin),
    reservations: ReservationService = Depends(get_reservation_service),
) -> list[Reservation]:
    try:
        return reservations.get_upcoming_reservations()
    except ReservationServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.patch("/admin/reservations/{reservation_id}", response_model=Reservation)
def admin_update_reservation(
    reservation_id: str,
    body: ReservationStatusUpdate,
    user: dict = Depends(require_admin),
    reservations: ReservationService = Depends(get_reservation_service),
) -> Reservation:
    try:
        return reservations.update_reservation_status(reservation_id, body.status)
    except DocumentNotFound as exc:
        raise _not_found(exc) from exc
    except ReservationServiceError as exc:
        raise _service_unavailable(exc) from exc


@app.get("/admin/dashboard")
def admin_dashboard(
    user: dict = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
    reservations: ReservationService = Depends(get_reservation_service),
) -> dict:
    try:
        pending_orders = len(orders.get_orders_by_status(OrderStatus.pending))
        pending_reservations = len(
            reservations.get_reservations_by_status(ReservationStatus.pending)
        )
    except (OrderServiceError, ReservationServiceError) as exc:
        raise _service_unavailable(exc) from exc

    return {
        "today_orders": orders.get_today_orders_count(),
        "today_revenue": orders.get_today_revenue(),
        "today_reservations": reservations.get_today_reservations_count(),
        "pending_orders": pending_orders,
        "pending_reservations": pending_reservations,
    }


@app.get("/admin/analytics")
def admin_analytics(
    user: dict = Depends(require_admin),
    catalog: MenuCatalog = Depends(get_catalog),
) -> dict:
    return compute_concierge_analytics(get_events(), catalog)
