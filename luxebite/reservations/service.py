from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from ..store import DocumentNotFound, InMemoryDocumentStore
from ..store.references import reference_number
from .models import Reservation, ReservationCreate, ReservationStatus

logger = logging.getLogger(__name__)

RESERVATIONS_COLLECTION = "reservations"
UPCOMING_STATUSES = (ReservationStatus.pending, ReservationStatus.confirmed)


class ReservationServiceError(RuntimeError):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReservationService:
    def __init__(
        self,
        store: InMemoryDocumentStore,
        tz: str,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._tz = ZoneInfo(tz)
        self._clock = clock

    def _load_all(self) -> list[Reservation]:
        return [Reservation(**doc) for doc in self._store.list(RESERVATIONS_COLLECTION)]

    def _today(self) -> str:
        return self._clock().astimezone(self._tz).date().isoformat()

    def create_reservation(self, request: ReservationCreate) -> Reservation:
        now = self._clock()
        data = {
            **request.model_dump(),
            "reservation_number": reference_number("RES", now),
            "status": ReservationStatus.pending,
            "created_at": now,
            "updated_at": now,
        }
        try:
            reservation_id = self._store.add(RESERVATIONS_COLLECTION, data)
        except Exception as exc:
            logger.exception("Error creating reservation")
            raise ReservationServiceError("Failed to create reservation") from exc

        logger.info(
            "Created reservation %s for %d guests on %s %s",
            data["reservation_number"], request.guests, request.date, request.time,
        )
        return Reservation(id=reservation_id, **data)

    def get_all_reservations(self) -> list[Reservation]:
        """All reservations, most recently booked first."""
        try:
            return sorted(self._load_all(), key=lambda r: r.created_at, reverse=True)
        except Exception as exc:
            logger.exception("Error fetching reservations")
            raise ReservationServiceError("Failed to fetch reservations") from exc

    def get_reservations_by_date(self, date: str) -> list[Reservation]:
        try:
            matches = [r for r in self._load_all() if r.date == date]
        except Exception as exc:
            logger.exception("Error fetching reservations by date")
            raise ReservationServiceError("Failed to fetch reservations") from exc
        return sorted(matches, key=lambda r: r.time)

    def get_reservations_by_status(self, status: ReservationStatus) -> list[Reservation]:
        try:
            matches = [r for r in self._load_all() if r.status == status]
        except Exception as exc:
            logger.exception("Error fetching reservations by status")
            raise ReservationServiceError("Failed to fetch reservations") from exc
        return sorted(matches, key=lambda r: r.date)

    def update_reservation_status(
        self, reservation_id: str, status: ReservationStatus,
    ) -> Reservation:
        try:
            self._store.update(RESERVATIONS_COLLECTION, reservation_id, {
                "status": status,
                "updated_at": self._clock(),
            })
            doc = self._store.get(RESERVATIONS_COLLECTION, reservation_id)
        except DocumentNotFound:
            raise
        except Exception as exc:
            logger.exception("Error updating reservation status")
            raise ReservationServiceError("Failed to update reservation status") from exc

        logger.info("Reservation %s moved to %s", reservation_id, status.value)
        return Reservation(**doc)

    def get_today_reservations_count(self) -> int:
        try:
            today = self._today()
            return sum(1 for r in self._load_all() if r.date == today)
        except Exception:
            logger.warning("Could not count today's reservations", exc_info=True)
            return 0

    def get_upcoming_reservations(self) -> list[Reservation]:
        """Pending or confirmed bookings from today on, soonest first."""
        try:
            today = self._today()
            matches = [
                r for r in self._load_all()
                if r.date >= today and r.status in UPCOMING_STATUSES
            ]
        except Exception as exc:
            logger.exception("Error fetching upcoming reservations")
            raise ReservationServiceError("Failed to fetch upcoming reservations") from exc
        return sorted(matches, key=lambda r: (r.date, r.time))

    def subscribe_to_reservations(
        self, callback: Callable[[list[Reservation]], None],
    ) -> Callable[[], None]:
        def on_snapshot(docs: list[dict]) -> None:
            reservations = [Reservation(**d) for d in docs]
            callback(sorted(reservations, key=lambda r: r.created_at, reverse=True))

        return self._store.subscribe(RESERVATIONS_COLLECTION, on_snapshot)
