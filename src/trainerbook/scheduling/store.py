"""Soft-deletable availability windows and reservation lookups.

Methods only flush; committing is left to the caller so several store
operations can share one transaction (see ``reconciler``).
"""

import logging
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trainerbook.models.availability import AvailabilityWindow
from trainerbook.models.booking import Booking
from trainerbook.models.trainer import TrainerProfile
from trainerbook.scheduling.errors import (
    InvalidInterval,
    InvalidWindowKind,
    NotFound,
    StorageUnavailable,
)
from trainerbook.scheduling.timeutils import DAYS_OF_WEEK, parse_date, time_to_minutes
from trainerbook.scheduling.types import BLOCKING_STATUSES, ScheduleEntry

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as ``StorageUnavailable``."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Storage failure during %s: %s", operation, e)
        raise StorageUnavailable(f"Storage unavailable during {operation}") from e


def _now_ms() -> int:
    return int(time.time() * 1000)


def validate_window(
    kind: str,
    start_time: str,
    end_time: str,
    day_of_week: str | None = None,
    specific_date: str | None = None,
) -> None:
    """Check a window's payload and interval before it is persisted."""
    if kind == "recurring":
        if day_of_week is None or specific_date is not None:
            raise InvalidWindowKind("Recurring windows need day_of_week and no specific_date")
        if day_of_week not in DAYS_OF_WEEK:
            raise InvalidWindowKind(f"Unknown day_of_week {day_of_week!r}")
    elif kind == "specific":
        if specific_date is None or day_of_week is not None:
            raise InvalidWindowKind("Specific windows need specific_date and no day_of_week")
        parse_date(specific_date)
    else:
        raise InvalidWindowKind(f"Unknown window kind {kind!r}")

    if time_to_minutes(start_time) >= time_to_minutes(end_time):
        raise InvalidInterval(f"start_time {start_time} must be before end_time {end_time}")


class AvailabilityStore:
    """Queries and mutations over ``AvailabilityWindow`` records for one session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_trainer(self, trainer_id: int) -> TrainerProfile:
        with storage_errors("get_trainer"):
            trainer = await self._session.get(TrainerProfile, trainer_id)
        if trainer is None:
            raise NotFound(f"Trainer {trainer_id} not found")
        return trainer

    async def get_window(self, window_id: int) -> AvailabilityWindow:
        with storage_errors("get_window"):
            window = await self._session.get(AvailabilityWindow, window_id)
        if window is None:
            raise NotFound(f"Availability window {window_id} not found")
        return window

    async def add_window(
        self,
        trainer_id: int,
        kind: str,
        start_time: str,
        end_time: str,
        day_of_week: str | None = None,
        specific_date: str | None = None,
    ) -> AvailabilityWindow:
        """Insert a new active window. Returns the flushed record (id assigned)."""
        validate_window(kind, start_time, end_time, day_of_week, specific_date)
        window = AvailabilityWindow(
            trainer_id=trainer_id,
            kind=kind,
            day_of_week=day_of_week,
            specific_date=specific_date,
            start_time=start_time,
            end_time=end_time,
            is_active=True,
            created_at=_now_ms(),
        )
        with storage_errors("add_window"):
            self._session.add(window)
            await self._session.flush()
        logger.info(
            "Added %s availability window %s for trainer %s (%s-%s)",
            kind,
            window.id,
            trainer_id,
            start_time,
            end_time,
        )
        return window

    async def list_active_windows(self, trainer_id: int) -> list[AvailabilityWindow]:
        stmt = (
            select(AvailabilityWindow)
            .where(
                AvailabilityWindow.trainer_id == trainer_id,
                AvailabilityWindow.is_active.is_(True),
            )
            .order_by(AvailabilityWindow.id)
        )
        with storage_errors("list_active_windows"):
            result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def deactivate_window(self, window_id: int) -> AvailabilityWindow:
        """Soft-delete a window. Already-inactive windows are left untouched."""
        window = await self.get_window(window_id)
        if not window.is_active:
            return window
        window.is_active = False
        with storage_errors("deactivate_window"):
            await self._session.flush()
        logger.info("Deactivated availability window %s", window_id)
        return window

    async def replace_recurring_schedule(
        self, trainer_id: int, entries: Sequence[ScheduleEntry]
    ) -> tuple[int, int]:
        """Deactivate all active recurring windows, then insert the active entries.

        Entries with ``is_active=False`` mark a day off and create nothing, so
        their times are not checked. Active entries are all validated before
        anything is changed.

        Returns:
            ``(windows_deactivated, windows_created)``.
        """
        active = [entry for entry in entries if entry.is_active]
        for entry in active:
            validate_window("recurring", entry.start_time, entry.end_time, entry.day_of_week)

        stmt = select(AvailabilityWindow).where(
            AvailabilityWindow.trainer_id == trainer_id,
            AvailabilityWindow.kind == "recurring",
            AvailabilityWindow.is_active.is_(True),
        )
        with storage_errors("replace_recurring_schedule"):
            result = await self._session.execute(stmt)
            existing = list(result.scalars().all())
            for window in existing:
                window.is_active = False
            await self._session.flush()

        for entry in active:
            await self.add_window(
                trainer_id,
                "recurring",
                entry.start_time,
                entry.end_time,
                day_of_week=entry.day_of_week,
            )
        return len(existing), len(active)

    async def blocking_reservations(self, trainer_id: int, session_date: str) -> list[Booking]:
        """Pending or confirmed bookings for the trainer on the given date."""
        stmt = select(Booking).where(
            Booking.trainer_id == trainer_id,
            Booking.session_date == session_date,
            Booking.status.in_(sorted(BLOCKING_STATUSES)),
        )
        with storage_errors("blocking_reservations"):
            result = await self._session.execute(stmt)
        return list(result.scalars().all())
